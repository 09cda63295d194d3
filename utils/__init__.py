"""Utilities package for the SEO Guidance Engine."""

from .rounding import round_half_up, compute_percentage, compute_bounded_score
from .word_count import (
    count_words,
    detect_arabic_text,
    calculate_reading_time,
    determine_content_depth,
)

__all__ = [
    "round_half_up",
    "compute_percentage",
    "compute_bounded_score",
    "count_words",
    "detect_arabic_text",
    "calculate_reading_time",
    "determine_content_depth",
]
