"""Evaluators package for the SEO Guidance Engine."""

from .meta_tags import analyze_meta_tags
from .content_quality import analyze_content_quality
from .images import analyze_images
from .structured_data import analyze_structured_data
from .technical import analyze_technical
from .mobile import analyze_mobile
from .off_page import advise_off_page
from .scoring import (
    analyze_seo_guidance,
    calculate_category_score,
    evaluate,
    partition_issues,
)

__all__ = [
    "analyze_meta_tags",
    "analyze_content_quality",
    "analyze_images",
    "analyze_structured_data",
    "analyze_technical",
    "analyze_mobile",
    "advise_off_page",
    "analyze_seo_guidance",
    "calculate_category_score",
    "evaluate",
    "partition_issues",
]
