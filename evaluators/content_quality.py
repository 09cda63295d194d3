"""
Content Quality Analyzer.

Scores the article body by length and checks that a content depth is set.
"""

from typing import List, Optional

from config import settings
from models.enums import (
    CategoryName,
    CheckStatus,
    Priority,
    OFFICIAL_SOURCES,
    WORD_COUNT_THRESHOLDS,
)
from models.schemas import ChecklistItem, ContentItem
from utils.word_count import count_words, determine_content_depth

WORD_COUNT_TARGET = (
    f"{WORD_COUNT_THRESHOLDS['optimal_min']}-{WORD_COUNT_THRESHOLDS['optimal_max']} words"
)


def resolve_word_count(item: ContentItem) -> int:
    """Precomputed word count if set, otherwise counted from the body."""
    if item.word_count is not None:
        return item.word_count
    language = item.in_language or settings.default_language
    return count_words(item.content, language)


def analyze_content_quality(item: ContentItem) -> List[ChecklistItem]:
    """
    Analyze the content body of an item.

    Word count buckets (exactly one fires):
        0 → fail/critical
        1-299 → fail/critical
        300-799 → warning/high
        800-3000 → pass/high
        > 3000 → info/low

    Content depth: set → pass/low, missing → info/low.
    """
    word_count = resolve_word_count(item)
    return [
        _check_word_count(word_count),
        _check_content_depth(item.content_depth, word_count),
    ]


def _check_word_count(word_count: int) -> ChecklistItem:
    if word_count == 0:
        return ChecklistItem(
            id="word-count-missing",
            category=CategoryName.CONTENT,
            label="Content Length",
            status=CheckStatus.FAIL,
            current_value=0,
            target_value=WORD_COUNT_TARGET,
            recommendation="Add article content. Aim for 800+ words for comprehensive coverage.",
            field="content",
            priority=Priority.CRITICAL,
            official_source=OFFICIAL_SOURCES["helpful_content"],
        )

    if word_count < WORD_COUNT_THRESHOLDS["fail_below"]:
        return ChecklistItem(
            id="word-count-low",
            category=CategoryName.CONTENT,
            label="Content Length",
            status=CheckStatus.FAIL,
            current_value=word_count,
            target_value=WORD_COUNT_TARGET,
            recommendation=(
                f"Content is too thin ({word_count} words). "
                "Articles under 300 words rarely rank; expand to at least 800 words."
            ),
            field="content",
            priority=Priority.CRITICAL,
            official_source=OFFICIAL_SOURCES["helpful_content"],
        )

    if word_count < WORD_COUNT_THRESHOLDS["optimal_min"]:
        return ChecklistItem(
            id="word-count-short",
            category=CategoryName.CONTENT,
            label="Content Length",
            status=CheckStatus.WARNING,
            current_value=word_count,
            target_value=WORD_COUNT_TARGET,
            recommendation=(
                f"Content is short ({word_count} words). "
                "Expand to 800-3000 words to cover the topic in depth."
            ),
            field="content",
            priority=Priority.HIGH,
            official_source=OFFICIAL_SOURCES["helpful_content"],
        )

    if word_count <= WORD_COUNT_THRESHOLDS["optimal_max"]:
        return ChecklistItem(
            id="word-count-optimal",
            category=CategoryName.CONTENT,
            label="Content Length",
            status=CheckStatus.PASS,
            current_value=word_count,
            target_value=WORD_COUNT_TARGET,
            recommendation=f"Content length is optimal ({word_count} words)",
            field="content",
            priority=Priority.HIGH,
        )

    return ChecklistItem(
        id="word-count-long",
        category=CategoryName.CONTENT,
        label="Content Length",
        status=CheckStatus.INFO,
        current_value=word_count,
        target_value=WORD_COUNT_TARGET,
        recommendation=(
            f"Content is very long ({word_count} words). "
            "Consider splitting it into a series or adding a table of contents."
        ),
        field="content",
        priority=Priority.LOW,
    )


def _check_content_depth(content_depth: Optional[str], word_count: int) -> ChecklistItem:
    if content_depth:
        return ChecklistItem(
            id="content-depth",
            category=CategoryName.CONTENT,
            label="Content Depth",
            status=CheckStatus.PASS,
            current_value=content_depth,
            recommendation=f"Content depth is set ({content_depth})",
            field="contentDepth",
            priority=Priority.LOW,
        )

    suggested = determine_content_depth(word_count).value
    return ChecklistItem(
        id="content-depth",
        category=CategoryName.CONTENT,
        label="Content Depth",
        status=CheckStatus.INFO,
        recommendation=(
            f"Set content depth to help classify the article "
            f"('{suggested}' based on {word_count} words; calculated automatically on save)"
        ),
        field="contentDepth",
        priority=Priority.LOW,
    )
