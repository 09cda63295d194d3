"""
Category scoring and guidance result generation.

Runs the field analyzers, scores each category against its weight and
assembles the final guidance response. All logic is deterministic with
documented rules; only last_updated varies between runs.
"""

import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence

from evaluators.content_quality import analyze_content_quality
from evaluators.images import analyze_images
from evaluators.meta_tags import analyze_meta_tags
from evaluators.mobile import analyze_mobile
from evaluators.off_page import advise_off_page
from evaluators.structured_data import analyze_structured_data
from evaluators.technical import analyze_technical
from models.enums import (
    CATEGORY_ORDER,
    CATEGORY_WEIGHTS,
    WARNING_CREDIT,
    CategoryName,
    CheckStatus,
    Priority,
    Severity,
)
from models.schemas import (
    CategoryScore,
    ChecklistItem,
    ContentItem,
    GuidanceOptions,
    Issue,
    SEOGuidanceResult,
)
from utils.rounding import compute_bounded_score, compute_percentage

logger = logging.getLogger(__name__)

Analyzer = Callable[[ContentItem], List[ChecklistItem]]

# One analyzer per category, independent of each other
ANALYZERS: Dict[CategoryName, Analyzer] = {
    CategoryName.META_TAGS: analyze_meta_tags,
    CategoryName.CONTENT: analyze_content_quality,
    CategoryName.IMAGES: analyze_images,
    CategoryName.STRUCTURED_DATA: analyze_structured_data,
    CategoryName.TECHNICAL: analyze_technical,
    CategoryName.MOBILE: analyze_mobile,
}


def calculate_category_score(items: Sequence[ChecklistItem], max_score: int) -> CategoryScore:
    """
    Reduce the findings of one category to a score.

    Formula:
        share = max_score / total
        pass contributes share, warning share × 0.5, fail and info nothing
        score = round_half_up(sum of contributions), capped at max_score
        percentage = round_half_up(passed / total × 100)

    An empty category scores 0 without dividing.

    Args:
        items: Findings of a single category
        max_score: Category weight

    Returns:
        CategoryScore
    """
    total = len(items)
    passed = sum(1 for item in items if item.status == CheckStatus.PASS)

    if total == 0:
        return CategoryScore(score=0, max_score=max_score, percentage=0, passed=0, total=0)

    share = max_score / total
    raw_score = 0.0
    for item in items:
        if item.status == CheckStatus.PASS:
            raw_score += share
        elif item.status == CheckStatus.WARNING:
            raw_score += share * WARNING_CREDIT

    return CategoryScore(
        score=compute_bounded_score(raw_score, max_score),
        max_score=max_score,
        percentage=compute_percentage(passed, total),
        passed=passed,
        total=total,
    )


def compute_overall_score(categories: Dict[CategoryName, CategoryScore]) -> int:
    """
    Compute the overall score.

    Category weights sum to 100, so the sum of category scores is already
    a 0-100 value. Result is clamped to 0-100.
    """
    total = sum(category.score for category in categories.values())
    return max(0, min(100, total))


def _to_issue(item: ChecklistItem, severity: Severity) -> Issue:
    return Issue(
        code=item.id,
        category=item.category,
        message=item.label,
        fix=item.recommendation,
        field=item.field,
        severity=severity,
    )


def partition_issues(items: Sequence[ChecklistItem]) -> Dict[Severity, List[Issue]]:
    """
    Partition findings into severity buckets.

    Rules:
        critical: status fail AND priority critical
        warning: status warning
        suggestion: status info

    A fail with a priority below critical lands in no bucket.
    """
    buckets: Dict[Severity, List[Issue]] = {severity: [] for severity in Severity}

    for item in items:
        if item.status == CheckStatus.FAIL and item.priority == Priority.CRITICAL:
            buckets[Severity.CRITICAL].append(_to_issue(item, Severity.CRITICAL))
        elif item.status == CheckStatus.WARNING:
            buckets[Severity.WARNING].append(_to_issue(item, Severity.WARNING))
        elif item.status == CheckStatus.INFO:
            buckets[Severity.SUGGESTION].append(_to_issue(item, Severity.SUGGESTION))

    return buckets


def run_analyzers(item: ContentItem) -> Dict[CategoryName, List[ChecklistItem]]:
    """Run every field analyzer, keyed by category in display order."""
    return {category: ANALYZERS[category](item) for category in CATEGORY_ORDER}


def evaluate(
    item: ContentItem,
    options: Optional[GuidanceOptions] = None
) -> SEOGuidanceResult:
    """
    Generate the complete SEO guidance for a content item.

    This is the main function that runs all analyzers and assembles
    the presentation-ready result.

    Args:
        item: Content item to analyze
        options: Optional guidance options. validate_structured_data is
            accepted but not implemented; requesting it changes nothing.

    Returns:
        SEOGuidanceResult
    """
    options = options or GuidanceOptions()
    if options.validate_structured_data:
        logger.debug("validate_structured_data requested; JSON-LD validation is not implemented")

    findings = run_analyzers(item)

    in_page_checklist: List[ChecklistItem] = []
    for category in CATEGORY_ORDER:
        in_page_checklist.extend(findings[category])

    off_page_guidance = advise_off_page(item)

    categories: Dict[CategoryName, CategoryScore] = {}
    for category in CATEGORY_ORDER:
        categories[category] = calculate_category_score(
            findings[category],
            CATEGORY_WEIGHTS[category],
        )
        logger.debug(
            f"Category {category.value}: score={categories[category].score}/"
            f"{categories[category].max_score}, passed={categories[category].passed}/"
            f"{categories[category].total}"
        )

    overall_score = compute_overall_score(categories)
    buckets = partition_issues(in_page_checklist)

    logger.debug(
        f"Guidance complete: overall={overall_score}, "
        f"critical={len(buckets[Severity.CRITICAL])}, "
        f"warnings={len(buckets[Severity.WARNING])}, "
        f"suggestions={len(buckets[Severity.SUGGESTION])}"
    )

    return SEOGuidanceResult(
        overall_score=overall_score,
        categories=categories,
        in_page_checklist=in_page_checklist,
        off_page_guidance=off_page_guidance,
        critical_issues=buckets[Severity.CRITICAL],
        warnings=buckets[Severity.WARNING],
        suggestions=buckets[Severity.SUGGESTION],
        last_updated=datetime.now().astimezone(),
    )


# Name used by the editorial dashboard
analyze_seo_guidance = evaluate
