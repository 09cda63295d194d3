"""
Meta Tags Analyzer.

Checks the SEO title, SEO description and meta robots directive.
The title falls back to the article title and the description to the
excerpt, as search engines would display them.
"""

from typing import List

from models.enums import (
    CategoryName,
    CheckStatus,
    Priority,
    DEFAULT_META_ROBOTS,
    DESCRIPTION_LENGTH_THRESHOLDS,
    OFFICIAL_SOURCES,
    TITLE_LENGTH_THRESHOLDS,
)
from models.schemas import ChecklistItem, ContentItem

TITLE_TARGET = f"{TITLE_LENGTH_THRESHOLDS['min']}-{TITLE_LENGTH_THRESHOLDS['max']} characters"
DESCRIPTION_TARGET = (
    f"{DESCRIPTION_LENGTH_THRESHOLDS['min']}-{DESCRIPTION_LENGTH_THRESHOLDS['max']} characters"
)


def analyze_meta_tags(item: ContentItem) -> List[ChecklistItem]:
    """
    Analyze meta tags of a content item.

    Rules (deterministic):
        Title: 0 → fail, < 30 → warning, 30-60 → pass, > 60 → warning
        Description: 0 → fail, < 120 → warning, 120-160 → pass, > 160 → warning
        Robots: contains "noindex" → warning, otherwise pass

    Args:
        item: Content item to analyze

    Returns:
        Three checklist items (title, description, robots)
    """
    seo_title = item.seo_title or item.title or ""
    seo_description = item.seo_description or item.excerpt or ""

    return [
        _check_title(len(seo_title)),
        _check_description(len(seo_description)),
        _check_robots(item.meta_robots or DEFAULT_META_ROBOTS),
    ]


def _check_title(title_length: int) -> ChecklistItem:
    if title_length == 0:
        return ChecklistItem(
            id="seo-title-missing",
            category=CategoryName.META_TAGS,
            label="SEO Title",
            status=CheckStatus.FAIL,
            current_value=0,
            target_value=TITLE_TARGET,
            recommendation="Add SEO title (30-60 characters optimal, 50-55 best for search results)",
            field="seoTitle",
            priority=Priority.CRITICAL,
            official_source=OFFICIAL_SOURCES["title"],
        )

    if title_length < TITLE_LENGTH_THRESHOLDS["min"]:
        return ChecklistItem(
            id="seo-title-short",
            category=CategoryName.META_TAGS,
            label="SEO Title Length",
            status=CheckStatus.WARNING,
            current_value=title_length,
            target_value=TITLE_TARGET,
            recommendation=(
                f"SEO title is short ({title_length} chars). "
                "Aim for 30-60 characters for optimal display in search results."
            ),
            field="seoTitle",
            priority=Priority.HIGH,
            official_source=OFFICIAL_SOURCES["title"],
        )

    if title_length > TITLE_LENGTH_THRESHOLDS["max"]:
        return ChecklistItem(
            id="seo-title-long",
            category=CategoryName.META_TAGS,
            label="SEO Title Length",
            status=CheckStatus.WARNING,
            current_value=title_length,
            target_value=TITLE_TARGET,
            recommendation=(
                f"SEO title is long ({title_length} chars). "
                "Keep it under 60 characters to avoid truncation in search results."
            ),
            field="seoTitle",
            priority=Priority.MEDIUM,
            official_source=OFFICIAL_SOURCES["title"],
        )

    return ChecklistItem(
        id="seo-title-optimal",
        category=CategoryName.META_TAGS,
        label="SEO Title Length",
        status=CheckStatus.PASS,
        current_value=title_length,
        target_value=TITLE_TARGET,
        recommendation=f"SEO title length is optimal ({title_length} chars)",
        field="seoTitle",
        priority=Priority.HIGH,
    )


def _check_description(description_length: int) -> ChecklistItem:
    if description_length == 0:
        return ChecklistItem(
            id="seo-description-missing",
            category=CategoryName.META_TAGS,
            label="SEO Description",
            status=CheckStatus.FAIL,
            current_value=0,
            target_value=DESCRIPTION_TARGET,
            recommendation=(
                "Add SEO description (120-160 characters optimal, 150-155 best for search snippets)"
            ),
            field="seoDescription",
            priority=Priority.CRITICAL,
            official_source=OFFICIAL_SOURCES["snippet"],
        )

    if description_length < DESCRIPTION_LENGTH_THRESHOLDS["min"]:
        return ChecklistItem(
            id="seo-description-short",
            category=CategoryName.META_TAGS,
            label="SEO Description Length",
            status=CheckStatus.WARNING,
            current_value=description_length,
            target_value=DESCRIPTION_TARGET,
            recommendation=(
                f"SEO description is short ({description_length} chars). "
                "Aim for 120-160 characters for optimal display."
            ),
            field="seoDescription",
            priority=Priority.HIGH,
            official_source=OFFICIAL_SOURCES["snippet"],
        )

    if description_length > DESCRIPTION_LENGTH_THRESHOLDS["max"]:
        return ChecklistItem(
            id="seo-description-long",
            category=CategoryName.META_TAGS,
            label="SEO Description Length",
            status=CheckStatus.WARNING,
            current_value=description_length,
            target_value=DESCRIPTION_TARGET,
            recommendation=(
                f"SEO description is long ({description_length} chars). "
                "Keep it under 160 characters to avoid truncation."
            ),
            field="seoDescription",
            priority=Priority.MEDIUM,
            official_source=OFFICIAL_SOURCES["snippet"],
        )

    return ChecklistItem(
        id="seo-description-optimal",
        category=CategoryName.META_TAGS,
        label="SEO Description Length",
        status=CheckStatus.PASS,
        current_value=description_length,
        target_value=DESCRIPTION_TARGET,
        recommendation=f"SEO description length is optimal ({description_length} chars)",
        field="seoDescription",
        priority=Priority.HIGH,
    )


def _check_robots(meta_robots: str) -> ChecklistItem:
    if "noindex" in meta_robots:
        return ChecklistItem(
            id="meta-robots-noindex",
            category=CategoryName.META_TAGS,
            label="Meta Robots",
            status=CheckStatus.WARNING,
            current_value=meta_robots,
            target_value=DEFAULT_META_ROBOTS,
            recommendation=(
                "Article is set to noindex - it will not appear in search results. "
                "Use only if intentionally hiding content."
            ),
            field="metaRobots",
            priority=Priority.HIGH,
            official_source=OFFICIAL_SOURCES["robots"],
        )

    return ChecklistItem(
        id="meta-robots-ok",
        category=CategoryName.META_TAGS,
        label="Meta Robots",
        status=CheckStatus.PASS,
        current_value=meta_robots,
        target_value=DEFAULT_META_ROBOTS,
        recommendation="Meta robots configured correctly",
        field="metaRobots",
        priority=Priority.MEDIUM,
    )
