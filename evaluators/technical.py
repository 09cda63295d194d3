"""
Technical Analyzer.

Checks the canonical URL (presence and HTTPS) and the sitemap settings.
"""

from typing import List, Optional

from models.enums import CategoryName, CheckStatus, Priority, OFFICIAL_SOURCES
from models.schemas import ChecklistItem, ContentItem


def analyze_technical(item: ContentItem) -> List[ChecklistItem]:
    """
    Analyze technical SEO settings.

    Rules (deterministic):
        Canonical: missing → warning/high, not HTTPS → warning/high, HTTPS → pass/high
        Sitemap priority / change frequency: emitted as pass/low only when set
    """
    items = [_check_canonical(item.canonical_url)]

    # 0.0 is a valid priority, so only None counts as unset
    if item.sitemap_priority is not None:
        items.append(ChecklistItem(
            id="sitemap-priority",
            category=CategoryName.TECHNICAL,
            label="Sitemap Priority",
            status=CheckStatus.PASS,
            current_value=str(item.sitemap_priority),
            recommendation=f"Sitemap priority is set ({item.sitemap_priority})",
            field="sitemapPriority",
            priority=Priority.LOW,
            official_source=OFFICIAL_SOURCES["sitemap"],
        ))

    if item.sitemap_change_freq is not None:
        items.append(ChecklistItem(
            id="sitemap-change-freq",
            category=CategoryName.TECHNICAL,
            label="Sitemap Change Frequency",
            status=CheckStatus.PASS,
            current_value=item.sitemap_change_freq,
            recommendation=f"Sitemap change frequency is set ({item.sitemap_change_freq})",
            field="sitemapChangeFreq",
            priority=Priority.LOW,
            official_source=OFFICIAL_SOURCES["sitemap"],
        ))

    return items


def _check_canonical(canonical_url: Optional[str]) -> ChecklistItem:
    if not canonical_url:
        return ChecklistItem(
            id="canonical-missing",
            category=CategoryName.TECHNICAL,
            label="Canonical URL",
            status=CheckStatus.WARNING,
            target_value="https://...",
            recommendation=(
                "Set a canonical URL to prevent duplicate content issues "
                "(will be generated from the slug on publish)"
            ),
            field="canonicalUrl",
            priority=Priority.HIGH,
            official_source=OFFICIAL_SOURCES["canonical"],
        )

    if not canonical_url.startswith("https://"):
        return ChecklistItem(
            id="canonical-not-https",
            category=CategoryName.TECHNICAL,
            label="Canonical URL",
            status=CheckStatus.WARNING,
            current_value=canonical_url,
            target_value="https://...",
            recommendation="Canonical URL must use HTTPS. Replace http:// with https://",
            field="canonicalUrl",
            priority=Priority.HIGH,
            official_source=OFFICIAL_SOURCES["https"],
        )

    return ChecklistItem(
        id="canonical-ok",
        category=CategoryName.TECHNICAL,
        label="Canonical URL",
        status=CheckStatus.PASS,
        current_value=canonical_url,
        recommendation="Canonical URL is set and uses HTTPS",
        field="canonicalUrl",
        priority=Priority.HIGH,
    )
