"""
Mobile Analyzer.

Mobile friendliness and Core Web Vitals depend on the rendered site, not on
the form data, so this analyzer emits two fixed reminders. Both are info,
which scores nothing: the mobile category stays at 0 of its weight.
"""

from typing import List

from models.enums import CategoryName, CheckStatus, Priority, OFFICIAL_SOURCES
from models.schemas import ChecklistItem, ContentItem


def analyze_mobile(item: ContentItem) -> List[ChecklistItem]:
    return [
        ChecklistItem(
            id="mobile-friendly",
            category=CategoryName.MOBILE,
            label="Mobile Friendliness",
            status=CheckStatus.INFO,
            recommendation=(
                "Preview the article on a phone: text readable without zooming, "
                "tap targets spaced, images scaled to the viewport"
            ),
            priority=Priority.HIGH,
            official_source=OFFICIAL_SOURCES["mobile"],
        ),
        ChecklistItem(
            id="core-web-vitals",
            category=CategoryName.MOBILE,
            label="Core Web Vitals",
            status=CheckStatus.INFO,
            recommendation=(
                "Monitor LCP (< 2.5s), INP (< 200ms) and CLS (< 0.1) after publishing; "
                "compress large images and avoid layout shifts from embeds"
            ),
            priority=Priority.MEDIUM,
            official_source=OFFICIAL_SOURCES["core_web_vitals"],
        ),
    ]
