"""Images Analyzer: checks that a featured image is set."""

from typing import List

from models.enums import CategoryName, CheckStatus, Priority, OFFICIAL_SOURCES
from models.schemas import ChecklistItem, ContentItem


def analyze_images(item: ContentItem) -> List[ChecklistItem]:
    """Featured image set → pass/high, missing → fail/critical."""
    if item.featured_image_id:
        return [
            ChecklistItem(
                id="featured-image-present",
                category=CategoryName.IMAGES,
                label="Featured Image",
                status=CheckStatus.PASS,
                recommendation="Featured image is set",
                field="featuredImageId",
                priority=Priority.HIGH,
            )
        ]

    return [
        ChecklistItem(
            id="featured-image-missing",
            category=CategoryName.IMAGES,
            label="Featured Image",
            status=CheckStatus.FAIL,
            recommendation=(
                "Add a featured image (at least 1200px wide) for search results, "
                "Discover and social sharing"
            ),
            field="featuredImageId",
            priority=Priority.CRITICAL,
            official_source=OFFICIAL_SOURCES["images"],
        )
    ]
