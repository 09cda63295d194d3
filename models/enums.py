"""
Enumerations and constants for the SEO Guidance Engine.

This module defines all the fixed values used in the deterministic scoring model:
category names, statuses, the category weight table and every threshold the
field analyzers apply.
"""

from enum import Enum
from typing import Dict, List


class CategoryName(str, Enum):
    """In-page checklist categories, in display order."""
    META_TAGS = "metaTags"
    CONTENT = "content"
    IMAGES = "images"
    STRUCTURED_DATA = "structuredData"
    TECHNICAL = "technical"
    MOBILE = "mobile"


class CheckStatus(str, Enum):
    """
    Outcome of a single checklist finding.

    Scoring weight (see evaluators.scoring):
    - pass: full share of the category weight
    - warning: half share
    - fail / info: nothing
    """
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"
    INFO = "info"


class Priority(str, Enum):
    """Priority attached to a checklist finding."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Severity(str, Enum):
    """Severity bucket of a surfaced issue."""
    CRITICAL = "critical"
    WARNING = "warning"
    SUGGESTION = "suggestion"


class OffPageCategory(str, Enum):
    """Categories of off-page (advisory) recommendations."""
    LINK_BUILDING = "link-building"
    SOCIAL_SIGNALS = "social-signals"
    CONTENT_DISTRIBUTION = "content-distribution"
    AUTHORITY_BUILDING = "authority-building"


class OffPagePriority(str, Enum):
    """Priority of an off-page recommendation."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ContentDepth(str, Enum):
    """Content depth derived from word count."""
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


# Fixed order of the in-page checklist
CATEGORY_ORDER: List[CategoryName] = [
    CategoryName.META_TAGS,
    CategoryName.CONTENT,
    CategoryName.IMAGES,
    CategoryName.STRUCTURED_DATA,
    CategoryName.TECHNICAL,
    CategoryName.MOBILE,
]

# Category weights (total = 100), used as each category's max score
CATEGORY_WEIGHTS: Dict[CategoryName, int] = {
    CategoryName.META_TAGS: 20,
    CategoryName.CONTENT: 25,
    CategoryName.IMAGES: 15,
    CategoryName.STRUCTURED_DATA: 20,
    CategoryName.TECHNICAL: 15,
    CategoryName.MOBILE: 5,
}

# Partial credit for a warning, as a fraction of a passing item's share
WARNING_CREDIT = 0.5

# SEO title length in characters (inclusive optimal range)
TITLE_LENGTH_THRESHOLDS = {
    "min": 30,   # < 30 → warning
    "max": 60,   # > 60 → warning
}

# SEO description length in characters (inclusive optimal range)
DESCRIPTION_LENGTH_THRESHOLDS = {
    "min": 120,  # < 120 → warning
    "max": 160,  # > 160 → warning
}

# Word count buckets
WORD_COUNT_THRESHOLDS = {
    "fail_below": 300,     # 1-299 → fail
    "optimal_min": 800,    # 300-799 → warning
    "optimal_max": 3000,   # 800-3000 → pass, above → info
}

# FAQ count for FAQ rich results
FAQ_THRESHOLDS = {
    "optimal_min": 3,  # 0 → info, 1-2 → warning, 3+ → pass
}

# Content depth boundaries (word count)
CONTENT_DEPTH_THRESHOLDS = {
    "medium_min": 500,
    "long_min": 1500,
}

DEFAULT_META_ROBOTS = "index, follow"

# Documentation cited by checklist findings
OFFICIAL_SOURCES = {
    "title": "https://developers.google.com/search/docs/appearance/title-link",
    "snippet": "https://developers.google.com/search/docs/appearance/snippet",
    "robots": "https://developers.google.com/search/docs/crawling-indexing/robots-meta-tag",
    "helpful_content": "https://developers.google.com/search/docs/fundamentals/creating-helpful-content",
    "images": "https://developers.google.com/search/docs/appearance/google-images",
    "structured_data": "https://developers.google.com/search/docs/appearance/structured-data",
    "article_schema": "https://schema.org/Article",
    "faq": "https://developers.google.com/search/docs/appearance/structured-data/faqpage",
    "canonical": "https://developers.google.com/search/docs/crawling-indexing/consolidate-duplicate-urls",
    "https": "https://developers.google.com/search/docs/crawling-indexing/http-network-errors",
    "sitemap": "https://www.sitemaps.org/protocol.html",
    "mobile": "https://developers.google.com/search/docs/crawling-indexing/mobile/mobile-sites-mobile-first-indexing",
    "core_web_vitals": "https://developers.google.com/search/docs/appearance/core-web-vitals",
}
