"""Models package for the SEO Guidance Engine."""

from .schemas import (
    FAQ,
    RelatedArticle,
    Citation,
    ContentItem,
    ChecklistItem,
    CategoryScore,
    Issue,
    OffPageRecommendation,
    GuidanceOptions,
    SEOGuidanceResult,
    GuidanceRequest,
    WordCountRequest,
    WordCountResponse,
    EngineStatus,
    HealthResponse,
    ErrorResponse,
)
from .enums import (
    CategoryName,
    CheckStatus,
    Priority,
    Severity,
    OffPageCategory,
    OffPagePriority,
    ContentDepth,
    CATEGORY_ORDER,
    CATEGORY_WEIGHTS,
)

__all__ = [
    "FAQ",
    "RelatedArticle",
    "Citation",
    "ContentItem",
    "ChecklistItem",
    "CategoryScore",
    "Issue",
    "OffPageRecommendation",
    "GuidanceOptions",
    "SEOGuidanceResult",
    "GuidanceRequest",
    "WordCountRequest",
    "WordCountResponse",
    "EngineStatus",
    "HealthResponse",
    "ErrorResponse",
    "CategoryName",
    "CheckStatus",
    "Priority",
    "Severity",
    "OffPageCategory",
    "OffPagePriority",
    "ContentDepth",
    "CATEGORY_ORDER",
    "CATEGORY_WEIGHTS",
]
