"""
Pydantic schemas for the SEO Guidance Engine.

Defines the content item the analyzers read, the checklist and score models
they produce, and the request/response models of the HTTP API.
Attributes are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import (
    CategoryName,
    CheckStatus,
    ContentDepth,
    OffPageCategory,
    OffPagePriority,
    Priority,
    Severity,
)


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, accepting either spelling."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FAQ(CamelModel):
    """A question/answer pair attached to an article."""
    question: Optional[str] = None
    answer: Optional[str] = None


class RelatedArticle(CamelModel):
    """Reference to another article linked from this one."""
    related_id: Optional[str] = None
    relationship_type: Optional[str] = None
    id: Optional[str] = None
    title: Optional[str] = None
    slug: Optional[str] = None


class Citation(CamelModel):
    """External source cited by the article."""
    url: Optional[str] = None
    title: Optional[str] = None


class ContentItem(CamelModel):
    """
    Editorial form data of one content item.

    Every attribute is optional. Text and id attributes count as present
    only when non-empty; missing values are normalized by the analyzers.
    """
    model_config = ConfigDict(frozen=True)

    content: Optional[str] = None
    word_count: Optional[int] = Field(None, ge=0, description="Precomputed word count")
    in_language: Optional[str] = Field(None, description="Language code, e.g. 'ar'")
    content_depth: Optional[str] = None

    title: Optional[str] = None
    excerpt: Optional[str] = None
    seo_title: Optional[str] = None
    seo_description: Optional[str] = None
    meta_robots: Optional[str] = None

    featured_image_id: Optional[str] = None

    json_ld_structured_data: Optional[Dict[str, Any]] = None
    author_id: Optional[str] = None
    date_published: Optional[datetime] = None
    main_entity_of_page: Optional[str] = None
    canonical_url: Optional[str] = None
    faqs: Optional[List[FAQ]] = None

    sitemap_priority: Optional[float] = Field(None, ge=0, le=1)
    sitemap_change_freq: Optional[str] = None

    related_articles: Optional[List[RelatedArticle]] = None
    og_article_author: Optional[str] = None
    citations: Optional[List[Union[str, Citation]]] = None


class ChecklistItem(CamelModel):
    """One finding produced by a field analyzer."""
    id: str = Field(..., description="Stable key, unique within a run")
    category: CategoryName
    label: str
    status: CheckStatus
    current_value: Optional[Union[int, str]] = None
    target_value: Optional[str] = None
    recommendation: str
    field: Optional[str] = Field(None, description="Input attribute behind the finding")
    priority: Priority
    official_source: Optional[str] = None


class CategoryScore(CamelModel):
    """Score of one checklist category."""
    score: int = Field(..., ge=0, description="Weighted score, capped at max_score")
    max_score: int = Field(..., ge=0, description="Category weight")
    percentage: int = Field(..., ge=0, le=100, description="Share of passing items")
    passed: int = Field(..., ge=0)
    total: int = Field(..., ge=0)


class Issue(CamelModel):
    """A checklist finding surfaced in one of the severity buckets."""
    code: str
    category: CategoryName
    message: str
    fix: str
    field: Optional[str] = None
    severity: Severity


class OffPageRecommendation(CamelModel):
    """Advisory off-page recommendation. Does not affect the score."""
    id: str
    category: OffPageCategory
    title: str
    description: str
    actionable: bool
    steps: List[str] = Field(default_factory=list)
    priority: OffPagePriority


class GuidanceOptions(CamelModel):
    """Options accepted by the aggregator."""
    validate_structured_data: bool = False


class SEOGuidanceResult(CamelModel):
    """
    Complete guidance for one content item.

    This is a presentation-ready structure - consumers render it
    directly without implementing any scoring logic.
    """
    overall_score: int = Field(..., ge=0, le=100, description="Sum of category scores")
    categories: Dict[CategoryName, CategoryScore]
    in_page_checklist: List[ChecklistItem]
    off_page_guidance: List[OffPageRecommendation]
    critical_issues: List[Issue]
    warnings: List[Issue]
    suggestions: List[Issue]
    last_updated: datetime


class GuidanceRequest(CamelModel):
    """Request schema for POST /seo/guidance/analyze."""
    content_item: ContentItem
    options: Optional[GuidanceOptions] = None


class WordCountRequest(CamelModel):
    """Request schema for POST /seo/guidance/word-count."""
    content: str = Field(..., max_length=2_000_000)
    language: Optional[str] = Field(None, max_length=16)


class WordCountResponse(CamelModel):
    """Word count and the metrics derived from it."""
    word_count: int = Field(..., ge=0)
    reading_time_minutes: int = Field(..., ge=0)
    content_depth: ContentDepth


class EngineStatus(BaseModel):
    """Effective engine configuration."""
    default_language: str = Field(..., description="Language used when an item has none")
    words_per_minute: int = Field(..., description="Reading speed for reading time")
    category_weights: Dict[str, int] = Field(..., description="Max score per category")


class HealthResponse(BaseModel):
    """Response schema for GET /seo/guidance/health."""
    status: str = Field(default="healthy", description="Overall health status")
    version: str = Field(..., description="API version")
    engine: EngineStatus = Field(..., description="Engine configuration")


class ErrorResponse(BaseModel):
    """Standardized error response."""
    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Dict] = Field(None, description="Additional error details")

    class Config:
        json_schema_extra = {
            "example": {
                "error_code": "VALIDATION_ERROR",
                "message": "Invalid input data",
                "details": {"errors": []},
            }
        }
