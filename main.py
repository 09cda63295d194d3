"""
SEO Guidance Engine - FastAPI Application

Serves the deterministic SEO guidance engine to the editorial dashboard:
- SEO guidance analysis (checklist, category scores, off-page advice)
- Word count and reading metrics

Environment Variables:
    See config.py for complete list and descriptions.
"""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from config import settings, get_engine_status
from models.schemas import (
    EngineStatus,
    ErrorResponse,
    GuidanceRequest,
    HealthResponse,
    SEOGuidanceResult,
    WordCountRequest,
    WordCountResponse,
)
from evaluators.scoring import evaluate
from utils.word_count import calculate_reading_time, count_words, determine_content_depth

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Engine status: {get_engine_status()}")
    yield
    logger.info("Shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Deterministic SEO guidance for articles: checklist, scores and off-page advice",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Error handlers
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors."""
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            error_code="VALIDATION_ERROR",
            message="Invalid input data",
            details={"errors": exc.errors(include_url=False, include_context=False)},
        ).model_dump(),
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error_code=f"HTTP_{exc.status_code}",
            message=str(exc.detail),
        ).model_dump(),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error_code="INTERNAL_ERROR",
            message="An unexpected error occurred. Please try again.",
        ).model_dump(),
    )


# Health endpoint
@app.get(
    "/seo/guidance/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Health check endpoint",
)
async def health_check() -> HealthResponse:
    """
    Check API health and report the effective engine configuration.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        engine=EngineStatus(**get_engine_status()),
    )


# Main guidance endpoint
@app.post(
    "/seo/guidance/analyze",
    response_model=SEOGuidanceResult,
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    tags=["Guidance"],
    summary="Analyze an article and return SEO guidance",
)
async def analyze_guidance(request: GuidanceRequest) -> SEOGuidanceResult:
    """
    Analyze an article's form data and compute SEO guidance.

    Returns the in-page checklist, one score per category, the overall
    score, issues grouped by severity and off-page recommendations.

    **Category weights (total 100):**
    - Meta tags: 20
    - Content: 25
    - Images: 15
    - Structured data: 20
    - Technical: 15
    - Mobile: 5
    """
    logger.info("Guidance request received")

    result = evaluate(request.content_item, request.options)

    logger.info(
        f"Guidance complete: score={result.overall_score}, "
        f"critical={len(result.critical_issues)}, warnings={len(result.warnings)}"
    )
    return result


@app.post(
    "/seo/guidance/word-count",
    response_model=WordCountResponse,
    tags=["Content"],
    summary="Count words and derive reading metrics",
)
async def word_count(request: WordCountRequest) -> WordCountResponse:
    """
    Count the words of an HTML or plain-text body.

    Arabic text is counted with diacritics stripped. When no language is
    given the engine's default language applies.
    """
    language = request.language or settings.default_language
    words = count_words(request.content, language)
    logger.debug(f"Word count: {words} [language={language}]")

    return WordCountResponse(
        word_count=words,
        reading_time_minutes=calculate_reading_time(words),
        content_depth=determine_content_depth(words),
    )


# Root redirect
@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint."""
    return {
        "message": f"{settings.app_name} API",
        "docs": "/docs",
        "health": "/seo/guidance/health",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
