"""
Configuration management for the SEO Guidance Engine.

All environment variables are loaded here with their default values.
None are required; the defaults reproduce the editorial platform's behavior.
"""

from pydantic_settings import BaseSettings

from models.enums import CATEGORY_WEIGHTS


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment Variable Reference:
    - DEFAULT_LANGUAGE: language code used to count words when a content
      item carries no language (default "ar")
    - WORDS_PER_MINUTE: reading speed used for reading time estimates
    """

    # Application settings
    app_name: str = "SEO Guidance Engine"
    app_version: str = "1.0.0"
    debug: bool = False

    # Content analysis settings
    default_language: str = "ar"
    words_per_minute: int = 200

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()


def get_engine_status() -> dict:
    """
    Returns the effective engine configuration.
    Used by the health endpoint.
    """
    return {
        "default_language": settings.default_language,
        "words_per_minute": settings.words_per_minute,
        "category_weights": {
            category.value: weight for category, weight in CATEGORY_WEIGHTS.items()
        },
    }
