"""
Roblox Font Search: Bridge settings.
Loaded from environment variables (and an optional .env) via pydantic-settings.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Bridge configuration. Access through `settings` or `get_settings()`."""

    # ─── Upstream services ───────────────────────────────────────────────────

    TOOLBOX_API_URL: str = Field(
        default="https://apis.roblox.com/toolbox-service/v1",
        description="Toolbox service base URL (marketplace listing + item details)",
    )

    THUMBNAILS_API_URL: str = Field(
        default="https://thumbnails.roblox.com/v1",
        description="Thumbnail service base URL",
    )

    FONT_CATEGORY_ID: int = Field(
        default=73,
        description="Marketplace category id that lists fonts",
    )

    FONT_LIST_LIMIT: int = Field(
        default=100,
        ge=1,
        le=100,
        description="Number of font ids requested from the marketplace listing",
    )

    THUMBNAIL_BATCH_SIZE: int = Field(
        default=50,
        ge=1,
        le=100,
        description="Max asset ids per thumbnail request",
    )

    THUMBNAIL_SIZE: str = Field(default="728x90", description="Preview image size")

    THUMBNAIL_FORMAT: str = Field(default="png", description="Preview image format")

    PREVIEW_CONCURRENCY: int = Field(
        default=4,
        ge=1,
        le=16,
        description="Thumbnail batches in flight at once (1 = one after another)",
    )

    REQUEST_TIMEOUT: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout in seconds for upstream calls",
    )

    # Keep in step with USER_AGENT in roblox_client when changing.
    IMPERSONATE: str = Field(
        default="chrome",
        description="curl_cffi browser impersonation target",
    )

    # ─── Server ──────────────────────────────────────────────────────────────

    API_HOST: str = Field(default="127.0.0.1", description="Host to bind the bridge to")

    API_PORT: int = Field(default=37421, ge=1, le=65535, description="Bridge port")

    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)",
    )

    LOG_LEVEL: str = Field(default="INFO", description="Root logging level")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Split CORS_ORIGINS into a list, dropping blanks."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
