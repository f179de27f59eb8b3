# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# Where the Functions API lives, how long to wait for it, how big uploads may
# be, and what signs the session cookie. Values come from the process
# environment first, then from a .env file in the working directory.
#
# Usage:
#   from app.config import settings
#   print(settings.FUNCTIONS_BASE_URL)
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Web app settings. Only FUNCTIONS_BASE_URL has no default."""

    # -------------------------------------------------------------------------
    # Functions API (the remote backend)
    # -------------------------------------------------------------------------
    # Required - every page needs the backend

    FUNCTIONS_BASE_URL: str = Field(
        ...,
        description="Base URL of the Functions API (e.g., https://abc-retail.azurewebsites.net/api)"
    )

    FUNCTIONS_API_KEY: str | None = Field(
        default=None,
        description="Function key sent as the x-functions-key header"
    )

    API_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        gt=0,
        le=300,
        description="Timeout for each call to the Functions API"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    SECRET_KEY: str = Field(
        default="dev-secret-key-change-in-production",
        min_length=16,
        description="Secret key for signing the session cookie (flash messages)"
    )

    # -------------------------------------------------------------------------
    # File Upload Settings
    # -------------------------------------------------------------------------

    MAX_UPLOAD_SIZE_MB: int = Field(
        default=50,
        ge=1,
        le=500,
        description="Maximum product image / proof of payment size in MB"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def max_upload_size_bytes(self) -> int:
        """Convert MB to bytes for file size validation."""
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """Settings, parsed once per process."""
    return Settings()


# Imported by main.py, dependencies.py and the health router
settings = get_settings()
