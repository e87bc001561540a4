"""
Application Settings

Centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with sensible defaults.

Configuration Categories:
=========================
- Application: Basic app info (name, version, debug mode)
- Server: Host and port settings
- CORS: Cross-origin resource sharing
- Documentation: OpenAPI document and interactive reference page
- External Services: BLiP commands endpoint

Environment Variables:
======================
Settings are loaded from environment variables or .env file.
Environment variables take precedence over .env file values.

Usage:
======
    from contacts_api.config.settings import settings

    # Access settings
    commands_url = settings.BLIP_COMMANDS_URL
    is_dev = settings.is_development
"""

from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Use .env file for local development.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # APPLICATION
    # ═══════════════════════════════════════════════════════════════════════════════

    APP_NAME: str = "SwaggerTraining"
    APP_VERSION: str = "v1"
    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Optional[Literal["console", "json"]] = Field(
        default=None,
        description="Log renderer; unset picks console in development and json elsewhere",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # SERVER
    # ═══════════════════════════════════════════════════════════════════════════════

    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # ═══════════════════════════════════════════════════════════════════════════════
    # CORS
    # ═══════════════════════════════════════════════════════════════════════════════

    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # DOCUMENTATION
    # ═══════════════════════════════════════════════════════════════════════════════

    DOCS_ENABLED: bool = Field(
        default=True,
        description="Serve the OpenAPI document and the interactive reference page",
    )
    DOCS_URL: str = Field(
        default="/",
        description="Path of the interactive API reference page",
    )
    OPENAPI_URL: str = Field(
        default="/swagger/v1/swagger.json",
        description="Path of the machine-readable API description",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # EXTERNAL SERVICES - BLiP
    # ═══════════════════════════════════════════════════════════════════════════════

    BLIP_COMMANDS_URL: str = Field(
        default="https://http.msging.net/commands",
        description="BLiP HTTP endpoint that accepts LIME commands",
    )
    BLIP_TIMEOUT_SECONDS: Optional[float] = Field(
        default=None,
        description="Timeout for BLiP calls in seconds (unset waits indefinitely)",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # PROPERTIES
    # ═══════════════════════════════════════════════════════════════════════════════

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"

    @property
    def log_renders_console(self) -> bool:
        """Whether logs go to the colored console renderer instead of JSON."""
        if self.LOG_FORMAT is None:
            return self.is_development
        return self.LOG_FORMAT == "console"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application settings instance
    """
    return Settings()


# Global settings instance for convenient import
settings = get_settings()
