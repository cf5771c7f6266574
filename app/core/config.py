"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables
- Centralizes config values (gateway URL, secrets, etc.)
- Validates configuration on startup
- Environment-specific settings
"""

from pydantic import Field, validator
from pydantic_settings import BaseSettings
from typing import Optional, Literal


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Validates all required configs on startup.
    """

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # WhatsApp gateway (outbound sends)
    GATEWAY_URL: str = Field(
        default="http://localhost:3000",
        description="Base URL of the WhatsApp gateway HTTP API"
    )
    GATEWAY_API_KEY: Optional[str] = Field(
        default=None,
        description="Bearer token for the gateway API"
    )
    GATEWAY_TIMEOUT: float = Field(
        default=10.0,
        description="Gateway request timeout in seconds"
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    API_PREFIX: str = Field(
        default="/api/v1",
        description="API route prefix"
    )
    CORS_ORIGINS: list = Field(
        default=["*"],
        description="Allowed CORS origins"
    )
    SLOW_REQUEST_SECONDS: float = Field(
        default=5.0,
        description="Requests slower than this are logged as warnings"
    )

    @validator("GATEWAY_API_KEY", always=True)
    def validate_gateway_key(cls, v, values):
        """Ensure the gateway key is set in production."""
        if values.get("ENVIRONMENT") == "production" and not v:
            raise ValueError("GATEWAY_API_KEY is required in production environment")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    class Config:
        env_file = ".env"
        case_sensitive = True
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()


def validate_settings():
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.
    """
    errors = []

    if not settings.GATEWAY_URL:
        errors.append("GATEWAY_URL is required")
    elif not settings.GATEWAY_URL.startswith(("http://", "https://")):
        errors.append("GATEWAY_URL must be an http(s) URL")

    if settings.GATEWAY_TIMEOUT <= 0:
        errors.append("GATEWAY_TIMEOUT must be positive")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
