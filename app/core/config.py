"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables and .env file.
"""
import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.security import AuthConfig

logger = logging.getLogger(__name__)

# Used only when JWT_SECRET is unset outside production. Publicly known.
FALLBACK_JWT_SECRET = "fallback-secret-do-not-use-in-production"

DEFAULT_CMS_USERNAME = "admin"
DEFAULT_CMS_PASSWORD = "admin123"

PRODUCTION = "production"


class InsecureConfigurationError(RuntimeError):
    """Raised at startup when production runs without a signing secret."""


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Application
    # =========================================================================
    app_name: str = "Portfolio CMS"
    app_version: str = "1.0.0"
    debug: bool = False
    api_prefix: str = "/api"
    environment: str = Field(
        default="development",
        description="Deployment environment; 'production' enables Secure cookies",
    )
    log_level: str = "INFO"

    # =========================================================================
    # Security & Authentication
    # =========================================================================
    jwt_secret: Optional[str] = Field(
        default=None,
        description="Secret key for JWT signing (use openssl rand -hex 32)",
    )
    cms_username: str = DEFAULT_CMS_USERNAME
    cms_password: str = DEFAULT_CMS_PASSWORD
    access_token_expire_seconds: int = 86400  # 24 hours
    session_cookie_max_age: int = 604800  # 7 days

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == PRODUCTION


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def build_auth_config(settings: Settings) -> AuthConfig:
    """Freeze the credential-related settings into an AuthConfig.

    Args:
        settings: Loaded application settings

    Returns:
        Immutable configuration for the credential services

    Raises:
        InsecureConfigurationError: If no JWT secret is configured in production
    """
    secret = settings.jwt_secret
    if not secret:
        if settings.is_production:
            raise InsecureConfigurationError(
                "JWT_SECRET must be set when ENVIRONMENT=production"
            )
        logger.warning(
            "JWT_SECRET is not set; signing session tokens with the insecure "
            "fallback secret. Never run like this in production."
        )
        secret = FALLBACK_JWT_SECRET

    return AuthConfig(
        username=settings.cms_username or DEFAULT_CMS_USERNAME,
        password=settings.cms_password or DEFAULT_CMS_PASSWORD,
        secret=secret,
        secure_cookies=settings.is_production,
        token_ttl_seconds=settings.access_token_expire_seconds,
        cookie_max_age=settings.session_cookie_max_age,
    )


# Convenience alias
settings = get_settings()
