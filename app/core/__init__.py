"""
Core package for the portfolio CMS.
"""
from app.core.config import settings, get_settings
from app.core.security import AuthConfig, AuthService, Identity

__all__ = ["settings", "get_settings", "AuthConfig", "AuthService", "Identity"]
