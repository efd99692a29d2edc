"""
Pydantic schemas for API request/response validation.
"""

from app.schemas.base import BaseSchema
from app.schemas.auth import (
    UserInfo,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    SessionStatus,
)
from app.schemas.site_settings import UpdateResult

__all__ = [
    "BaseSchema",
    "UserInfo",
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "SessionStatus",
    "UpdateResult",
]
