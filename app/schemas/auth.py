"""Authentication request/response schemas."""
from typing import Any, Optional

from pydantic import Field

from .base import BaseSchema


class UserInfo(BaseSchema):
    """Public view of an authenticated identity."""

    username: str
    role: str


class LoginRequest(BaseSchema):
    """Login credentials.

    Fields are not type-checked here: missing or empty values get a 400 and
    anything that is not a matching string gets a 401 from the endpoint, so
    the client always receives the {success, message} envelope.
    """

    username: Any = None
    password: Any = None


class LoginResponse(BaseSchema):
    """Result of a login attempt."""

    success: bool
    message: str
    user: Optional[UserInfo] = None


class LogoutResponse(BaseSchema):
    success: bool
    message: str


class SessionStatus(BaseSchema):
    """Answer to "who am I"."""

    authenticated: bool
    user: Optional[UserInfo] = None
    message: Optional[str] = Field(default=None, description="Why the session is not valid")
