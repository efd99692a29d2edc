"""
Session cookie transport and CMS route guard.

The guard only checks that a session cookie is present. Handlers that read or
change protected data verify the token themselves (see app.core.dependencies).
"""
import logging
from dataclasses import dataclass
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "auth-token"
PROTECTED_PREFIX = "/cms"
LOGIN_PATH = "/cms/login"


@dataclass(frozen=True)
class GuardDecision:
    """Outcome of the route guard: proceed, or redirect to `location`."""
    allowed: bool
    location: Optional[str] = None

    @classmethod
    def allow(cls) -> "GuardDecision":
        return cls(allowed=True)

    @classmethod
    def redirect(cls, location: str) -> "GuardDecision":
        return cls(allowed=False, location=location)


def extract_token(cookie_header: Optional[str]) -> Optional[str]:
    """Pull the session token out of a raw Cookie header.

    Args:
        cookie_header: Value of the request's Cookie header, if any

    Returns:
        The auth-token value verbatim, or None if absent or empty
    """
    if not cookie_header:
        return None
    for part in cookie_header.split(";"):
        name, sep, value = part.strip().partition("=")
        if sep and name.strip() == SESSION_COOKIE_NAME:
            return value or None
    return None


def build_set_cookie_header(token: str, max_age: int, secure: bool) -> str:
    """Build a Set-Cookie value for the session cookie.

    An empty token with max_age=0 clears the cookie.
    """
    header = (
        f"{SESSION_COOKIE_NAME}={token}; HttpOnly; Path=/; "
        f"Max-Age={max_age}; SameSite=Lax"
    )
    if secure:
        header += "; Secure"
    return header


def is_protected_path(path: str) -> bool:
    if path != PROTECTED_PREFIX and not path.startswith(PROTECTED_PREFIX + "/"):
        return False
    return path.rstrip("/") != LOGIN_PATH


def guard(path: str, has_token: bool) -> GuardDecision:
    """Decide whether a request may reach a CMS page."""
    if is_protected_path(path) and not has_token:
        return GuardDecision.redirect(LOGIN_PATH)
    return GuardDecision.allow()


class CMSGuardMiddleware(BaseHTTPMiddleware):
    """Redirects cookie-less requests for CMS pages to the login page."""

    async def dispatch(self, request: Request, call_next):
        token = extract_token(request.headers.get("cookie"))
        decision = guard(request.url.path, token is not None)
        if not decision.allowed:
            logger.info(f"No auth token for {request.url.path}, redirecting to login")
            return RedirectResponse(url=decision.location, status_code=307)
        return await call_next(request)
