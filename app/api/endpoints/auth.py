"""Authentication endpoints."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from app.core.dependencies import get_auth_service
from app.core.security import AuthService
from app.core.session import build_set_cookie_header, extract_token
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    SessionStatus,
    UserInfo,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    response: Response,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login endpoint - validates credentials and sets the session cookie.

    Request (JSON):
        - username: CMS admin username
        - password: CMS admin password

    Response:
        - success / message
        - user: {username, role} on success
        - Set-Cookie: auth-token (7 day cookie, token itself valid for 24 hours)

    Errors:
        400 Bad Request: If username or password is missing
        401 Unauthorized: If credentials are invalid
    """
    if not credentials.username or not credentials.password:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=LoginResponse(
                success=False, message="Username and password are required"
            ).model_dump(exclude_none=True),
        )

    logger.info(f"Login attempt for username '{credentials.username}'")
    identity = None
    if isinstance(credentials.username, str) and isinstance(credentials.password, str):
        identity = auth_service.authenticate(credentials.username, credentials.password)
    if identity is None:
        logger.warning(f"Login attempt failed: invalid credentials for '{credentials.username}'")
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=LoginResponse(
                success=False, message="Invalid credentials"
            ).model_dump(exclude_none=True),
        )

    token = auth_service.issue_token(identity)
    config = auth_service.config
    response.headers["Set-Cookie"] = build_set_cookie_header(
        token, config.cookie_max_age, config.secure_cookies
    )

    logger.info(f"User '{identity.username}' logged in successfully")
    return LoginResponse(
        success=True,
        message="Login successful",
        user=UserInfo(**identity.to_dict()),
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Clear the session cookie.

    The token itself stays valid until it expires; there is no server-side
    revocation.
    """
    response.headers["Set-Cookie"] = build_set_cookie_header(
        "", 0, auth_service.config.secure_cookies
    )
    logger.info("Auth cookie cleared")
    return LogoutResponse(success=True, message="Logged out successfully")


@router.get("/me", response_model=SessionStatus, response_model_exclude_none=True)
async def who_am_i(
    request: Request,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Report whether the request carries a valid session."""
    token = extract_token(request.headers.get("cookie"))
    if token is None:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=SessionStatus(
                authenticated=False, message="No token found"
            ).model_dump(exclude_none=True),
        )

    identity = auth_service.verify_token(token)
    if identity is None:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=SessionStatus(
                authenticated=False, message="Invalid token"
            ).model_dump(exclude_none=True),
        )

    return SessionStatus(authenticated=True, user=UserInfo(**identity.to_dict()))
