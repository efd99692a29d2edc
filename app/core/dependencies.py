"""FastAPI dependencies for authentication and authorization."""
from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Request, status

from app.core.config import build_auth_config, get_settings
from app.core.security import AuthConfig, AuthService, Identity
from app.core.session import extract_token


@lru_cache()
def get_auth_config() -> AuthConfig:
    """Get the process-wide credential configuration."""
    return build_auth_config(get_settings())


def get_auth_service(
    config: Annotated[AuthConfig, Depends(get_auth_config)],
) -> AuthService:
    return AuthService(config)


async def get_current_user(
    request: Request,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> Optional[Identity]:
    """Dependency returning the identity behind the session cookie, if any.

    A missing, expired or tampered token yields None rather than an error.
    """
    token = extract_token(request.headers.get("cookie"))
    if token is None:
        return None
    return auth_service.verify_token(token)


async def require_admin(
    user: Annotated[Optional[Identity], Depends(get_current_user)],
) -> Identity:
    """Dependency for CMS write endpoints.

    Usage:
        @router.put("/settings")
        async def update(admin: Annotated[Identity, Depends(require_admin)]):
            ...

    Raises:
        HTTPException 401: If there is no valid session
    """
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return user
