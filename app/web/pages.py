"""
CMS page routes.

Page markup lives in the frontend; these handlers only gate access and return
a minimal shell.
"""
import logging
from html import escape
from typing import Annotated, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, RedirectResponse

from app.core.dependencies import get_auth_config, get_current_user
from app.core.security import AuthConfig, Identity
from app.core.session import LOGIN_PATH, build_set_cookie_header

router = APIRouter(prefix="/cms", tags=["CMS Pages"], include_in_schema=False)
logger = logging.getLogger(__name__)

_LOGIN_SHELL = """<!doctype html>
<html><head><title>CMS Login</title></head>
<body><main id="cms-login"></main></body></html>"""

_DASHBOARD_SHELL = """<!doctype html>
<html><head><title>CMS</title></head>
<body><main id="cms" data-user="{username}"></main></body></html>"""


@router.get("/login", response_class=HTMLResponse)
async def login_page():
    return HTMLResponse(_LOGIN_SHELL)


@router.get("", response_class=HTMLResponse)
async def dashboard_page(
    user: Annotated[Optional[Identity], Depends(get_current_user)],
    config: Annotated[AuthConfig, Depends(get_auth_config)],
):
    """CMS dashboard; a cookie that fails verification is cleared."""
    if user is None:
        logger.info("Invalid session on CMS dashboard, redirecting to login")
        response = RedirectResponse(url=LOGIN_PATH, status_code=307)
        response.headers["Set-Cookie"] = build_set_cookie_header("", 0, config.secure_cookies)
        return response
    return HTMLResponse(_DASHBOARD_SHELL.format(username=escape(user.username)))
