"""API test helpers."""
from app.core.session import SESSION_COOKIE_NAME


def cookie_header(token: str) -> dict:
    """Build request headers carrying a session cookie."""
    return {"Cookie": f"theme=dark; {SESSION_COOKIE_NAME}={token}"}


def set_cookie_values(response) -> list[str]:
    return response.headers.get_list("set-cookie")
