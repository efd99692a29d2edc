"""Security utilities for authentication: credential checks and session tokens."""
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"
JWT_ALGORITHM = "HS256"


@dataclass(frozen=True)
class AuthConfig:
    """Immutable credential configuration, built once at startup."""
    username: str
    password: str
    secret: str
    secure_cookies: bool = False
    token_ttl_seconds: int = 86400  # 24 hours
    cookie_max_age: int = 604800  # 7 days


@dataclass(frozen=True)
class Identity:
    """The authenticated principal carried inside a session token."""
    username: str
    role: str = ADMIN_ROLE

    def __post_init__(self):
        if not self.username:
            raise ValueError("Identity username must be non-empty")

    def to_dict(self) -> dict:
        return {"username": self.username, "role": self.role}


def _matches(supplied: str, expected: str) -> bool:
    return secrets.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


class AuthService:
    """Issues and verifies session tokens for the single CMS administrator."""

    def __init__(self, config: AuthConfig):
        self.config = config

    def authenticate(self, username: str, password: str) -> Optional[Identity]:
        """Check a username/password pair against the configured admin.

        Args:
            username: Submitted username
            password: Submitted password

        Returns:
            Identity with the admin role on match, None otherwise
        """
        # Both comparisons always run
        username_ok = _matches(username, self.config.username)
        password_ok = _matches(password, self.config.password)
        if username_ok and password_ok and username:
            return Identity(username=username, role=ADMIN_ROLE)
        return None

    def issue_token(self, identity: Identity, issued_at: Optional[datetime] = None) -> str:
        """Create a signed JWT for an identity.

        Args:
            identity: Authenticated principal
            issued_at: Issue instant, defaults to now (UTC)

        Returns:
            Compact HS256-signed JWT string
        """
        issued_at = issued_at or datetime.now(timezone.utc)
        expire = issued_at + timedelta(seconds=self.config.token_ttl_seconds)
        claims = {
            "username": identity.username,
            "role": identity.role,
            "iat": int(issued_at.timestamp()),
            "exp": int(expire.timestamp()),
        }
        return jwt.encode(claims, self.config.secret, algorithm=JWT_ALGORITHM)

    def verify_token(self, token: Optional[str]) -> Optional[Identity]:
        """Decode and validate a session token.

        Args:
            token: JWT string, possibly empty or malformed

        Returns:
            Identity if the signature, expiry and claims are valid, None otherwise
        """
        if not token:
            return None
        try:
            payload = jwt.decode(
                token,
                self.config.secret,
                algorithms=[JWT_ALGORITHM],
                options={"require_exp": True, "require_iat": True},
            )
        except JWTError as exc:
            logger.info(f"Token verification failed: {exc}")
            return None

        username = payload.get("username")
        role = payload.get("role")
        if not isinstance(username, str) or not username:
            logger.info("Token verification failed: missing username claim")
            return None
        if role != ADMIN_ROLE:
            logger.info(f"Token verification failed: unexpected role {role!r}")
            return None
        return Identity(username=username, role=role)
