"""Root conftest.py -- shared fixtures for all test modules."""
import os

import pytest

# Set env vars BEFORE any app imports so settings pick them up
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-jwt-signing-only")
os.environ.setdefault("CMS_USERNAME", "admin")
os.environ.setdefault("CMS_PASSWORD", "admin123")
os.environ.setdefault("ENVIRONMENT", "test")

from app.core.config import get_settings, Settings
from app.core.dependencies import get_auth_config
from app.core.security import AuthConfig, AuthService, Identity
from app.services.site_settings import SiteSettingsStore


# =========================================================================
# Settings
# =========================================================================
@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Clear LRU caches before each test to prevent stale settings."""
    get_settings.cache_clear()
    get_auth_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_auth_config.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    return get_settings()


# =========================================================================
# Auth Fixtures
# =========================================================================
@pytest.fixture
def auth_config() -> AuthConfig:
    return AuthConfig(
        username="admin",
        password="admin123",
        secret="test-secret-key-for-jwt-signing-only",
    )


@pytest.fixture
def auth_service(auth_config) -> AuthService:
    return AuthService(auth_config)


@pytest.fixture
def admin_identity() -> Identity:
    return Identity(username="admin", role="admin")


@pytest.fixture
def valid_token(auth_service, admin_identity) -> str:
    return auth_service.issue_token(admin_identity)


# =========================================================================
# FastAPI Test Client
# =========================================================================
@pytest.fixture
def app():
    from app.main import app as fastapi_app
    return fastapi_app


@pytest.fixture
def site_settings_store() -> SiteSettingsStore:
    return SiteSettingsStore()


@pytest.fixture
async def client(app, auth_config, site_settings_store):
    """httpx.AsyncClient with a fixed auth config and a fresh settings store."""
    from httpx import AsyncClient, ASGITransport
    from app.services.site_settings import get_site_settings_store

    app.dependency_overrides[get_auth_config] = lambda: auth_config
    app.dependency_overrides[get_site_settings_store] = lambda: site_settings_store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def production_client(app, auth_config, site_settings_store):
    """Client whose auth config marks cookies Secure, as in production."""
    from dataclasses import replace
    from httpx import AsyncClient, ASGITransport
    from app.services.site_settings import get_site_settings_store

    secure_config = replace(auth_config, secure_cookies=True)
    app.dependency_overrides[get_auth_config] = lambda: secure_config
    app.dependency_overrides[get_site_settings_store] = lambda: site_settings_store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="https://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
