"""Tests for /api/cms/settings."""
from datetime import datetime, timedelta, timezone

from tests.api.conftest import cookie_header


class TestReadSettings:

    async def test_public_read(self, client):
        response = await client.get("/api/cms/settings")
        assert response.status_code == 200
        data = response.json()
        assert "site_name" in data
        assert "site_description" in data


class TestUpdateSettings:

    async def test_requires_session(self, client):
        response = await client.put("/api/cms/settings", json={"site_name": "Hacked"})
        assert response.status_code == 401
        assert response.json() == {"detail": "Unauthorized"}

    async def test_rejects_invalid_token(self, client):
        response = await client.put(
            "/api/cms/settings",
            json={"site_name": "Hacked"},
            headers=cookie_header("garbage"),
        )
        assert response.status_code == 401

    async def test_rejects_expired_token(self, client, auth_service, admin_identity):
        issued_at = datetime.now(timezone.utc) - timedelta(days=2)
        token = auth_service.issue_token(admin_identity, issued_at=issued_at)
        response = await client.put(
            "/api/cms/settings",
            json={"site_name": "Hacked"},
            headers=cookie_header(token),
        )
        assert response.status_code == 401

    async def test_update_with_session(self, client, valid_token, site_settings_store):
        response = await client.put(
            "/api/cms/settings",
            json={"site_name": "My Portfolio", "footer_text": "Hello"},
            headers=cookie_header(valid_token),
        )
        assert response.status_code == 200
        assert response.json() == {"success": True}

        settings = site_settings_store.all()
        assert settings["site_name"] == "My Portfolio"
        assert settings["footer_text"] == "Hello"

        response = await client.get("/api/cms/settings")
        assert response.json()["site_name"] == "My Portfolio"

    async def test_non_string_values_rejected(self, client, valid_token):
        response = await client.put(
            "/api/cms/settings",
            json={"site_name": ["not", "a", "string"]},
            headers=cookie_header(valid_token),
        )
        assert response.status_code == 422
