"""Tests for the OAuth REST endpoints."""

from urllib.parse import parse_qs, urlsplit

import httpx
import pytest
from fastapi.testclient import TestClient

from mlh_auth import MLHOAuthStrategy
from mlh_auth.api.v1.public import oauth as oauth_routes
from mlh_auth.core.config import settings
from mlh_auth.core.exceptions import ProviderNotConfiguredError
from mlh_auth.main import app
from tests.conftest import ProviderStub, json_profile

LOGIN_URL = "/api/v1/auth/oauth/mlh/login"
CALLBACK_URL = "/api/v1/auth/oauth/mlh/callback"


@pytest.fixture
def stub():
    return ProviderStub(json_profile({"id": "123", "first_name": "Jane"}))


@pytest.fixture
def client(monkeypatch, stub):
    """Test client whose MyMLH strategy talks to the stub provider."""

    def fake_get_oauth_strategy(provider):
        return MLHOAuthStrategy(
            client_id="ABC123",
            client_secret="secret",
            callback_url="http://testserver/api/v1/auth/oauth/mlh/callback",
            transport=httpx.MockTransport(stub),
        )

    monkeypatch.setattr(oauth_routes, "get_oauth_strategy", fake_get_oauth_strategy)
    return TestClient(app)


class TestHealthEndpoint:
    def test_health_lists_providers(self):
        response = TestClient(app).get("/api/v1/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "providers": ["mlh"]}


class TestLogin:
    def test_redirects_to_provider(self, client):
        response = client.get(LOGIN_URL, follow_redirects=False)

        assert response.status_code == 302
        location = urlsplit(response.headers["location"])
        assert f"{location.scheme}://{location.netloc}{location.path}" == (
            "https://my.mlh.io/oauth/authorize"
        )
        query = parse_qs(location.query)
        assert query["client_id"] == ["ABC123"]
        assert query["state"] == [response.cookies[settings.OAUTH_STATE_COOKIE]]

    def test_unknown_provider(self):
        response = TestClient(app).get("/api/v1/auth/oauth/myspace/login", follow_redirects=False)
        assert response.status_code == 400
        assert response.json()["detail"]["error_code"] == "UNSUPPORTED_PROVIDER"

    def test_unconfigured_provider(self, monkeypatch):
        def not_configured(provider):
            raise ProviderNotConfiguredError("MyMLH")

        monkeypatch.setattr(oauth_routes, "get_oauth_strategy", not_configured)
        response = TestClient(app).get(LOGIN_URL, follow_redirects=False)
        assert response.status_code == 503


class TestCallback:
    def test_success(self, client, stub):
        login = client.get(LOGIN_URL, follow_redirects=False)
        state = login.cookies[settings.OAUTH_STATE_COOKIE]

        response = client.get(CALLBACK_URL, params={"code": "auth-code", "state": state})

        assert response.status_code == 200
        assert response.json() == {
            "provider": "mlh",
            "provider_user_id": "123",
            "profile": {"id": "123", "first_name": "Jane", "provider": "mlh"},
        }
        assert len(stub.token_requests) == 1
        assert len(stub.profile_requests) == 1

    def test_state_mismatch(self, client, stub):
        client.get(LOGIN_URL, follow_redirects=False)

        response = client.get(CALLBACK_URL, params={"code": "auth-code", "state": "forged"})

        assert response.status_code == 400
        assert response.json()["detail"]["error_code"] == "INVALID_STATE"
        assert stub.requests == []

    def test_missing_state_cookie(self, client):
        response = client.get(CALLBACK_URL, params={"code": "auth-code", "state": "abc"})
        assert response.status_code == 400

    def test_provider_error(self, client):
        response = client.get(CALLBACK_URL, params={"error": "access_denied"})
        assert response.status_code == 400
        assert "access_denied" in response.json()["detail"]
