"""Pytest configuration and fixtures."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from mlh_auth import MLHOAuthStrategy

TOKEN_PATH = "/oauth/token"


class ProviderStub:
    """Fake MyMLH: answers token requests and delegates profile requests."""

    def __init__(
        self,
        profile_handler: Callable[[httpx.Request], httpx.Response],
        token_response: httpx.Response | None = None,
    ):
        self.profile_handler = profile_handler
        self.token_response = token_response or httpx.Response(
            200,
            json={
                "access_token": "provider-access-token",
                "refresh_token": "provider-refresh-token",
                "token_type": "bearer",
            },
        )
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == TOKEN_PATH:
            return self.token_response
        return self.profile_handler(request)

    @property
    def profile_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path != TOKEN_PATH]

    @property
    def token_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == TOKEN_PATH]


def json_profile(payload: Any) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    return handler


def connection_refused(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


@pytest.fixture
def sample_profile() -> dict[str, Any]:
    return {
        "id": "123",
        "first_name": "Jane",
        "last_name": "Hacker",
        "email": "jane@example.com",
        "phone_number": "+1234567890",
        "education": [
            {"school": {"name": "MLH University"}, "major": "Computer Science"},
        ],
    }


@pytest.fixture
def make_strategy() -> Callable[..., tuple[MLHOAuthStrategy, ProviderStub]]:
    """Build a strategy whose HTTP traffic goes to a ProviderStub."""

    def factory(
        profile_handler: Callable[[httpx.Request], httpx.Response],
        token_response: httpx.Response | None = None,
        **options: Any,
    ) -> tuple[MLHOAuthStrategy, ProviderStub]:
        stub = ProviderStub(profile_handler, token_response)
        options.setdefault("client_id", "ABC123")
        options.setdefault("client_secret", "secret")
        strategy = MLHOAuthStrategy(transport=httpx.MockTransport(stub), **options)
        return strategy, stub

    return factory
