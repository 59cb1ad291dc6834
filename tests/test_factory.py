"""Tests for the strategy registry."""

import pytest

from mlh_auth import MLHOAuthStrategy
from mlh_auth.auth_strategies.oauth import factory
from mlh_auth.core.config import settings
from mlh_auth.core.exceptions import ProviderNotConfiguredError, UnsupportedProviderError


@pytest.fixture
def mlh_settings(monkeypatch):
    monkeypatch.setattr(settings, "MLH_CLIENT_ID", "ABC123")
    monkeypatch.setattr(settings, "MLH_CLIENT_SECRET", "secret")
    monkeypatch.setattr(settings, "MLH_REDIRECT_URI", "https://www.example.net/auth/mlh/callback")
    monkeypatch.setattr(settings, "MLH_SCOPE", "public  user:read:profile")
    monkeypatch.setattr(settings, "MLH_EXPAND_FIELDS", ["education"])
    monkeypatch.setattr(settings, "MLH_PROFILE_URL", None)
    return settings


class TestRegistry:
    def test_mlh_registered(self):
        assert "mlh" in factory.registered_providers()
        assert factory.get_strategy_class("mlh") is MLHOAuthStrategy

    def test_lookup_is_case_insensitive(self):
        assert factory.get_strategy_class("MLH") is MLHOAuthStrategy

    def test_unknown_provider(self):
        with pytest.raises(UnsupportedProviderError) as exc_info:
            factory.get_oauth_strategy("myspace")
        assert exc_info.value.error_code == "UNSUPPORTED_PROVIDER"


class TestGetOAuthStrategy:
    def test_not_configured(self, monkeypatch):
        monkeypatch.setattr(settings, "MLH_CLIENT_ID", None)
        monkeypatch.setattr(settings, "MLH_CLIENT_SECRET", None)
        with pytest.raises(ProviderNotConfiguredError):
            factory.get_oauth_strategy("mlh")

    def test_built_from_settings(self, mlh_settings):
        strategy = factory.get_oauth_strategy("mlh")

        assert isinstance(strategy, MLHOAuthStrategy)
        assert strategy.options.client_id == "ABC123"
        assert strategy.options.client_secret == "secret"
        assert strategy.options.callback_url == "https://www.example.net/auth/mlh/callback"
        assert strategy.options.scope == "public user:read:profile"
        assert strategy.options.profile_url == "https://api.mlh.com/v4/users/me"
        assert strategy.build_profile_url() == "https://api.mlh.com/v4/users/me?expand[]=education"

    def test_profile_url_override(self, mlh_settings, monkeypatch):
        monkeypatch.setattr(settings, "MLH_PROFILE_URL", "https://api.example.com/me")
        strategy = factory.get_oauth_strategy("mlh")
        assert strategy.options.profile_url == "https://api.example.com/me"
