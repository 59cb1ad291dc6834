"""
Strategy registry: maps a provider name to its strategy class and builds
configured instances from settings so endpoints don't need to know about config.
"""

from collections.abc import Callable
from typing import TypeVar

from mlh_auth.auth_strategies.oauth.base_oauth import BaseOAuthStrategy
from mlh_auth.core.config import settings
from mlh_auth.core.exceptions import UnsupportedProviderError

StrategyT = TypeVar("StrategyT", bound=type[BaseOAuthStrategy])

_registry: dict[str, type[BaseOAuthStrategy]] = {}


def register_strategy(name: str) -> Callable[[StrategyT], StrategyT]:
    """Class decorator registering a strategy under a fixed provider name."""

    def decorator(strategy_cls: StrategyT) -> StrategyT:
        _registry[name.lower()] = strategy_cls
        return strategy_cls

    return decorator


def get_strategy_class(provider: str) -> type[BaseOAuthStrategy]:
    try:
        return _registry[provider.lower()]
    except KeyError:
        raise UnsupportedProviderError(provider) from None


def registered_providers() -> list[str]:
    return sorted(_registry)


def get_oauth_strategy(provider: str) -> BaseOAuthStrategy:
    """
    Return a configured OAuth strategy for the given provider name.

    Args:
        provider: A registered provider name, e.g. "mlh"

    Returns:
        Configured strategy instance

    Raises:
        UnsupportedProviderError: If provider is unknown
        ProviderNotConfiguredError: If its credentials are missing
    """
    strategy_cls = get_strategy_class(provider)
    return strategy_cls.from_settings(settings)  # type: ignore[attr-defined]
