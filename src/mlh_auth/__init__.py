"""MyMLH OAuth 2.0 authentication strategy."""

from mlh_auth.auth_strategies.oauth import MLHOAuthStrategy
from mlh_auth.schemas.oauth import AuthAttempt, StrategyOptions

Strategy = MLHOAuthStrategy

__all__ = ["MLHOAuthStrategy", "Strategy", "AuthAttempt", "StrategyOptions"]
