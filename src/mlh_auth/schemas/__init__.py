from .oauth import AuthAttempt, OAuthLoginResponse, OAuthProvider, StrategyOptions

__all__ = [
    "AuthAttempt",
    "OAuthLoginResponse",
    "OAuthProvider",
    "StrategyOptions",
]
