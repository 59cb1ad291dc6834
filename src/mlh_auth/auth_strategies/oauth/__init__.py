from mlh_auth.auth_strategies.oauth.base_oauth import BaseOAuthStrategy
from mlh_auth.auth_strategies.oauth.mlh import MLHOAuthStrategy
from mlh_auth.auth_strategies.oauth.profile import (
    build_profile_url,
    deep_copy_json,
    normalize_profile_data,
    profile_mapping,
)

__all__ = [
    "BaseOAuthStrategy",
    "MLHOAuthStrategy",
    "build_profile_url",
    "deep_copy_json",
    "normalize_profile_data",
    "profile_mapping",
]
