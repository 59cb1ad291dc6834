from .config import Settings, settings
from .exceptions import (
    AuthenticationError,
    MLHAuthException,
    ProfileError,
    ProfileNotLoadedError,
)

__all__ = [
    "Settings",
    "settings",
    "MLHAuthException",
    "AuthenticationError",
    "ProfileError",
    "ProfileNotLoadedError",
]
