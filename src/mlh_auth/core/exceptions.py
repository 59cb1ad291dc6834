# core/exceptions.py

from typing import Any

from fastapi import HTTPException, status


class MLHAuthException(Exception):
    def __init__(
        self, message: str, error_code: str | None = None, details: dict[str, Any] | None = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class AuthenticationError(MLHAuthException):
    pass


class InvalidStateError(AuthenticationError):
    def __init__(self, message: str = "Invalid or expired OAuth state token"):
        super().__init__(message, error_code="INVALID_STATE")


class UnsupportedProviderError(AuthenticationError):
    def __init__(self, provider: str):
        super().__init__(
            f"Unknown OAuth provider: '{provider}'",
            error_code="UNSUPPORTED_PROVIDER",
            details={"provider": provider},
        )


class ProviderNotConfiguredError(AuthenticationError):
    def __init__(self, provider: str):
        super().__init__(
            f"{provider} OAuth is not configured.",
            error_code="PROVIDER_NOT_CONFIGURED",
            details={"provider": provider},
        )


class TokenExchangeError(AuthenticationError):
    def __init__(self, message: str = "Failed to exchange authorization code"):
        super().__init__(message, error_code="TOKEN_EXCHANGE_FAILED")


class ProfileError(AuthenticationError):
    def __init__(
        self, message: str = "Failed to build user profile", error_code: str = "PROFILE_ERROR"
    ):
        super().__init__(message, error_code=error_code)


class ProfileNotLoadedError(ProfileError):
    def __init__(self, message: str = "Profile data has not been fetched for this attempt"):
        super().__init__(message, error_code="PROFILE_NOT_LOADED")


# HTTP Exception converters
def convert_to_http_exception(exc: MLHAuthException) -> HTTPException:
    status_map = {
        "INVALID_STATE": status.HTTP_400_BAD_REQUEST,
        "UNSUPPORTED_PROVIDER": status.HTTP_400_BAD_REQUEST,
        "PROVIDER_NOT_CONFIGURED": status.HTTP_503_SERVICE_UNAVAILABLE,
        "TOKEN_EXCHANGE_FAILED": status.HTTP_401_UNAUTHORIZED,
        "PROFILE_ERROR": status.HTTP_502_BAD_GATEWAY,
        "PROFILE_NOT_LOADED": status.HTTP_500_INTERNAL_SERVER_ERROR,
    }

    default = (
        status.HTTP_401_UNAUTHORIZED
        if isinstance(exc, AuthenticationError)
        else status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    status_code = status_map.get(exc.error_code or "", default)

    return HTTPException(
        status_code=status_code,
        detail={"message": exc.message, "error_code": exc.error_code, "details": exc.details},
    )
