# auth_strategies/oauth/base_oauth.py

import inspect
import logging
from abc import abstractmethod
from collections.abc import Callable
from typing import Any

import httpx
from authlib.integrations.httpx_client import AsyncOAuth2Client

from mlh_auth.auth_strategies.base import TokenBasedStrategy
from mlh_auth.core.exceptions import AuthenticationError, TokenExchangeError
from mlh_auth.schemas.oauth import AuthAttempt, StrategyOptions

logger = logging.getLogger(__name__)

VerifyCallback = Callable[[str, str | None, dict[str, Any]], Any]


class BaseOAuthStrategy(TokenBasedStrategy):
    """
    Base class for OAuth 2.0 authorization-code strategies.

    Handles the handshake through authlib's AsyncOAuth2Client; a provider
    subclass only decides how its user profile is fetched and identified.

    Flow:
        1. get_authorization_url()  — redirect user to provider
        2. authenticate()           — exchange code for tokens, fetch profile
    """

    def __init__(
        self,
        provider_name: str,
        options: StrategyOptions,
        verify: VerifyCallback | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(provider_name)
        self.provider_name = provider_name
        self.options = options
        self.verify = verify
        # Only overridden in tests; None means the regular httpx transport
        self.transport = transport

    def get_oauth_client(self, token: dict[str, Any] | None = None) -> AsyncOAuth2Client:
        """Create a fresh async OAuth2 client for this provider."""
        return AsyncOAuth2Client(
            client_id=self.options.client_id,
            client_secret=self.options.client_secret,
            token_endpoint_auth_method=self.options.token_endpoint_auth_method,
            scope=self.options.scope,
            redirect_uri=self.options.callback_url,
            token=token,
            headers=self.options.custom_headers,
            transport=self.transport,
        )

    async def get_authorization_url(self, state: str | None = None) -> tuple[str, str]:
        """
        Step 1: Generate the URL to redirect the user to the provider's login page.

        Args:
            state: CSRF protection token; generated by authlib when omitted

        Returns:
            (authorization_url, state)
        """
        async with self.get_oauth_client() as client:
            uri, state = client.create_authorization_url(
                self.options.authorization_url,
                state=state,
            )
            return uri, state

    async def exchange_code_for_tokens(self, code: str) -> dict[str, Any]:
        """
        Step 2a: Exchange the authorization code for provider tokens.

        Args:
            code: The authorization code received in the callback

        Returns:
            Token response dict from the provider
        """
        async with self.get_oauth_client() as client:
            try:
                token = await client.fetch_token(
                    self.options.token_url,
                    code=code,
                    grant_type="authorization_code",
                )
                return dict(token)
            except Exception as e:
                logger.error(f"[{self.provider_name}] Token exchange failed: {e}")
                raise TokenExchangeError(
                    f"Failed to exchange authorization code with {self.provider_name}"
                ) from e

    @abstractmethod
    async def user_profile(
        self, access_token: str, attempt: AuthAttempt | None = None
    ) -> dict[str, Any]:
        """Step 2b: Fetch the user's profile with the provider access token."""

    @abstractmethod
    def uid(self, attempt: AuthAttempt) -> Any:
        """Return the provider's user id from an already fetched attempt."""

    async def run_verify(
        self, access_token: str, refresh_token: str | None, profile: dict[str, Any]
    ) -> Any:
        """Hand the profile to the host's verify callback, if one was given."""
        if self.verify is None:
            return None
        result = self.verify(access_token, refresh_token, profile)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def authenticate(self, credentials: dict[str, Any]) -> dict[str, Any]:
        """
        Full OAuth authentication flow.

        Expected credentials keys:
            code     : str  — authorization code from provider callback

        Returns:
            dict with keys: provider, provider_user_id, profile, user,
                            provider_tokens
        """
        credentials = await self.prepare_credentials(credentials)

        code = credentials.get("code")
        if not code:
            raise AuthenticationError("Authorization code is required")

        # Exchange code → provider tokens
        provider_tokens = await self.exchange_code_for_tokens(code)

        access_token = provider_tokens.get("access_token")
        if not access_token:
            raise AuthenticationError(f"No access token received from {self.provider_name}")

        refresh_token = provider_tokens.get("refresh_token")
        attempt = AuthAttempt(access_token=access_token, refresh_token=refresh_token)

        profile = await self.user_profile(access_token, attempt)
        provider_user_id = self.uid(attempt)

        user = await self.run_verify(access_token, refresh_token, profile)

        return await self.post_authenticate(
            {
                "provider": self.provider_name,
                "provider_user_id": (
                    str(provider_user_id) if provider_user_id is not None else None
                ),
                "profile": profile,
                "user": user,
                "provider_tokens": {
                    "access_token": access_token,
                    "refresh_token": refresh_token,
                    "expires_at": provider_tokens.get("expires_at"),
                },
            }
        )
