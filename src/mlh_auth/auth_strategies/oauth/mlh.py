# auth_strategies/oauth/mlh.py

import logging
from typing import Any

import httpx

from mlh_auth.auth_strategies.constants import MLH, PROFILE_ID_KEY, PROFILE_PROVIDER_KEY
from mlh_auth.auth_strategies.oauth.base_oauth import BaseOAuthStrategy, VerifyCallback
from mlh_auth.auth_strategies.oauth.factory import register_strategy
from mlh_auth.auth_strategies.oauth.profile import (
    build_profile_url,
    normalize_profile_data,
    profile_mapping,
)
from mlh_auth.core.config import Settings
from mlh_auth.core.exceptions import (
    ProfileError,
    ProfileNotLoadedError,
    ProviderNotConfiguredError,
)
from mlh_auth.schemas.oauth import AuthAttempt, StrategyOptions

logger = logging.getLogger(__name__)


@register_strategy(MLH)
class MLHOAuthStrategy(BaseOAuthStrategy):
    """
    OAuth 2.0 strategy for MyMLH login.

    The profile comes from the v4 users/me endpoint, optionally with
    expanded sub-resources (education, professional_experience, ...).

    Profile enrichment is best-effort: a failed or unparseable profile
    request yields an empty profile instead of failing the login, so the
    host may receive nothing but {"provider": "mlh"}.

    Example:
        strategy = MLHOAuthStrategy(
            client_id="123-456-789",
            client_secret="shhh-its-a-secret",
            callback_url="https://www.example.net/auth/mlh/callback",
            expand_fields=["education", "professional_experience"],
        )
    """

    def __init__(
        self,
        options: StrategyOptions | None = None,
        verify: VerifyCallback | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        **kwargs: Any,
    ):
        if options is None:
            options = StrategyOptions(**kwargs)
        super().__init__(
            provider_name=MLH,
            options=options,
            verify=verify,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, verify: VerifyCallback | None = None
    ) -> "MLHOAuthStrategy":
        if not settings.mlh_configured:
            raise ProviderNotConfiguredError("MyMLH")

        overrides: dict[str, Any] = {}
        if settings.MLH_PROFILE_URL:
            overrides["profile_url"] = settings.MLH_PROFILE_URL

        options = StrategyOptions(
            client_id=settings.MLH_CLIENT_ID,
            client_secret=settings.MLH_CLIENT_SECRET,
            callback_url=settings.MLH_REDIRECT_URI,
            scope=settings.MLH_SCOPE,
            expand_fields=settings.MLH_EXPAND_FIELDS,
            user_agent=settings.MLH_USER_AGENT,
            **overrides,
        )
        return cls(options=options, verify=verify)

    def build_profile_url(self) -> str:
        return build_profile_url(self.options.profile_url, self.options.expand_fields)

    async def fetch_data(self, attempt: AuthAttempt) -> dict[str, Any] | list[Any]:
        """
        Fetch and normalize the profile for this attempt, at most once.

        Network errors, non-2xx responses and undecodable bodies all resolve
        to {} and are cached like a real result.
        """
        if attempt.profile is not None:
            return attempt.profile

        url = self.build_profile_url()
        token = {"access_token": attempt.access_token, "token_type": "bearer"}

        async with self.get_oauth_client(token=token) as client:
            try:
                response = await client.get(url)
                response.raise_for_status()
            except httpx.HTTPError as e:
                logger.warning(f"[{MLH}] Profile fetch failed, continuing with empty profile: {e}")
                attempt.profile = {}
                return attempt.profile

        try:
            body = response.json()
        except (ValueError, RecursionError) as e:
            logger.warning(f"[{MLH}] Profile response is not valid JSON: {e}")
            attempt.profile = {}
            return attempt.profile

        attempt.profile = normalize_profile_data(body)
        return attempt.profile

    async def user_profile(
        self, access_token: str, attempt: AuthAttempt | None = None
    ) -> dict[str, Any]:
        """
        Return the normalized profile with ``provider`` forced to "mlh".

        Every field MyMLH returned is kept as is (id, first_name, last_name,
        email, phone_number, plus any expanded sub-resources). A top-level
        array is keyed by index.
        """
        if attempt is None:
            attempt = AuthAttempt(access_token=access_token)

        data = await self.fetch_data(attempt)

        try:
            return {**profile_mapping(data), PROFILE_PROVIDER_KEY: MLH}
        except Exception as e:
            logger.error(f"[{MLH}] Could not build profile: {e}")
            raise ProfileError(f"Could not build {MLH} profile: {e}") from e

    def uid(self, attempt: AuthAttempt) -> Any:
        if attempt.profile is None:
            raise ProfileNotLoadedError()
        return profile_mapping(attempt.profile).get(PROFILE_ID_KEY)
