from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mlh_auth.auth_strategies.constants import (
    DEFAULT_USER_AGENT,
    MLH_AUTHORIZATION_URL,
    MLH_PROFILE_URL,
    MLH_SCOPE_SEPARATOR,
    MLH_TOKEN_ENDPOINT_AUTH_METHOD,
    MLH_TOKEN_URL,
    USER_AGENT_HEADER,
)

OAuthProvider = Literal["mlh"]


class StrategyOptions(BaseModel):
    """
    Configuration for the MyMLH strategy.

    Accepts both snake_case names and their camelCase aliases
    (clientID, callbackURL, expandFields, ...).
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    client_id: str | None = Field(default=None, alias="clientID")
    client_secret: str | None = Field(default=None, alias="clientSecret")
    callback_url: str | None = Field(default=None, alias="callbackURL")

    authorization_url: str = Field(default=MLH_AUTHORIZATION_URL, alias="authorizationURL")
    token_url: str = Field(default=MLH_TOKEN_URL, alias="tokenURL")
    profile_url: str = Field(default=MLH_PROFILE_URL, alias="profileURL")

    expand_fields: list[str] = Field(default_factory=list, alias="expandFields")
    custom_headers: dict[str, str] = Field(default_factory=dict, alias="customHeaders")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, alias="userAgent")
    scope: str | None = None

    @field_validator("scope", mode="before")
    @classmethod
    def normalize_scope(cls, v: Any) -> Any:
        # Collapse any whitespace run so the scope parameter is never malformed
        if isinstance(v, str):
            return MLH_SCOPE_SEPARATOR.join(v.split()) or None
        if isinstance(v, list | tuple):
            return MLH_SCOPE_SEPARATOR.join(str(s).strip() for s in v if str(s).strip()) or None
        return v

    @field_validator("expand_fields", mode="before")
    @classmethod
    def parse_expand_fields(cls, v: Any) -> Any:
        if v is None:
            return []
        return v

    @field_validator("custom_headers", mode="before")
    @classmethod
    def parse_custom_headers(cls, v: Any) -> Any:
        if v is None:
            return {}
        return v

    @model_validator(mode="after")
    def apply_user_agent(self) -> "StrategyOptions":
        headers = dict(self.custom_headers)
        if not headers.get(USER_AGENT_HEADER):
            headers[USER_AGENT_HEADER] = self.user_agent
        self.custom_headers = headers
        return self

    @property
    def scope_separator(self) -> str:
        return MLH_SCOPE_SEPARATOR

    @property
    def token_endpoint_auth_method(self) -> str:
        return MLH_TOKEN_ENDPOINT_AUTH_METHOD


@dataclass
class AuthAttempt:
    """
    State of a single authentication attempt.

    Holds the provider access token and the cached profile slot. ``profile``
    stays ``None`` until the first fetch; after that it is never re-fetched,
    even when the fetch failed (an empty dict is stored instead).
    """

    access_token: str
    refresh_token: str | None = None
    profile: dict[str, Any] | list[Any] | None = None


class OAuthLoginResponse(BaseModel):
    """Returned after a successful OAuth login."""

    provider: OAuthProvider
    provider_user_id: str | None
    profile: dict[str, Any]
