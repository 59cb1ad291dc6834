import json
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mlh_auth.auth_strategies.constants import (
    DEFAULT_USER_AGENT,
    OAUTH_STATE_COOKIE,
    OAUTH_STATE_TTL_SECONDS,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="", case_sensitive=True, extra="ignore"
    )

    # Application
    APP_NAME: str = "MLHAuth"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "MyMLH OAuth 2.0 login"
    DEBUG: bool = False
    API_V1_PREFIX: str = "/api/v1"

    # MyMLH OAuth client
    MLH_CLIENT_ID: str | None = None
    MLH_CLIENT_SECRET: str | None = None
    MLH_REDIRECT_URI: str | None = None
    MLH_SCOPE: str | None = None
    MLH_EXPAND_FIELDS: str | list[str] = []
    MLH_USER_AGENT: str = DEFAULT_USER_AGENT
    MLH_PROFILE_URL: str | None = None

    # OAuth state cookie
    OAUTH_STATE_COOKIE: str = OAUTH_STATE_COOKIE
    OAUTH_STATE_TTL_SECONDS: int = OAUTH_STATE_TTL_SECONDS

    @field_validator("MLH_EXPAND_FIELDS", mode="before")
    @classmethod
    def parse_expand_fields(cls, v: Any) -> Any:
        if isinstance(v, str):
            if v.startswith("[") and v.endswith("]"):
                try:
                    return json.loads(v)
                except ValueError:
                    pass
            return [field.strip() for field in v.split(",") if field.strip()]
        return v

    @property
    def mlh_configured(self) -> bool:
        return bool(self.MLH_CLIENT_ID and self.MLH_CLIENT_SECRET)


# Global settings instance
try:
    settings = Settings()
except Exception as e:
    print(f"Error loading settings: {e}")
    raise e
