"""
Application configuration models and helpers.

Centralizes settings management so the login handlers, the OAuth client and
the demo FastAPI app share a consistent configuration surface.
"""

from functools import lru_cache
from typing import Annotated, Optional

from pydantic import AnyHttpUrl, Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_ENV_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
    populate_by_name=True,
    frozen=True,
)


def _split_csv(value: str | tuple[str, ...] | list[str]) -> tuple[str, ...]:
    if isinstance(value, tuple):
        return value
    if isinstance(value, list):
        return tuple(value)
    return tuple(item.strip() for item in value.split(",") if item.strip())


class FacebookSettings(BaseSettings):
    """Client credentials and endpoints for the Facebook OAuth2 provider."""

    model_config = _ENV_CONFIG

    client_id: str = Field(..., validation_alias="FACEBOOK_CLIENT_ID")
    client_secret: str = Field(..., validation_alias="FACEBOOK_CLIENT_SECRET")
    redirect_uri: AnyHttpUrl = Field(..., validation_alias="FACEBOOK_REDIRECT_URI")
    authorize_url: str = Field(
        "https://www.facebook.com/v19.0/dialog/oauth",
        validation_alias="FACEBOOK_AUTHORIZE_URL",
    )
    token_url: str = Field(
        "https://graph.facebook.com/v19.0/oauth/access_token",
        validation_alias="FACEBOOK_TOKEN_URL",
    )
    graph_api_url: str = Field(
        "https://graph.facebook.com/v19.0/",
        validation_alias="FACEBOOK_GRAPH_API_URL",
        description="Base URL the profile endpoint is resolved against.",
    )
    profile_fields: Annotated[tuple[str, ...], NoDecode] = Field(
        ("id", "name", "email"),
        validation_alias="FACEBOOK_PROFILE_FIELDS",
    )

    @field_validator("profile_fields", mode="before")
    @classmethod
    def _split_fields(
        cls, value: str | tuple[str, ...] | list[str]
    ) -> tuple[str, ...]:
        """Support providing profile fields as a comma-separated string."""
        return _split_csv(value)


class OAuthSettings(BaseSettings):
    """OAuth flow configuration."""

    model_config = _ENV_CONFIG

    scopes: Annotated[tuple[str, ...], NoDecode] = Field(
        ("public_profile", "email"),
        validation_alias="OAUTH_SCOPES",
    )
    state_cookie_name: str = Field(
        "facebook-login-state", validation_alias="OAUTH_STATE_COOKIE_NAME"
    )
    state_ttl_seconds: int = Field(60, validation_alias="OAUTH_STATE_TTL")
    state_cookie_path: str = Field("/", validation_alias="OAUTH_STATE_COOKIE_PATH")
    state_cookie_secure: bool = Field(
        True,
        validation_alias="OAUTH_STATE_COOKIE_SECURE",
        description="Disable only for local development over plain HTTP.",
    )
    http_timeout_seconds: float = Field(10.0, validation_alias="OAUTH_HTTP_TIMEOUT")

    @field_validator("scopes", mode="before")
    @classmethod
    def _split_scopes(
        cls, value: str | tuple[str, ...] | list[str]
    ) -> tuple[str, ...]:
        """Support providing scopes as a comma-separated string."""
        return _split_csv(value)


class AppSettings(BaseSettings):
    """Root settings object for the FastAPI application."""

    model_config = _ENV_CONFIG

    log_level: str = Field("INFO", validation_alias="APP_LOG_LEVEL")
    frontend_base_url: Optional[HttpUrl] = Field(
        None,
        validation_alias="FRONTEND_BASE_URL",
        description="Optional URL browsers are sent to after a successful login.",
    )
    oauth: OAuthSettings = Field(default_factory=OAuthSettings)
    facebook: FacebookSettings = Field(default_factory=FacebookSettings)


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings object."""
    return AppSettings()  # type: ignore[call-arg]


__all__ = [
    "AppSettings",
    "FacebookSettings",
    "OAuthSettings",
    "get_settings",
]
