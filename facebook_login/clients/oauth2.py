"""
OAuth2 client for the Facebook authorization code flow.

Builds authorization URLs, exchanges authorization codes and hands out
bearer-authenticated HTTP clients for the Graph API.
"""

from __future__ import annotations

import logging
from urllib.parse import urlencode

import httpx
from fastapi import status
from pydantic import ValidationError

from facebook_login.core.config import FacebookSettings, OAuthSettings
from facebook_login.schemas import TokenResponse

logger = logging.getLogger(__name__)


class OAuthError(Exception):
    """Base class for errors attached to a failed login."""


class OAuthStateError(OAuthError):
    """Raised when the state parameter is missing or does not match the cookie."""

    def __init__(self, message: str = "oauth2: invalid OAuth2 state parameter") -> None:
        super().__init__(message)


class OAuthCallbackError(OAuthError):
    """Raised when the callback request lacks the code or state parameter."""

    def __init__(self, message: str = "oauth2: request missing code or state") -> None:
        super().__init__(message)


class OAuthAuthorizationDeniedError(OAuthError):
    """Raised when the provider redirects back with an ``error`` parameter."""


class OAuthTokenExchangeError(OAuthError):
    """Raised when the token endpoint returns an error."""


class OAuth2Client:
    """Build Facebook authorization URLs and exchange authorization codes."""

    def __init__(
        self,
        facebook_settings: FacebookSettings,
        oauth_settings: OAuthSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._facebook = facebook_settings
        self._oauth = oauth_settings
        self._transport = transport

    @property
    def profile_fields(self) -> tuple[str, ...]:
        return self._facebook.profile_fields

    def build_authorization_url(self, state: str) -> str:
        """Construct the Facebook login dialog URL."""
        params = {
            "client_id": self._facebook.client_id,
            "redirect_uri": str(self._facebook.redirect_uri),
            "response_type": "code",
            "scope": ",".join(self._oauth.scopes),
            "state": state,
        }
        separator = "&" if "?" in self._facebook.authorize_url else "?"
        return f"{self._facebook.authorize_url}{separator}{urlencode(params)}"

    async def exchange_authorization_code(self, code: str) -> TokenResponse:
        """Exchange an authorization code for an access token."""
        payload = {
            "code": code,
            "client_id": self._facebook.client_id,
            "client_secret": self._facebook.client_secret,
            "redirect_uri": str(self._facebook.redirect_uri),
            "grant_type": "authorization_code",
        }

        try:
            async with self._client() as client:
                response = await client.post(
                    self._facebook.token_url,
                    data=payload,
                    headers={"Accept": "application/json"},
                )
        except httpx.HTTPError as exc:
            logger.warning("Token request failed: %s", exc)
            raise OAuthTokenExchangeError("oauth2: token request failed") from exc

        if response.status_code != status.HTTP_200_OK:
            logger.warning(
                "Token endpoint returned HTTP %s", response.status_code
            )
            raise OAuthTokenExchangeError(
                f"oauth2: cannot fetch token: HTTP {response.status_code}"
            )

        try:
            return TokenResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise OAuthTokenExchangeError(
                "oauth2: server response missing access_token"
            ) from exc

    def authorized_client(self, access_token: str) -> httpx.AsyncClient:
        """Return a Graph API client that sends the access token as a bearer credential."""
        return self._client(
            base_url=self._facebook.graph_api_url,
            headers={
                "Authorization": f"Bearer {access_token}",
                "Accept": "application/json",
            },
        )

    def _client(self, **kwargs) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._oauth.http_timeout_seconds,
            transport=self._transport,
            **kwargs,
        )


__all__ = [
    "OAuth2Client",
    "OAuthAuthorizationDeniedError",
    "OAuthCallbackError",
    "OAuthError",
    "OAuthStateError",
    "OAuthTokenExchangeError",
]
