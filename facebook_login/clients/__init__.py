"""Expose constructed client wrappers."""

from .facebook import FacebookClient, FacebookUserUnavailableError
from .oauth2 import (
    OAuth2Client,
    OAuthAuthorizationDeniedError,
    OAuthCallbackError,
    OAuthError,
    OAuthStateError,
    OAuthTokenExchangeError,
)

__all__ = [
    "FacebookClient",
    "FacebookUserUnavailableError",
    "OAuth2Client",
    "OAuthAuthorizationDeniedError",
    "OAuthCallbackError",
    "OAuthError",
    "OAuthStateError",
    "OAuthTokenExchangeError",
]
