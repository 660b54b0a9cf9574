"""
Factory functions to provide shared clients and services as FastAPI dependencies.
"""

from functools import lru_cache

from facebook_login.clients import OAuth2Client
from facebook_login.core.config import get_settings
from facebook_login.services import StateIssuer


@lru_cache()
def get_oauth_client() -> OAuth2Client:
    """Create a singleton Facebook OAuth2 client."""
    settings = get_settings()
    return OAuth2Client(settings.facebook, settings.oauth)


@lru_cache()
def get_state_issuer() -> StateIssuer:
    """Provide the cookie-backed OAuth state issuer."""
    return StateIssuer(get_settings().oauth)


__all__ = ["get_oauth_client", "get_state_issuer"]
