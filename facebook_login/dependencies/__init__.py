"""Expose dependency helpers for FastAPI routers."""

from .clients import get_oauth_client, get_state_issuer
from .config import get_app_settings

__all__ = [
    "get_app_settings",
    "get_oauth_client",
    "get_state_issuer",
]
