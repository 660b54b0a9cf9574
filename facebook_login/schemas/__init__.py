"""Public schema exports."""

from .auth import OAuthCallbackParams, TokenResponse
from .facebook import FacebookUser

__all__ = [
    "FacebookUser",
    "OAuthCallbackParams",
    "TokenResponse",
]
