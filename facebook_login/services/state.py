"""
Cookie-backed OAuth2 state for CSRF protection (RFC 6749 section 10.12).
"""

from __future__ import annotations

import logging
import secrets
from typing import Tuple

from fastapi import Request, Response

from facebook_login.core.config import OAuthSettings
from facebook_login.services.context import ContextHandler, LoginContext

logger = logging.getLogger(__name__)


class StateIssuer:
    """Read the state token from its cookie or mint a new one."""

    TOKEN_BYTES = 32

    def __init__(self, oauth_settings: OAuthSettings) -> None:
        self._settings = oauth_settings

    @property
    def cookie_name(self) -> str:
        return self._settings.state_cookie_name

    def issue_or_read(self, request: Request) -> Tuple[str, bool]:
        """Return ``(state, issued)``; ``issued`` is true when no cookie was present."""
        existing = request.cookies.get(self.cookie_name)
        if existing:
            return existing, False
        return secrets.token_urlsafe(self.TOKEN_BYTES), True

    def set_cookie(self, response: Response, state: str) -> None:
        response.set_cookie(
            key=self.cookie_name,
            value=state,
            max_age=self._settings.state_ttl_seconds,
            path=self._settings.state_cookie_path,
            secure=self._settings.state_cookie_secure,
            httponly=True,
            samesite="lax",
        )


def state_handler(issuer: StateIssuer, success: ContextHandler) -> ContextHandler:
    """
    Attach the state token to the context before calling ``success``.

    When the request carried no state cookie, a fresh token is issued and
    written as a cookie on the response ``success`` returns.
    """

    async def handle(request: Request, context: LoginContext) -> Response:
        state, issued = issuer.issue_or_read(request)
        response = await success(request, context.with_state(state))
        if issued:
            logger.debug("Issued new OAuth state cookie %s", issuer.cookie_name)
            issuer.set_cookie(response, state)
        return response

    return handle


__all__ = ["StateIssuer", "state_handler"]
