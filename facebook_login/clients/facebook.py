"""
Minimal Graph API client used to look up the authenticated Facebook user.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import httpx

from facebook_login.clients.oauth2 import OAuthError
from facebook_login.schemas import FacebookUser


class FacebookUserUnavailableError(OAuthError):
    """Raised whenever the Facebook profile cannot be retrieved or is malformed."""

    def __init__(self, message: str = "facebook: unable to get Facebook User") -> None:
        super().__init__(message)


class FacebookClient:
    """Wrap a bearer-authenticated ``httpx.AsyncClient`` pointed at the Graph API."""

    ME_PATH = "me"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        fields: Sequence[str] = ("id", "name", "email"),
    ) -> None:
        self._http = http_client
        self._fields = tuple(fields)

    async def me(self) -> Tuple[FacebookUser | None, httpx.Response]:
        """
        Fetch the profile of the user owning the access token.

        Returns the parsed user (``None`` for non-2xx responses) alongside the
        raw response so callers can inspect the status code. Transport errors
        and undecodable bodies propagate.
        """
        params = {"fields": ",".join(self._fields)} if self._fields else None
        response = await self._http.get(self.ME_PATH, params=params)
        if not response.is_success:
            return None, response
        return FacebookUser.model_validate(response.json()), response


__all__ = ["FacebookClient", "FacebookUserUnavailableError"]
