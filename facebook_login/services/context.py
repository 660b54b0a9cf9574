"""Per-request values threaded through the login handler chain."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Awaitable, Callable, Optional, Union

from fastapi import Request, Response

from facebook_login.schemas import FacebookUser


@dataclass(frozen=True)
class LoginContext:
    """
    Immutable login state handed from one handler to the next.

    Each stage derives a new context instead of mutating the one it received.
    Setting a user clears any error and vice versa, so a terminal handler sees
    exactly one of them after a callback.
    """

    state: Optional[str] = None
    access_token: Optional[str] = None
    user: Optional[FacebookUser] = None
    error: Optional[Exception] = None

    def with_state(self, state: str) -> LoginContext:
        return replace(self, state=state)

    def with_access_token(self, access_token: str) -> LoginContext:
        return replace(self, access_token=access_token)

    def with_user(self, user: FacebookUser) -> LoginContext:
        return replace(self, user=user, error=None)

    def with_error(self, error: Exception) -> LoginContext:
        return replace(self, error=error, user=None)


@dataclass(frozen=True)
class Authenticated:
    """The callback produced a validated Facebook user."""

    user: FacebookUser
    access_token: str


@dataclass(frozen=True)
class Failed:
    """The callback failed; ``error`` says why."""

    error: Exception


LoginResult = Union[Authenticated, Failed]

ContextHandler = Callable[[Request, LoginContext], Awaitable[Response]]


__all__ = [
    "Authenticated",
    "ContextHandler",
    "Failed",
    "LoginContext",
    "LoginResult",
]
