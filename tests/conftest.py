"""Pytest configuration shared across the suite."""

try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover
    import _bootstrap  # type: ignore # noqa: F401

from urllib.parse import urlencode

import httpx
import pytest
from fastapi import Request

from facebook_login.clients import OAuth2Client
from facebook_login.core.config import FacebookSettings, OAuthSettings


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO-powered tests to run against asyncio backend only."""
    return "asyncio"


class FakeFacebook:
    """In-memory stand-in for the Facebook token and Graph API endpoints."""

    def __init__(self) -> None:
        self.token_status = 200
        self.token_body: dict = {
            "access_token": "fb-access-token",
            "token_type": "bearer",
            "expires_in": 5183944,
        }
        self.profile_status = 200
        self.profile_body: dict = {"id": "123", "name": "Ann"}
        self.profile_error: Exception | None = None
        self.token_error: Exception | None = None
        self.requests: list[httpx.Request] = []

    @property
    def profile_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/me")]

    @property
    def token_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/oauth/access_token")]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.endswith("/oauth/access_token"):
            if self.token_error is not None:
                raise self.token_error
            return httpx.Response(self.token_status, json=self.token_body)
        if request.url.path.endswith("/me"):
            if self.profile_error is not None:
                raise self.profile_error
            return httpx.Response(self.profile_status, json=self.profile_body)
        return httpx.Response(404, json={"error": "not found"})

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def facebook_settings() -> FacebookSettings:
    return FacebookSettings(
        FACEBOOK_CLIENT_ID="client",
        FACEBOOK_CLIENT_SECRET="secret",
        FACEBOOK_REDIRECT_URI="https://example.com/callback",
    )


@pytest.fixture
def oauth_settings() -> OAuthSettings:
    return OAuthSettings(OAUTH_STATE_COOKIE_SECURE=False)


@pytest.fixture
def fake_facebook() -> FakeFacebook:
    return FakeFacebook()


@pytest.fixture
def oauth_client(facebook_settings, oauth_settings, fake_facebook) -> OAuth2Client:
    return OAuth2Client(
        facebook_settings, oauth_settings, transport=fake_facebook.transport()
    )


@pytest.fixture
def make_request():
    """Build a bare Starlette request with the given query and cookies."""

    def _make(query: dict | None = None, cookies: dict | None = None) -> Request:
        headers = []
        if cookies:
            cookie_header = "; ".join(f"{k}={v}" for k, v in cookies.items())
            headers.append((b"cookie", cookie_header.encode("latin-1")))
        scope = {
            "type": "http",
            "method": "GET",
            "path": "/",
            "query_string": urlencode(query or {}).encode("latin-1"),
            "headers": headers,
        }
        return Request(scope)

    return _make
