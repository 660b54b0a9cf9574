from __future__ import annotations

import pytest
from fastapi.responses import PlainTextResponse

from facebook_login.services import LoginContext, StateIssuer, state_handler


def _recording_handler(seen: list[LoginContext]):
    async def handle(request, context: LoginContext):
        seen.append(context)
        return PlainTextResponse("ok")

    return handle


@pytest.mark.anyio
async def test_issues_cookie_when_missing(oauth_settings, make_request) -> None:
    seen: list[LoginContext] = []
    handler = state_handler(StateIssuer(oauth_settings), _recording_handler(seen))

    response = await handler(make_request(), LoginContext())

    set_cookies = response.headers.getlist("set-cookie")
    assert len(set_cookies) == 1
    assert set_cookies[0].startswith(f"{oauth_settings.state_cookie_name}=")
    assert "HttpOnly" in set_cookies[0]
    assert f"Max-Age={oauth_settings.state_ttl_seconds}" in set_cookies[0]
    assert seen[0].state
    assert seen[0].state in set_cookies[0]


@pytest.mark.anyio
async def test_reuses_state_from_cookie(oauth_settings, make_request) -> None:
    seen: list[LoginContext] = []
    issuer = StateIssuer(oauth_settings)
    handler = state_handler(issuer, _recording_handler(seen))

    await handler(make_request(), LoginContext())
    issued = seen[0].state

    replay = await handler(
        make_request(cookies={issuer.cookie_name: issued}), LoginContext()
    )

    assert seen[1].state == issued
    assert replay.headers.getlist("set-cookie") == []


def test_issued_states_are_unique(oauth_settings, make_request) -> None:
    issuer = StateIssuer(oauth_settings)

    first, first_issued = issuer.issue_or_read(make_request())
    second, second_issued = issuer.issue_or_read(make_request())

    assert first_issued and second_issued
    assert first != second


def test_secure_flag_follows_settings(oauth_settings, make_request) -> None:
    secure_settings = oauth_settings.model_copy(update={"state_cookie_secure": True})
    issuer = StateIssuer(secure_settings)
    response = PlainTextResponse("ok")

    issuer.set_cookie(response, "abc")

    assert "Secure" in response.headers["set-cookie"]
    assert "SameSite=lax" in response.headers["set-cookie"]
