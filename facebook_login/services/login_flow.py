"""
Facebook login handler chain.

``login_handler`` redirects to the Facebook login dialog, ``callback_handler``
completes the redirect callback: it checks the state, exchanges the code for
an access token, fetches the user from the Graph API and dispatches to the
success or failure continuation with the resulting ``LoginContext``.
"""

from __future__ import annotations

import logging
import secrets
from http import HTTPStatus
from typing import Optional

import httpx
from fastapi import Request, Response
from fastapi.responses import JSONResponse, RedirectResponse

from facebook_login.clients import (
    FacebookClient,
    FacebookUserUnavailableError,
    OAuth2Client,
    OAuthAuthorizationDeniedError,
    OAuthCallbackError,
    OAuthStateError,
    OAuthTokenExchangeError,
)
from facebook_login.schemas import FacebookUser, OAuthCallbackParams
from facebook_login.services.context import (
    Authenticated,
    ContextHandler,
    Failed,
    LoginContext,
    LoginResult,
)

logger = logging.getLogger(__name__)


async def default_failure_handler(request: Request, context: LoginContext) -> Response:
    """Respond with 400 and the error message attached to the context."""
    message = str(context.error) if context.error is not None else "unknown error"
    return JSONResponse({"detail": message}, status_code=HTTPStatus.BAD_REQUEST)


def validate_response(
    user: FacebookUser | None,
    response: httpx.Response | None,
    error: Exception | None,
) -> FacebookUserUnavailableError | None:
    """
    Return the canonical error if the user, raw response or error are unexpected.

    Returns ``None`` when they are valid.
    """
    if error is not None or response is None or response.status_code != HTTPStatus.OK:
        return FacebookUserUnavailableError()
    if user is None or not user.id:
        return FacebookUserUnavailableError()
    return None


class FacebookLoginFlow:
    """Runs the callback steps and reports the outcome as a ``LoginResult``."""

    def __init__(self, oauth_client: OAuth2Client) -> None:
        self._oauth = oauth_client

    async def exchange(self, request: Request, context: LoginContext) -> LoginContext:
        """Validate the callback parameters and exchange the code for an access token."""
        params = OAuthCallbackParams.model_validate(dict(request.query_params))

        if params.error:
            detail = params.error_description or params.error_reason or params.error
            logger.info("Facebook login denied: %s", params.error)
            return context.with_error(OAuthAuthorizationDeniedError(f"facebook: {detail}"))

        if not params.code or not params.state:
            return context.with_error(OAuthCallbackError())

        if not context.state or not secrets.compare_digest(
            params.state.encode("utf-8"), context.state.encode("utf-8")
        ):
            logger.warning("OAuth state mismatch on Facebook callback")
            return context.with_error(OAuthStateError())

        try:
            token = await self._oauth.exchange_authorization_code(params.code)
        except OAuthTokenExchangeError as exc:
            logger.warning("Facebook token exchange failed: %s", exc)
            return context.with_error(exc)

        return context.with_access_token(token.access_token)

    async def fetch_user(self, context: LoginContext) -> LoginContext:
        """Look up the Facebook user for the context's access token."""
        if context.error is not None:
            return context
        if not context.access_token:
            return context.with_error(OAuthTokenExchangeError("oauth2: missing access token"))

        user: FacebookUser | None = None
        response: httpx.Response | None = None
        error: Exception | None = None
        try:
            async with self._oauth.authorized_client(context.access_token) as http_client:
                client = FacebookClient(http_client, fields=self._oauth.profile_fields)
                user, response = await client.me()
        except (httpx.HTTPError, ValueError) as exc:
            error = exc

        invalid = validate_response(user, response, error)
        if invalid is not None:
            # The cause is only logged; callers always see the canonical error.
            logger.warning(
                "Unable to get Facebook user (status=%s, error=%s)",
                response.status_code if response is not None else None,
                type(error).__name__ if error is not None else None,
            )
            return context.with_error(invalid)

        return context.with_user(user)

    async def complete(self, request: Request, context: LoginContext) -> LoginResult:
        """Run the whole callback and return ``Authenticated`` or ``Failed``."""
        context = await self.exchange(request, context)
        context = await self.fetch_user(context)
        return result_from_context(context)


def result_from_context(context: LoginContext) -> LoginResult:
    if context.user is not None and context.access_token:
        return Authenticated(user=context.user, access_token=context.access_token)
    return Failed(error=context.error or FacebookUserUnavailableError())


def login_handler(
    oauth_client: OAuth2Client, failure: Optional[ContextHandler] = None
) -> ContextHandler:
    """Redirect to the Facebook login dialog using the state from the context."""
    failure = failure or default_failure_handler

    async def handle(request: Request, context: LoginContext) -> Response:
        if not context.state:
            return await failure(request, context.with_error(OAuthStateError()))
        authorization_url = oauth_client.build_authorization_url(state=context.state)
        return RedirectResponse(url=authorization_url, status_code=HTTPStatus.FOUND)

    return handle


def facebook_handler(
    oauth_client: OAuth2Client,
    success: ContextHandler,
    failure: Optional[ContextHandler] = None,
) -> ContextHandler:
    """
    Fetch the Facebook user for the context's access token.

    Adds the user to the context and calls ``success``; otherwise attaches the
    error and calls ``failure``.
    """
    failure = failure or default_failure_handler
    flow = FacebookLoginFlow(oauth_client)

    async def handle(request: Request, context: LoginContext) -> Response:
        context = await flow.fetch_user(context)
        if context.error is not None:
            return await failure(request, context)
        return await success(request, context)

    return handle


def callback_handler(
    oauth_client: OAuth2Client,
    success: ContextHandler,
    failure: Optional[ContextHandler] = None,
) -> ContextHandler:
    """
    Handle the Facebook redirect URI request.

    Adds the access token and the Facebook user to the context. If
    authentication succeeds handling continues with ``success``, otherwise
    with ``failure``.
    """
    failure = failure or default_failure_handler
    flow = FacebookLoginFlow(oauth_client)
    success = facebook_handler(oauth_client, success, failure)

    async def handle(request: Request, context: LoginContext) -> Response:
        context = await flow.exchange(request, context)
        if context.error is not None:
            return await failure(request, context)
        return await success(request, context)

    return handle


__all__ = [
    "FacebookLoginFlow",
    "callback_handler",
    "default_failure_handler",
    "facebook_handler",
    "login_handler",
    "result_from_context",
    "validate_response",
]
