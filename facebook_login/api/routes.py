"""
FastAPI routes wiring the Facebook login handler chain.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse, RedirectResponse

from facebook_login.clients import OAuth2Client
from facebook_login.core.config import AppSettings
from facebook_login.dependencies import (
    get_app_settings,
    get_oauth_client,
    get_state_issuer,
)
from facebook_login.services import (
    ContextHandler,
    LoginContext,
    StateIssuer,
    callback_handler,
    login_handler,
    state_handler,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _wants_html(request: Request) -> bool:
    return "text/html" in request.headers.get("accept", "").lower()


def _login_succeeded(settings: AppSettings) -> ContextHandler:
    async def handle(request: Request, context: LoginContext) -> Response:
        user = context.user
        logger.info("Facebook login succeeded for user %s", user.id)

        redirect_target = settings.frontend_base_url
        if redirect_target and _wants_html(request):
            return RedirectResponse(
                url=str(redirect_target), status_code=HTTPStatus.TEMPORARY_REDIRECT
            )
        return JSONResponse(
            content={
                "status": "authenticated",
                "user": user.model_dump(exclude_none=True),
            }
        )

    return handle


@router.get("/health", status_code=HTTPStatus.OK)
async def healthcheck() -> dict:
    """Simple health endpoint for monitoring."""
    return {"status": "ok"}


@router.get("/auth/facebook/login")
async def start_facebook_login(
    request: Request,
    oauth_client: Annotated[OAuth2Client, Depends(get_oauth_client)],
    state_issuer: Annotated[StateIssuer, Depends(get_state_issuer)],
) -> Response:
    """Set the state cookie and redirect to the Facebook login dialog."""
    handler = state_handler(state_issuer, login_handler(oauth_client))
    return await handler(request, LoginContext())


@router.get("/auth/facebook/callback")
async def handle_facebook_callback(
    request: Request,
    oauth_client: Annotated[OAuth2Client, Depends(get_oauth_client)],
    state_issuer: Annotated[StateIssuer, Depends(get_state_issuer)],
    settings: Annotated[AppSettings, Depends(get_app_settings)],
) -> Response:
    """Complete the login and report the Facebook user or the failure."""
    handler = state_handler(
        state_issuer,
        callback_handler(oauth_client, success=_login_succeeded(settings)),
    )
    return await handler(request, LoginContext())
