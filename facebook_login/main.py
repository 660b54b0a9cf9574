"""
FastAPI application entrypoint for the Facebook login demo.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from facebook_login.api.routes import router as api_router
from facebook_login.core.config import AppSettings, get_settings
from facebook_login.core.logging import configure_logging
from facebook_login.dependencies import get_app_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Build the demo application.

    ``settings`` replaces the environment-derived configuration for every
    route, which lets embedding applications and tests pin their own values.
    """
    resolved = settings or get_settings()
    configure_logging(resolved.log_level)

    app = FastAPI(
        title="Facebook Login",
        version="0.1.0",
        description="OAuth2 login with Facebook: state cookie, redirect and callback.",
    )
    app.include_router(api_router, prefix="/api")
    if settings is not None:
        app.dependency_overrides[get_app_settings] = lambda: settings

    logger.info(
        "Facebook login routes mounted; redirect URI %s", resolved.facebook.redirect_uri
    )
    return app


app = create_app()

__all__ = ["app", "create_app"]
