"""Service layer exports."""

from .context import Authenticated, ContextHandler, Failed, LoginContext, LoginResult
from .login_flow import (
    FacebookLoginFlow,
    callback_handler,
    default_failure_handler,
    facebook_handler,
    login_handler,
    validate_response,
)
from .state import StateIssuer, state_handler

__all__ = [
    "Authenticated",
    "ContextHandler",
    "FacebookLoginFlow",
    "Failed",
    "LoginContext",
    "LoginResult",
    "StateIssuer",
    "callback_handler",
    "default_failure_handler",
    "facebook_handler",
    "login_handler",
    "state_handler",
    "validate_response",
]
