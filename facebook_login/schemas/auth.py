"""Schemas related to OAuth flows."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class OAuthCallbackParams(BaseModel):
    """Query parameters Facebook appends to the redirect URI."""

    code: Optional[str] = Field(None, description="Authorization code returned by Facebook.")
    state: Optional[str] = Field(None, description="State token echoed back by Facebook.")
    error: Optional[str] = Field(None, description="Set when the user denied the request.")
    error_reason: Optional[str] = None
    error_description: Optional[str] = None


class TokenResponse(BaseModel):
    """Access token payload returned by the token endpoint."""

    access_token: str = Field(..., min_length=1)
    token_type: Optional[str] = None
    expires_in: Optional[int] = None


__all__ = ["OAuthCallbackParams", "TokenResponse"]
