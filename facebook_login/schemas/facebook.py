"""Facebook Graph API payloads."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class FacebookUser(BaseModel):
    """Subset of the Graph API ``me`` profile used by the login flow."""

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    id: str = Field("", description="App-scoped user identifier.")
    name: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    picture: Optional[dict[str, Any]] = None


__all__ = ["FacebookUser"]
