"""Request DTOs for the serve tool."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AdRequest(BaseModel):
    """Input for a single ad serve call."""

    placement_id: str = Field(..., description="Placement to fill")
    user_id: str | None = Field(
        default=None,
        description="Caller-supplied user identifier; generated when missing",
    )
