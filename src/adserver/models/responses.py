"""Response DTOs for the serve tool."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ServeStatus(str, Enum):
    served = "served"
    no_applicable_creative = "no_applicable_creative"
    placement_not_found = "placement_not_found"
    no_creatives = "no_creatives"


class AdResponse(BaseModel):
    """The creative chosen for a placement."""

    creative_id: str = Field(..., description="Selected creative identifier")
    content: str = Field(..., description="Creative payload to render")
    price: float = Field(..., ge=0, description="Price of the selected creative")
    user_id: str = Field(..., description="User the ad was served to")


class ServeOutcome(BaseModel):
    """Tagged result of a serve call.

    Only ``served`` carries a response; every other status is a normal,
    expected outcome rather than a fault.
    """

    status: ServeStatus = Field(..., description="Which outcome the serve call reached")
    placement_id: str = Field(..., description="Placement that was requested")
    user_id: str = Field(..., description="Resolved user identifier")
    response: AdResponse | None = Field(default=None, description="Populated when status is 'served'")
    detail: str = Field(default="", description="Human-readable explanation")

    @property
    def served(self) -> bool:
        return self.status is ServeStatus.served
