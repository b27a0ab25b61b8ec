"""Catalog domain models: placements, creatives and the in-memory snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AdFormat(str, Enum):
    banner = "banner"
    interstitial = "interstitial"
    video = "video"


class AdPlacement(BaseModel):
    """A named ad slot with a fixed format and size."""

    model_config = ConfigDict(frozen=True)

    placement_id: str = Field(..., min_length=1, description="Unique placement identifier")
    format: AdFormat = Field(..., description="Ad format the slot accepts")
    width: int = Field(..., gt=0, description="Slot width in pixels")
    height: int = Field(..., gt=0, description="Slot height in pixels")


class Creative(BaseModel):
    """A priced ad asset that can fill placements of the same format and size."""

    model_config = ConfigDict(frozen=True)

    creative_id: str = Field(..., min_length=1, description="Unique creative identifier")
    format: AdFormat = Field(..., description="Ad format of the asset")
    width: int = Field(..., gt=0, description="Asset width in pixels")
    height: int = Field(..., gt=0, description="Asset height in pixels")
    content: str = Field(default="", description="Opaque creative payload")
    price: float = Field(..., ge=0, description="Price paid when the creative is served")


@dataclass(frozen=True)
class CatalogSnapshot:
    """Point-in-time copy of every placement and creative."""

    placements: tuple[AdPlacement, ...] = field(default_factory=tuple)
    creatives: tuple[Creative, ...] = field(default_factory=tuple)

    def counts(self) -> dict[str, int]:
        return {"placements": len(self.placements), "creatives": len(self.creatives)}
