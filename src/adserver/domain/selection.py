"""Creative selection: highest strictly-positive price among exact matches."""

from __future__ import annotations

from typing import Iterable

from ..models import AdPlacement, Creative


def is_applicable(placement: AdPlacement, creative: Creative) -> bool:
    """True if the creative has exactly the placement's format and size."""
    return (
        creative.format == placement.format
        and creative.width == placement.width
        and creative.height == placement.height
    )


def select_creative(placement: AdPlacement, creatives: Iterable[Creative]) -> Creative | None:
    """Return the highest-priced applicable creative, or None.

    The running maximum starts at 0.0 and only a strictly greater price
    replaces the current pick, so the first creative at the top price wins
    ties and a zero-priced creative is never selected.
    """
    selected: Creative | None = None
    highest_price = 0.0
    for creative in creatives:
        if not is_applicable(placement, creative):
            continue
        if creative.price > highest_price:
            selected = creative
            highest_price = creative.price
    return selected
