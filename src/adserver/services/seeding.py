"""Load sample placements and creatives into the catalog."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError

from ..errors import DuplicateKeyError
from ..models import AdPlacement, Creative
from .catalog_cache import CatalogCache

logger = logging.getLogger(__name__)

# Project root / data / sample_catalog.json
DEFAULT_SAMPLE_CATALOG_PATH = (
    Path(__file__).resolve().parent.parent.parent.parent / "data" / "sample_catalog.json"
)


@dataclass
class SeedReport:
    """What a seeding run inserted and what it skipped as already present."""

    inserted_placements: int = 0
    inserted_creatives: int = 0
    skipped: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "inserted_placements": self.inserted_placements,
            "inserted_creatives": self.inserted_creatives,
            "skipped": list(self.skipped),
        }


def load_catalog_file(path: Path) -> tuple[list[AdPlacement], list[Creative]]:
    """Parse a catalog JSON file. Raises FileNotFoundError or ValueError."""
    if not path.exists():
        raise FileNotFoundError(f"catalog file not found: {path}")
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError("catalog file must contain an object with 'placements' and 'creatives' lists")
    try:
        placements = [AdPlacement.model_validate(item) for item in raw.get("placements", [])]
        creatives = [Creative.model_validate(item) for item in raw.get("creatives", [])]
    except ValidationError as exc:
        raise ValueError(f"invalid catalog entry in {path}: {exc}") from exc
    return placements, creatives


def seed_catalog(
    cache: CatalogCache,
    placements: list[AdPlacement],
    creatives: list[Creative],
) -> SeedReport:
    """Insert everything through the cache; existing ids are skipped, not fatal."""
    report = SeedReport()
    for placement in placements:
        try:
            cache.insert_placement(placement)
        except DuplicateKeyError:
            report.skipped.append(f"placement:{placement.placement_id}")
            continue
        report.inserted_placements += 1
    for creative in creatives:
        try:
            cache.insert_creative(creative)
        except DuplicateKeyError:
            report.skipped.append(f"creative:{creative.creative_id}")
            continue
        report.inserted_creatives += 1
    logger.info("catalog_seeded", extra=report.to_dict())
    return report


def seed_from_file(cache: CatalogCache, path: Path | None = None) -> SeedReport:
    placements, creatives = load_catalog_file(path or DEFAULT_SAMPLE_CATALOG_PATH)
    return seed_catalog(cache, placements, creatives)
