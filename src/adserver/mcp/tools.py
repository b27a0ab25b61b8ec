"""Tool registry for the ad server MCP surfaces.

Each tool is a thin wrapper around a ``*_payload`` function that takes the
owning service explicitly and returns a plain dict; the wrappers add timing,
logging and JSON encoding.
"""

from __future__ import annotations

import json
import time
import uuid
from typing import Any

from pydantic import ValidationError

from ..errors import CatalogError
from ..models import AdPlacement, AdRequest, Creative
from ..services.ad_service import AdService
from .observability import ServingStats

SERVE_TOOLS = frozenset({"ads_serve", "catalog_refresh", "catalog_health"})
ADMIN_TOOLS = frozenset({"placements_create", "creatives_create", "catalog_list", "catalog_refresh"})


# ---------------------------------------------------------------------------
# Payload builders (transport-free)
# ---------------------------------------------------------------------------


def serve_ad_payload(
    service: AdService,
    placement_id: str,
    user_id: str | None = None,
    stats: ServingStats | None = None,
) -> dict:
    outcome = service.serve_ad(AdRequest(placement_id=placement_id, user_id=user_id or None))
    if stats is not None:
        stats.record_serve(outcome)
    return outcome.model_dump(mode="json")


def refresh_payload(service: AdService) -> dict:
    try:
        counts = service.refresh_now()
    except CatalogError as exc:
        return {"ok": False, "error": str(exc)}
    return {"ok": True, **counts}


def health_payload(service: AdService, stats: ServingStats | None = None) -> dict:
    cache = service.cache
    payload = {"ok": cache.initialized, "catalog": cache.counts()}
    if stats is not None:
        payload["stats"] = stats.snapshot()
    return payload


def create_placement_payload(
    service: AdService,
    placement_id: str,
    format: str,
    width: int,
    height: int,
) -> dict:
    try:
        placement = AdPlacement(placement_id=placement_id, format=format, width=width, height=height)
    except ValidationError as exc:
        return {"ok": False, "error": f"invalid placement: {exc.errors()[0]['msg']}"}
    try:
        service.cache.insert_placement(placement)
    except CatalogError as exc:
        return {"ok": False, "error": str(exc)}
    return {"ok": True, "placement": placement.model_dump(mode="json")}


def create_creative_payload(
    service: AdService,
    creative_id: str,
    format: str,
    width: int,
    height: int,
    content: str,
    price: float,
) -> dict:
    try:
        creative = Creative(
            creative_id=creative_id,
            format=format,
            width=width,
            height=height,
            content=content,
            price=price,
        )
    except ValidationError as exc:
        return {"ok": False, "error": f"invalid creative: {exc.errors()[0]['msg']}"}
    try:
        service.cache.insert_creative(creative)
    except CatalogError as exc:
        return {"ok": False, "error": str(exc)}
    return {"ok": True, "creative": creative.model_dump(mode="json")}


def catalog_list_payload(service: AdService) -> dict:
    snapshot = service.cache.snapshot()
    return {
        "placements": [p.model_dump(mode="json") for p in snapshot.placements],
        "creatives": [c.model_dump(mode="json") for c in snapshot.creatives],
    }


def _respond(
    stats: ServingStats,
    tool: str,
    t0: float,
    payload: dict[str, Any],
    extra: dict[str, Any] | None = None,
) -> str:
    latency_ms = (time.monotonic() - t0) * 1000
    error = payload.get("error") if payload.get("ok") is False else None
    stats.record_tool(tool, str(uuid.uuid4()), latency_ms, error=error, extra=extra)
    return json.dumps(payload, indent=2)


# ---------------------------------------------------------------------------
# Serve surface
# ---------------------------------------------------------------------------


def register_serve_tools(mcp, service: AdService, stats: ServingStats) -> None:
    """Register the ad-request tools; serve outcomes are tallied in ``stats``."""

    @mcp.tool()
    def ads_serve(placement_id: str, user_id: str | None = None) -> str:
        """Serve the highest-priced creative matching a placement.

        Args:
            placement_id: Placement to fill
            user_id: Optional user identifier; a new one is generated when omitted

        Returns:
            JSON with status (served | no_applicable_creative | placement_not_found |
            no_creatives), user_id and, when served, creative_id, content and price
        """
        t0 = time.monotonic()
        payload = serve_ad_payload(service, placement_id, user_id, stats)
        return _respond(stats, "ads_serve", t0, payload, extra={"status": payload["status"]})

    @mcp.tool()
    def catalog_refresh() -> str:
        """Reload the catalog from the store now. Returns JSON {ok, placements, creatives} or {ok, error}."""
        t0 = time.monotonic()
        return _respond(stats, "catalog_refresh", t0, refresh_payload(service))

    @mcp.tool()
    def catalog_health() -> str:
        """Readiness and catalog sizes."""
        t0 = time.monotonic()
        return _respond(stats, "catalog_health", t0, health_payload(service, stats))


# ---------------------------------------------------------------------------
# Admin surface
# ---------------------------------------------------------------------------


def register_admin_tools(mcp, service: AdService, stats: ServingStats) -> None:
    """Register catalog management tools."""

    @mcp.tool()
    def placements_create(placement_id: str, format: str, width: int, height: int) -> str:
        """Create an ad placement.

        Args:
            placement_id: Unique placement identifier
            format: banner, interstitial or video
            width: Slot width in pixels
            height: Slot height in pixels
        """
        t0 = time.monotonic()
        payload = create_placement_payload(service, placement_id, format, width, height)
        return _respond(stats, "placements_create", t0, payload)

    @mcp.tool()
    def creatives_create(
        creative_id: str,
        format: str,
        width: int,
        height: int,
        content: str,
        price: float,
    ) -> str:
        """Create a creative.

        Args:
            creative_id: Unique creative identifier
            format: banner, interstitial or video
            width: Asset width in pixels
            height: Asset height in pixels
            content: Creative payload
            price: Non-negative price
        """
        t0 = time.monotonic()
        payload = create_creative_payload(service, creative_id, format, width, height, content, price)
        return _respond(stats, "creatives_create", t0, payload)

    @mcp.tool()
    def catalog_list() -> str:
        """List every placement and creative currently cached."""
        t0 = time.monotonic()
        return _respond(stats, "catalog_list", t0, catalog_list_payload(service))

    @mcp.tool()
    def catalog_refresh() -> str:
        """Reload the catalog from the store now."""
        t0 = time.monotonic()
        return _respond(stats, "catalog_refresh", t0, refresh_payload(service))
