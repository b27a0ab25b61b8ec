"""MCP server factory.

Creates either the serve or the admin surface around an explicitly passed
``AdService``. Each surface registers only its own tool set.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from ..services.ad_service import AdService
from .observability import ServingStats
from .tools import register_admin_tools, register_serve_tools

_SERVER_NAMES = {
    "serve": "adserver",
    "admin": "adserver-admin",
}


def create_server(
    service: AdService,
    mode: str = "serve",
    stats: ServingStats | None = None,
) -> FastMCP:
    """Build and return a configured FastMCP server.

    Args:
        service: The AdService owned by the running process.
        mode: ``"serve"`` for ad requests or ``"admin"`` for catalog management.
        stats: Counters shared by the registered tools; a fresh set when omitted.

    Returns:
        A FastMCP instance with the appropriate tools registered.
    """
    if mode not in _SERVER_NAMES:
        raise ValueError(f"Unknown MCP mode {mode!r}; expected 'serve' or 'admin'")

    server = FastMCP(_SERVER_NAMES[mode])
    stats = stats if stats is not None else ServingStats()

    if mode == "serve":
        register_serve_tools(server, service, stats)
    else:
        register_admin_tools(server, service, stats)

    return server
