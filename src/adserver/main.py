"""Server entrypoint.

Builds the runtime once, starts the background refresher and runs the MCP
surface selected by ``ADSERVER_MCP_MODE`` over stdio.

Usage:
    python -m adserver.main
    # or via the script entrypoint:
    adserver-mcp
"""

from __future__ import annotations

import logging

from .config.runtime import RuntimeSettings, get_settings
from .mcp.server import create_server
from .wiring import build_runtime

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(settings: RuntimeSettings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)


def run_server(settings: RuntimeSettings | None = None) -> None:
    settings = settings or get_settings()
    configure_logging(settings)
    runtime = build_runtime(settings)
    try:
        server = create_server(runtime.service, mode=settings.mcp_mode.value)
        server.run(transport="stdio")
    finally:
        runtime.close()


def main() -> None:
    run_server()


if __name__ == "__main__":
    main()
