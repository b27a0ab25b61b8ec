"""Per-server serving statistics and ``tool_invocation`` logging.

Each MCP server owns one ``ServingStats``. Besides per-tool call/error counts
it tallies ad-serve outcomes by ``ServeStatus`` so ``catalog_health`` can
report fill rate and served spend.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from ..models import ServeOutcome, ServeStatus

logger = logging.getLogger("adserver.mcp")


class ServingStats:
    """Thread-safe counters for one MCP surface."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tool_calls: dict[str, int] = {}
        self._tool_errors: dict[str, int] = {}
        self._serve_status: dict[str, int] = {status.value: 0 for status in ServeStatus}
        self._served_spend = 0.0

    def record_tool(
        self,
        tool: str,
        trace_id: str | None,
        latency_ms: float,
        error: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Log one tool call and count it (and its error, if any)."""
        payload: dict[str, Any] = {
            "tool": tool,
            "trace_id": trace_id,
            "latency_ms": round(latency_ms, 2),
        }
        if extra:
            payload.update(extra)
        if error:
            payload["error"] = error
            logger.warning("tool_invocation %s failed: %s", tool, error, extra=payload)
        else:
            logger.info("tool_invocation %s", tool, extra=payload)
        with self._lock:
            self._tool_calls[tool] = self._tool_calls.get(tool, 0) + 1
            if error:
                self._tool_errors[tool] = self._tool_errors.get(tool, 0) + 1

    def record_serve(self, outcome: ServeOutcome) -> None:
        with self._lock:
            self._serve_status[outcome.status.value] += 1
            if outcome.response is not None:
                self._served_spend += outcome.response.price

    def snapshot(self) -> dict[str, Any]:
        """Counters as plain JSON-ready data."""
        with self._lock:
            requests = sum(self._serve_status.values())
            served = self._serve_status[ServeStatus.served.value]
            return {
                "tool_calls": dict(self._tool_calls),
                "tool_errors": dict(self._tool_errors),
                "serve_status": dict(self._serve_status),
                "ad_requests": requests,
                "fill_rate": round(served / requests, 4) if requests else 0.0,
                "served_spend": round(self._served_spend, 4),
            }
