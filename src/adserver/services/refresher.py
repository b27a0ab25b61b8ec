"""Background task that periodically reloads the catalog cache."""

from __future__ import annotations

import logging
import threading
from typing import Callable

from ..errors import CatalogError
from .catalog_cache import CatalogCache

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_INTERVAL_SECONDS = 300.0

# wait(seconds) blocks for one interval and returns True when the loop should stop.
WaitFn = Callable[[float], bool]


class CatalogRefresher:
    """Runs ``CatalogCache.refresh`` every ``interval_seconds`` on a daemon thread.

    A failed refresh is logged and the previous snapshot stays in place; the
    loop keeps going for the lifetime of the process unless ``stop`` is
    called. ``wait`` can be injected to drive ticks deterministically.
    """

    def __init__(
        self,
        cache: CatalogCache,
        interval_seconds: float = DEFAULT_REFRESH_INTERVAL_SECONDS,
        wait: WaitFn | None = None,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be > 0, got {interval_seconds}")
        self._cache = cache
        self._interval = interval_seconds
        self._stop = threading.Event()
        self._wait = wait or self._stop.wait
        self._thread: threading.Thread | None = None
        self.consecutive_failures = 0
        self.successes = 0

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self.run_forever,
            daemon=True,
            name="catalog-refresher",
        )
        self._thread.start()
        logger.info("catalog_refresher_started", extra={"interval_seconds": self._interval})

    def stop(self, timeout: float | None = 5.0) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            self._thread = None

    def run_forever(self) -> None:
        """Wait one interval, refresh, repeat. The initial load is done by ``initialize``."""
        while not self._wait(self._interval):
            if self._stop.is_set():
                break
            self.run_once()

    def run_once(self) -> bool:
        """Run one refresh tick, absorbing store errors. Returns True on success."""
        try:
            self._cache.refresh()
        except CatalogError as exc:
            self.consecutive_failures += 1
            logger.error(
                "catalog_refresh_failed: %s",
                exc,
                extra={"error": str(exc), "consecutive_failures": self.consecutive_failures},
            )
            return False
        except Exception:
            self.consecutive_failures += 1
            logger.exception("catalog_refresh_crashed")
            return False
        self.consecutive_failures = 0
        self.successes += 1
        return True
