"""The refresh machinery shared by every in-memory cache."""

from __future__ import annotations

import logging
import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, Self

from memsto.stats import SyncStats

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 9.0


class SyncError(Exception):
    """Raised when a cache cannot be refreshed from its source."""


@dataclass(frozen=True)
class Statistics:
    """Row count and latest update time of a table a cache mirrors."""

    total: int
    last_updated: int


StatisticsSource = Callable[[], Statistics]


class SyncedCache(ABC):
    """A cache that reloads its contents whenever the source statistics change."""

    metric_name: ClassVar[str] = "sync"
    label: ClassVar[str] = "items"

    def __init__(self, statistics: StatisticsSource, stats: SyncStats | None = None) -> None:
        self._statistics = statistics
        self._stats = stats if stats is not None else SyncStats()
        self._lock = threading.RLock()
        self._data: dict[Any, Any] = {}
        self._stat_total = -1
        self._stat_last_updated = -1
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def stat_changed(self, total: int, last_updated: int) -> bool:
        """Tell whether the given statistics differ from those last loaded."""
        with self._lock:
            return (self._stat_total, self._stat_last_updated) != (total, last_updated)

    def reset(self) -> None:
        """Drop the contents so the next refresh reloads everything."""
        with self._lock:
            self._stat_total = -1
            self._stat_last_updated = -1
            self._data = {}

    def _store(self, data: dict[Any, Any], total: int, last_updated: int) -> None:
        with self._lock:
            self._data = data
            self._stat_total = total
            self._stat_last_updated = last_updated

    @abstractmethod
    def _load(self) -> tuple[dict[Any, Any], int]:
        """Fetch fresh contents; return them with the number to report."""

    def sync(self) -> bool:
        """Refresh from the source; return whether the contents were reloaded."""
        started = time.monotonic()
        try:
            stat = self._statistics()
        except Exception as exc:
            raise SyncError(f"failed to load {self.label} statistics: {exc}") from exc

        if not self.stat_changed(stat.total, stat.last_updated):
            self._stats.record(self.metric_name, 0, 0)
            logger.debug("%s not changed", self.label)
            return False

        try:
            data, number = self._load()
        except Exception as exc:
            raise SyncError(f"failed to load {self.label}: {exc}") from exc

        self._store(data, stat.total, stat.last_updated)
        elapsed_ms = int((time.monotonic() - started) * 1000)
        self._stats.record(self.metric_name, elapsed_ms, number)
        logger.info(
            "timer: sync %s done, cost: %dms, number: %d", self.label, elapsed_ms, number
        )
        return True

    def start(self, interval: float = DEFAULT_INTERVAL) -> Self:
        """Load once, raising SyncError on failure, then refresh every ``interval`` seconds."""
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError(f"{self.label} cache is already running")
        self.sync()
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._loop,
            args=(interval,),
            name=f"memsto-{self.metric_name}",
            daemon=True,
        )
        self._thread.start()
        return self

    def _loop(self, interval: float) -> None:
        while not self._stop_event.wait(interval):
            try:
                self.sync()
            except SyncError as exc:
                logger.warning("failed to sync %s: %s", self.label, exc)

    def stop(self) -> None:
        """Stop the background refresh and wait for it to finish."""
        self._stop_event.set()
        thread, self._thread = self._thread, None
        if thread is not None:
            thread.join()

    def __enter__(self) -> Self:
        return self.start()

    def __exit__(self, *args: object) -> None:
        self.stop()