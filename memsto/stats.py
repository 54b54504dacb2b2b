"""Gauges that report how long each cache refresh took and how much it loaded."""

from __future__ import annotations

import threading


class GaugeVec:
    """A set of float gauges sharing one metric name, keyed by a single label."""

    def __init__(self, name: str, help_text: str, label_name: str = "name") -> None:
        self.name = name
        self.help_text = help_text
        self.label_name = label_name
        self._values: dict[str, float] = {}
        self._lock = threading.Lock()

    def set(self, label: str, value: float) -> None:
        """Set the gauge for ``label`` to ``value``."""
        with self._lock:
            self._values[label] = float(value)

    def get(self, label: str) -> float:
        """Return the gauge for ``label``; a gauge never set reads as zero."""
        with self._lock:
            return self._values.get(label, 0.0)

    def __contains__(self, label: object) -> bool:
        with self._lock:
            return label in self._values


class SyncStats:
    """The duration and size gauges every cache refresh reports to."""

    def __init__(self, namespace: str = "n9e", subsystem: str = "cron") -> None:
        prefix = f"{namespace}_{subsystem}"
        self.cron_duration = GaugeVec(
            f"{prefix}_duration", "Cron method use duration, unit: ms."
        )
        self.sync_number = GaugeVec(f"{prefix}_sync_number", "Cron sync number.")

    def record(self, name: str, duration_ms: float, number: int) -> None:
        """Report one refresh named ``name``."""
        self.cron_duration.set(name, duration_ms)
        self.sync_number.set(name, number)