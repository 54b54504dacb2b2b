"""Cache of recording rules keyed by rule id."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from memsto.alert_rule import _KeyedCache


class RecordingRuleCache(_KeyedCache):
    """Recording rules keyed by rule id."""

    metric_name = "sync_recording_rules"
    label = "recording rules"

    def set(self, rules: Mapping[int, Any], total: int, last_updated: int) -> None:
        """Replace the contents and remember the statistics they match."""
        self._store(dict(rules), total, last_updated)

    def get(self, rule_id: int) -> Any | None:
        """Return the rule with this id, or None."""
        return self._lookup(rule_id)

    def rule_ids(self) -> list[int]:
        """Return the ids of all cached rules."""
        return self._keys()