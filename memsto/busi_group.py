"""Cache of business groups keyed by id."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from memsto.alert_rule import _KeyedCache


class BusiGroupCache(_KeyedCache):
    """Business groups keyed by id, loaded from a mapping."""

    metric_name = "sync_busi_groups"
    label = "busi groups"

    def set(self, groups: Mapping[int, Any], total: int, last_updated: int) -> None:
        """Replace the contents and remember the statistics they match."""
        self._store(dict(groups), total, last_updated)

    def get(self, group_id: int) -> Any | None:
        """Return the business group with this id, or None."""
        return self._lookup(group_id)