"""Cache of datasources keyed by id."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from memsto.alert_rule import _KeyedCache


class DatasourceCache(_KeyedCache):
    """Datasources keyed by id, loaded from a mapping."""

    metric_name = "sync_datasources"
    label = "datasources"

    def set(self, datasources: Mapping[int, Any], total: int, last_updated: int) -> None:
        """Replace the contents and remember the statistics they match."""
        self._store(dict(datasources), total, last_updated)

    def get(self, datasource_id: int) -> Any | None:
        """Return the datasource with this id, or None."""
        return self._lookup(datasource_id)