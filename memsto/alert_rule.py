"""Cache of alert rules keyed by rule id, and the id-keyed cache it builds on."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from memsto.base import StatisticsSource, SyncedCache
from memsto.stats import SyncStats


class _KeyedCache(SyncedCache):
    """A synced cache of records keyed by id.

    ``fetch_all`` returns either the records themselves, which are keyed by
    their ``id`` attribute (the last one wins on duplicates), or a mapping
    that is taken as it is.
    """

    def __init__(
        self,
        statistics: StatisticsSource,
        fetch_all: Callable[[], Iterable[Any] | Mapping[Any, Any]],
        stats: SyncStats | None = None,
    ) -> None:
        super().__init__(statistics, stats)
        self._fetch_all = fetch_all

    def _lookup(self, key: Any) -> Any | None:
        with self._lock:
            return self._data.get(key)

    def _keys(self) -> list[Any]:
        with self._lock:
            return list(self._data)

    def _pick(self, ids: Iterable[Any]) -> list[Any]:
        """Return the known records among ``ids``, in order, each once."""
        seen: set[Any] = set()
        found = []
        with self._lock:
            for key in ids:
                record = self._data.get(key)
                if record is None or key in seen:
                    continue
                seen.add(key)
                found.append(record)
        return found

    def _load(self) -> tuple[dict[Any, Any], int]:
        fetched = self._fetch_all()
        if isinstance(fetched, Mapping):
            items = dict(fetched)
        else:
            items = {item.id: item for item in fetched}
        return items, len(items)


class AlertRuleCache(_KeyedCache):
    """Alert rules keyed by rule id."""

    metric_name = "sync_alert_rules"
    label = "alert rules"

    def set(self, rules: Mapping[int, Any], total: int, last_updated: int) -> None:
        """Replace the contents and remember the statistics they match."""
        self._store(dict(rules), total, last_updated)

    def get(self, rule_id: int) -> Any | None:
        """Return the rule with this id, or None."""
        return self._lookup(rule_id)

    def rule_ids(self) -> list[int]:
        """Return the ids of all cached rules."""
        return self._keys()