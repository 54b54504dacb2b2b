"""Cache of user groups keyed by id, with their member ids filled in."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from memsto.alert_rule import _KeyedCache
from memsto.base import StatisticsSource
from memsto.stats import SyncStats


class UserGroupCache(_KeyedCache):
    """User groups keyed by id."""

    metric_name = "sync_user_groups"
    label = "user groups"

    def __init__(
        self,
        statistics: StatisticsSource,
        fetch_all: Callable[[], Iterable[Any]],
        fetch_members: Callable[[], Iterable[Any]],
        stats: SyncStats | None = None,
    ) -> None:
        super().__init__(statistics, fetch_all, stats)
        self._fetch_members = fetch_members

    def set(self, groups: Mapping[int, Any], total: int, last_updated: int) -> None:
        """Replace the contents and remember the statistics they match."""
        self._store(dict(groups), total, last_updated)

    def get(self, group_id: int) -> Any | None:
        """Return the user group with this id, or None."""
        return self._lookup(group_id)

    def get_many(self, ids: Iterable[int]) -> list[Any]:
        """Return the known groups among ``ids``, in order, each once."""
        return self._pick(ids)

    def _load(self) -> tuple[dict[int, Any], int]:
        groups, number = super()._load()
        for member in self._fetch_members():
            group = groups.get(member.group_id)
            if group is not None:
                group.user_ids.append(member.user_id)
        return groups, number