"""Cache of users keyed by id."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from memsto.alert_rule import _KeyedCache


class UserCache(_KeyedCache):
    """Users keyed by id."""

    metric_name = "sync_users"
    label = "users"

    def set(self, users: Mapping[int, Any], total: int, last_updated: int) -> None:
        """Replace the contents and remember the statistics they match."""
        self._store(dict(users), total, last_updated)

    def get(self, user_id: int) -> Any | None:
        """Return the user with this id, or None."""
        return self._lookup(user_id)

    def get_many(self, ids: Iterable[int]) -> list[Any]:
        """Return the known users among ``ids``, in order, each once."""
        return self._pick(ids)

    def maintainers(self) -> list[Any]:
        """Return every cached user flagged as a maintainer."""
        with self._lock:
            return [user for user in self._data.values() if user.maintainer == 1]