"""Cache of alert subscriptions keyed by the rule they subscribe to."""

from __future__ import annotations

import copy
import logging
from collections import defaultdict
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, Protocol

from memsto.base import SyncedCache, StatisticsSource
from memsto.stats import SyncStats

logger = logging.getLogger(__name__)


class AlertSubscribe(Protocol):
    id: int
    rule_id: int

    def parse(self) -> None: ...

    def db2fe(self) -> None: ...

    def fill_datasource_ids(self) -> None: ...


def _prepare(sub: AlertSubscribe) -> bool:
    steps = (
        (sub.parse, "failed to parse alert subscribe, id: %s"),
        (sub.db2fe, "failed to db2fe alert subscribe, id: %s"),
        (sub.fill_datasource_ids, "failed to fill datasource ids, id: %s"),
    )
    for step, message in steps:
        try:
            step()
        except Exception:
            logger.warning(message, sub.id)
            return False
    return True


class AlertSubscribeCache(SyncedCache):
    """Alert subscriptions keyed by rule id."""

    metric_name = "sync_alert_subscribes"
    label = "alert subscribes"

    def __init__(
        self,
        statistics: StatisticsSource,
        fetch_all: Callable[[], Iterable[AlertSubscribe]],
        stats: SyncStats | None = None,
    ) -> None:
        super().__init__(statistics, stats)
        self._fetch_all = fetch_all

    def set(self, subs: Mapping[int, Sequence[Any]], total: int, last_updated: int) -> None:
        """Replace the contents and remember the statistics they match."""
        self._store({rid: list(lst) for rid, lst in subs.items()}, total, last_updated)

    def get(self, rule_id: int) -> list[Any] | None:
        """Return the subscriptions of a rule, or None if it has none cached."""
        with self._lock:
            subs = self._data.get(rule_id)
            return None if subs is None else list(subs)

    def copies(self, rule_id: int) -> list[Any]:
        """Return independent copies of a rule's subscriptions; empty if none."""
        with self._lock:
            return [copy.copy(sub) for sub in self._data.get(rule_id, ())]

    def _load(self) -> tuple[dict[int, list[Any]], int]:
        subs = list(self._fetch_all())
        by_rule: defaultdict[int, list[Any]] = defaultdict(list)
        for sub in subs:
            if _prepare(sub):
                by_rule[sub.rule_id].append(sub)
        return dict(by_rule), len(subs)