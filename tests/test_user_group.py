from dataclasses import dataclass, field

import pytest

from memsto.base import Statistics, SyncError
from memsto.stats import SyncStats
from memsto.user_group import UserGroupCache


@dataclass
class Group:
    id: int
    name: str
    user_ids: list = field(default_factory=list)


@dataclass
class Member:
    group_id: int
    user_id: int


class Source:
    def __init__(self, names, members):
        self.names = names
        self.members = members
        self.stat = Statistics(len(names), 7)

    def statistics(self):
        return self.stat

    def fetch(self):
        return [Group(gid, name) for gid, name in self.names.items()]

    def fetch_members(self):
        return list(self.members)


def make(names, members):
    src = Source(names, members)
    stats = SyncStats()
    cache = UserGroupCache(src.statistics, src.fetch, src.fetch_members, stats)
    return src, stats, cache


def test_sync_fills_member_ids_in_order():
    members = [Member(1, 10), Member(2, 20), Member(1, 11), Member(9, 30)]
    _, stats, cache = make({1: "ops", 2: "dev"}, members)
    assert cache.sync() is True
    assert cache.get(1).user_ids == [10, 11]
    assert cache.get(2).user_ids == [20]
    assert cache.get(9) is None
    assert stats.sync_number.get("sync_user_groups") == 2


def test_reload_does_not_accumulate_members():
    src, _, cache = make({1: "ops"}, [Member(1, 10)])
    cache.sync()
    src.stat = Statistics(1, 8)
    cache.sync()
    assert cache.get(1).user_ids == [10]


def test_get_many_skips_missing_and_duplicates():
    _, _, cache = make({1: "ops", 2: "dev"}, [])
    cache.sync()
    result = cache.get_many([2, 5, 2, 1])
    assert [g.name for g in result] == ["dev", "ops"]
    assert cache.get_many([5]) == []


def test_set_and_stat_changed():
    _, _, cache = make({}, [])
    group = Group(3, "qa")
    cache.set({3: group}, 1, 2)
    assert cache.get(3) is group
    assert cache.stat_changed(1, 2) is False
    assert cache.stat_changed(2, 2) is True


def test_member_fetch_failure_raises():
    def broken():
        raise RuntimeError("members unavailable")

    cache = UserGroupCache(
        lambda: Statistics(1, 1), lambda: [Group(1, "ops")], broken
    )
    with pytest.raises(SyncError):
        cache.sync()
    assert cache.get(1) is None