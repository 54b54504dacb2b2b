from collections import namedtuple

import pytest

from memsto.base import Statistics, SyncError
from memsto.recording_rule import RecordingRuleCache
from memsto.stats import SyncStats

Rule = namedtuple("Rule", "id name")


@pytest.mark.parametrize(
    "rules, expected_ids, expected_names",
    [
        ([Rule(3, "a"), Rule(8, "b")], [3, 8], {3: "a", 8: "b"}),
        ([Rule(1, "first"), Rule(1, "second")], [1], {1: "second"}),
    ],
)
def test_sync_keys_rules_by_id(rules, expected_ids, expected_names):
    stats = SyncStats()
    cache = RecordingRuleCache(lambda: Statistics(len(rules), 1), lambda: rules, stats)
    assert cache.sync() is True
    assert sorted(cache.rule_ids()) == expected_ids
    assert {i: cache.get(i).name for i in expected_ids} == expected_names
    assert stats.sync_number.get("sync_recording_rules") == len(expected_ids)


def test_unchanged_then_reset():
    fetched = []
    cache = RecordingRuleCache(
        lambda: Statistics(1, 1), lambda: fetched.append(1) or [Rule(1, "a")]
    )
    cache.sync()
    assert cache.sync() is False
    assert len(fetched) == 1
    cache.reset()
    assert cache.rule_ids() == []
    assert cache.stat_changed(1, 1) is True


def test_fetch_failure_raises():
    def boom():
        raise RuntimeError("boom")

    cache = RecordingRuleCache(lambda: Statistics(1, 1), boom)
    with pytest.raises(SyncError):
        cache.sync()
    assert cache.rule_ids() == []