import pytest

from memsto.stats import GaugeVec, SyncStats


def test_unset_gauge_reads_zero():
    gauge = GaugeVec("things", "Things.")
    assert gauge.get("missing") == 0.0
    assert "missing" not in gauge


def test_set_then_get_round_trip():
    gauge = GaugeVec("things", "Things.")
    gauge.set("a", 12)
    assert gauge.get("a") == 12.0
    assert "a" in gauge


def test_set_overwrites_previous_value():
    gauge = GaugeVec("things", "Things.")
    gauge.set("a", 5)
    gauge.set("a", 7.5)
    assert gauge.get("a") == 7.5


def test_labels_are_independent():
    gauge = GaugeVec("things", "Things.")
    gauge.set("a", 1)
    gauge.set("b", 2)
    assert (gauge.get("a"), gauge.get("b")) == (1.0, 2.0)


def test_default_metric_names_and_help():
    stats = SyncStats()
    assert stats.cron_duration.name == "n9e_cron_duration"
    assert stats.sync_number.name == "n9e_cron_sync_number"
    assert stats.cron_duration.help_text == "Cron method use duration, unit: ms."
    assert stats.sync_number.help_text == "Cron sync number."
    assert stats.cron_duration.label_name == "name"


@pytest.mark.parametrize("duration, number", [(0, 0), (15, 3), (250, 1000)])
def test_record_sets_both_gauges(duration, number):
    stats = SyncStats()
    stats.record("sync_users", duration, number)
    assert stats.cron_duration.get("sync_users") == float(duration)
    assert stats.sync_number.get("sync_users") == float(number)


def test_record_leaves_other_names_alone():
    stats = SyncStats()
    stats.record("sync_users", 10, 4)
    assert stats.sync_number.get("sync_targets") == 0.0