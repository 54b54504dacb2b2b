# memsto

In-memory caches for the configuration an alerting service reads on every
evaluation: alert rules, alert subscriptions, recording rules, business
groups, datasources, users and user groups.

Each cache calls a statistics function that returns a cheap `Statistics`
summary (row count and last update time) and reloads the full data set only
when that summary differs from the one it last loaded. A background thread
repeats the sync on a fixed interval, and every sync records its duration and
item count in a `SyncStats` object.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Building blocks

`memsto.base`

- `Statistics(total, last_updated)` — frozen dataclass returned by a cache's
  statistics function.
- `SyncError` — raised by `sync()` (and by `start()`, which syncs once first)
  when the statistics function or the loading function raises.
- `SyncedCache` — base class of every cache:
  - `stat_changed(total, last_updated)` — whether those statistics differ
    from the ones last loaded.
  - `sync()` — refresh; returns `True` if the contents were reloaded and
    `False` if the statistics were unchanged.
  - `reset()` — drop the contents so the next `sync()` reloads.
  - `start(interval=9.0)` — sync once, then sync again every `interval`
    seconds on a daemon thread, logging failures as warnings. Raises
    `RuntimeError` if already running. Returns the cache.
  - `stop()` — stop the background thread and wait for it.
  - Used as a context manager, it calls `start()` on entry and `stop()` on
    exit.

`memsto.stats`

- `GaugeVec(name, help_text, label_name="name")` — float gauges keyed by one
  label: `set(label, value)`, `get(label)` (an unset gauge reads `0.0`) and
  `label in gauge`.
- `SyncStats(namespace="n9e", subsystem="cron")` — holds `cron_duration`
  (`n9e_cron_duration`, milliseconds) and `sync_number`
  (`n9e_cron_sync_number`). `record(name, duration_ms, number)` sets both.
  A sync whose statistics were unchanged records `0` for both.

## Caches

Every cache takes a statistics function (no arguments, returns
`Statistics`), a loading function, and optionally a `SyncStats`; without one
it makes its own. Every cache also accepts a whole snapshot through
`set(items, total, last_updated)`.

| Class                                      | Gauge label             | Lookups                                          |
|--------------------------------------------|-------------------------|--------------------------------------------------|
| `alert_rule.AlertRuleCache`                | `sync_alert_rules`      | `get(rule_id)`, `rule_ids()`                     |
| `alert_subscribe.AlertSubscribeCache`      | `sync_alert_subscribes` | `get(rule_id)`, `copies(rule_id)`                |
| `recording_rule.RecordingRuleCache`        | `sync_recording_rules`  | `get(rule_id)`, `rule_ids()`                     |
| `busi_group.BusiGroupCache`                | `sync_busi_groups`      | `get(group_id)`                                  |
| `datasource.DatasourceCache`               | `sync_datasources`      | `get(datasource_id)`                             |
| `user.UserCache`                           | `sync_users`            | `get(user_id)`, `get_many(ids)`, `maintainers()` |
| `user_group.UserGroupCache`                | `sync_user_groups`      | `get(group_id)`, `get_many(ids)`                 |

Details:

- For the id-keyed caches the loading function returns either a mapping,
  taken as it is, or an iterable of records keyed by their `id` attribute
  (the last one wins on duplicates). `get` returns `None` for an unknown id.
- `get_many(ids)` returns the known records among `ids`, in the order given,
  each at most once.
- `UserCache.maintainers()` returns users whose `maintainer` attribute is `1`.
- `UserGroupCache(statistics, fetch_all, fetch_members, stats=None)` also
  calls `fetch_members()`; each member's `user_id` is appended to the
  `user_ids` list of the group named by its `group_id`. Members of unknown
  groups are ignored.
- `AlertSubscribeCache` groups subscriptions by their `rule_id`. On load it
  calls each subscription's `parse()`, `db2fe()` and `fill_datasource_ids()`
  in turn; one that raises is left out and logged as a warning. The number it
  reports is the count fetched. `get(rule_id)` returns a list or `None`;
  `copies(rule_id)` returns shallow copies, or an empty list.

## Typical use

```python
from memsto.alert_rule import AlertRuleCache
from memsto.base import Statistics
from memsto.stats import SyncStats

stats = SyncStats()
cache = AlertRuleCache(
    statistics=lambda: Statistics(total=store.count(), last_updated=store.last_updated()),
    fetch_all=store.all_rules,
    stats=stats,
)
with cache as rules:   # initial sync, then every 9 seconds
    rule = rules.get(42)
    for rule_id in rules.rule_ids():
        ...
print(stats.sync_number.get("sync_alert_rules"))
```

Here `store` stands for whatever holds the data; the caches only see the
functions they are given.

## What this package does not do

- It has no storage or database access of its own: reading the backing store
  is left to the functions passed to each cache.
- The gauges live only in memory; nothing exports them to a metrics server.
- There is no command-line program or server; the caches are meant to be
  used from inside an application.