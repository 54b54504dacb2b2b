"""In-memory caches of monitoring configuration kept in sync with a backing store."""

__version__ = "0.1.0"

__all__ = [
    "alert_rule",
    "alert_subscribe",
    "base",
    "busi_group",
    "datasource",
    "recording_rule",
    "stats",
    "user",
    "user_group",
]