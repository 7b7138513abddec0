"""Weekly/monthly rollups derived from the usage log.

These are pure functions.  The store never calls them itself: a
recompute collaborator feeds their output back through the
``update_weekly_stats`` / ``update_monthly_report`` transitions, so the
overwrite contract of the analytics domain stays the only write path.

The weekly patch omits ``total_opens``; that counter is
owned by ``add_usage_entry``.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime, timedelta, tzinfo
from typing import Any

from pytrashcan._constants import MAX_PEAK_HOURS, MONTHLY_WINDOW_DAYS, WEEKDAY_NAMES, WEEKLY_WINDOW_DAYS
from pytrashcan.models.analytics import UsageEntry
from pytrashcan.models.settings import AnalyticsSettings


def effective_window_days(window_days: int, settings: AnalyticsSettings) -> int:
    """The rollup window, capped by the retention policy."""
    return max(0, min(window_days, settings.data_retention_days))


def entries_in_window(
    history: Iterable[UsageEntry],
    *,
    now: datetime,
    days: int,
) -> list[UsageEntry]:
    """Entries stamped within the last *days* days (inclusive of *now*)."""
    if days <= 0:
        return []
    start = now - timedelta(days=days)
    return [entry for entry in history if start <= entry.timestamp <= now]


def _mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return round(sum(values) / len(values), 1)


def peak_hours(entries: Iterable[UsageEntry], *, tz: tzinfo = UTC, limit: int = MAX_PEAK_HOURS) -> list[int]:
    """Busiest hours of day, ties broken by the earlier hour. Sorted ascending."""
    counts = Counter(entry.timestamp.astimezone(tz).hour for entry in entries)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return sorted(hour for hour, _count in ranked[:limit])


def most_active_day(entries: Iterable[UsageEntry], *, tz: tzinfo = UTC) -> str:
    """English weekday name with the most entries; ties go to the earlier weekday."""
    counts = Counter(entry.timestamp.astimezone(tz).weekday() for entry in entries)
    if not counts:
        return ""
    weekday = min(counts, key=lambda day: (-counts[day], day))
    return WEEKDAY_NAMES[weekday]


def compute_weekly_stats(
    history: Sequence[UsageEntry],
    settings: AnalyticsSettings,
    now: datetime,
    *,
    tz: tzinfo = UTC,
) -> dict[str, Any]:
    """Patch for ``update_weekly_stats``: ``average_level`` and ``peak_hours``."""
    days = effective_window_days(WEEKLY_WINDOW_DAYS, settings)
    window = entries_in_window(history, now=now, days=days)
    return {
        "average_level": _mean([float(entry.trash_level_at_event) for entry in window]),
        "peak_hours": peak_hours(window, tz=tz),
    }


def compute_monthly_report(
    history: Sequence[UsageEntry],
    settings: AnalyticsSettings,
    now: datetime,
    *,
    tz: tzinfo = UTC,
) -> dict[str, Any]:
    """Patch for ``update_monthly_report``."""
    days = effective_window_days(MONTHLY_WINDOW_DAYS, settings)
    window = entries_in_window(history, now=now, days=days)
    return {
        "total_opens": len(window),
        "average_fill_time": _mean([entry.duration for entry in window]),
        "most_active_day": most_active_day(window, tz=tz),
    }
