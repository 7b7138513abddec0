"""Analytics domain reducers.

The usage log is a bounded FIFO: after every append only the newest
:data:`~pytrashcan._constants.USAGE_HISTORY_LIMIT` entries survive.
Every append also bumps ``weekly_stats.total_opens`` by exactly one; the
counter only diverges from the log when a caller overwrites it through
``update_weekly_stats``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from pytrashcan._constants import USAGE_HISTORY_LIMIT
from pytrashcan.models.analytics import AnalyticsState, UsageEntry
from pytrashcan.state.events import Transition
from pytrashcan.state.merge import merge_model, normalize_patch

AnalyticsReducer = Callable[[AnalyticsState, Transition], AnalyticsState]


def initial_state() -> AnalyticsState:
    return AnalyticsState()


def retain_newest(entries: Sequence[UsageEntry], limit: int = USAGE_HISTORY_LIMIT) -> tuple[UsageEntry, ...]:
    """Keep the last *limit* entries in insertion order."""
    if len(entries) <= limit:
        return tuple(entries)
    return tuple(entries[-limit:])


def _entry_fields(payload: Any) -> dict[str, Any]:
    # A bare tag is shorthand for {"action": tag}.
    if isinstance(payload, str):
        payload = {"action": payload}
    fields = normalize_patch(UsageEntry, payload)
    # Timestamps come from the store clock only.
    fields.pop("timestamp", None)
    # Missing and null values fall back to the field defaults.
    return {key: value for key, value in fields.items() if value is not None}


def build_usage_entry(payload: Mapping[str, Any] | str, transition: Transition) -> UsageEntry:
    fields = _entry_fields(payload)
    if "action" not in fields:
        raise ValueError("usage entry requires an action")
    return UsageEntry.model_validate({**fields, "timestamp": transition.observed_at})


def add_usage_entry(state: AnalyticsState, transition: Transition) -> AnalyticsState:
    entry = build_usage_entry(transition.payload, transition)
    history = retain_newest((*state.daily_usage, entry))
    weekly = state.weekly_stats.model_copy(update={"total_opens": state.weekly_stats.total_opens + 1})
    return state.model_copy(update={"daily_usage": history, "weekly_stats": weekly})


def update_weekly_stats(state: AnalyticsState, transition: Transition) -> AnalyticsState:
    weekly = merge_model(state.weekly_stats, transition.payload)
    return state.model_copy(update={"weekly_stats": weekly})


def update_monthly_report(state: AnalyticsState, transition: Transition) -> AnalyticsState:
    report = merge_model(state.monthly_report, transition.payload)
    return state.model_copy(update={"monthly_report": report})


def set_loading(state: AnalyticsState, transition: Transition) -> AnalyticsState:
    return merge_model(state, {"is_loading": transition.payload})


def set_error(state: AnalyticsState, transition: Transition) -> AnalyticsState:
    return merge_model(state, {"error": transition.payload})


def reset(state: AnalyticsState, transition: Transition) -> AnalyticsState:
    return initial_state()


REDUCERS: dict[str, AnalyticsReducer] = {
    "add_usage_entry": add_usage_entry,
    "update_weekly_stats": update_weekly_stats,
    "update_monthly_report": update_monthly_report,
    "set_loading": set_loading,
    "set_error": set_error,
    "reset": reset,
}
