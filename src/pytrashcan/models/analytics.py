"""Analytics domain entities."""

from __future__ import annotations

import enum
from typing import Annotated, Any, ClassVar

from pydantic import AfterValidator, Field

from pytrashcan.models._base import NonNegativeFloat, NonNegativeInt, Percentage, TrashcanBaseModel, UtcDatetime


class UsageAction(enum.StrEnum):
    """Known usage entry tags. Callers may also record free-form tags."""

    LID_OPENED = "lid_opened"
    LID_CLOSED = "lid_closed"
    REFRESH = "refresh"
    OTHER = "other"


def coerce_usage_action(value: Any) -> UsageAction | str:
    """Map known tags (``lid-opened``, ``lid_opened``, ``LID_OPENED``) to :class:`UsageAction`.

    Unknown tags are kept verbatim.
    """
    if isinstance(value, UsageAction):
        return value
    text = str(value)
    try:
        return UsageAction(text.strip().lower().replace("-", "_"))
    except ValueError:
        return text


UsageActionTag = Annotated[str, AfterValidator(coerce_usage_action)]

HourOfDay = Annotated[int, Field(ge=0, le=23)]


def _sorted_unique_hours(value: list[int]) -> list[int]:
    return sorted(set(value))


class UsageEntry(TrashcanBaseModel):
    """One immutable record in the usage log."""

    _KEY_ALIASES: ClassVar[dict[str, str]] = {
        "trashLevel": "trash_level_at_event",
        "trash_level": "trash_level_at_event",
    }

    timestamp: UtcDatetime
    action: UsageActionTag
    duration: NonNegativeFloat = 0.0
    trash_level_at_event: Percentage = 0


class WeeklyStats(TrashcanBaseModel):
    """Rolling weekly aggregate.

    ``total_opens`` is a counter bumped by every recorded usage entry; it is
    not recomputed from the history.
    """

    total_opens: NonNegativeInt = 0
    average_level: NonNegativeFloat = 0.0
    peak_hours: Annotated[list[HourOfDay], AfterValidator(_sorted_unique_hours)] = Field(default_factory=list)


class MonthlyReport(TrashcanBaseModel):
    """Monthly aggregate, only ever written by explicit overwrite."""

    total_opens: NonNegativeInt = 0
    average_fill_time: NonNegativeFloat = 0.0
    most_active_day: str = ""


class AnalyticsState(TrashcanBaseModel):
    """Analytics slice of the store."""

    daily_usage: tuple[UsageEntry, ...] = ()
    """Bounded usage log, oldest first."""
    weekly_stats: WeeklyStats = Field(default_factory=WeeklyStats)
    monthly_report: MonthlyReport = Field(default_factory=MonthlyReport)
    is_loading: bool = False
    error: str | None = None
