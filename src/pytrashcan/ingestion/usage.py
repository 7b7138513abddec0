"""Usage recording and analytics recompute.

:class:`UsageRecorder` watches device status transitions and appends a
usage entry whenever the lid changes state.  :func:`recompute_analytics`
feeds the rollups derived from the usage log back into the store.  Both
read ``settings.analytics.enabled`` at the time they run.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime, tzinfo

from pytrashcan.models._base import ensure_utc
from pytrashcan.models.analytics import UsageAction
from pytrashcan.models.state import AppState
from pytrashcan.state.actions import analytics_actions
from pytrashcan.state.events import StateDomain, Transition
from pytrashcan.state.rollups import compute_monthly_report, compute_weekly_stats
from pytrashcan.state.store import StateStore

_logger = logging.getLogger(__name__)


class UsageRecorder:
    """Store listener that logs lid open/close events to the analytics domain.

    A ``lid_closed`` entry carries the number of seconds the lid was open,
    when the matching open was observed.
    """

    def __init__(self, store: StateStore) -> None:
        self._store = store
        self._unsubscribe: Callable[[], None] | None = None
        self._opened_at: datetime | None = None

    @property
    def attached(self) -> bool:
        return self._unsubscribe is not None

    def attach(self) -> UsageRecorder:
        if self._unsubscribe is None:
            self._unsubscribe = self._store.subscribe(self._on_transition)
        return self

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_transition(self, previous: AppState, current: AppState, transition: Transition) -> None:
        if transition.domain != StateDomain.DEVICE or transition.action != "update_status":
            return

        before = previous.device.status
        after = current.device.status
        if before.lid_open == after.lid_open:
            return

        if after.lid_open:
            self._opened_at = after.last_update
            action = UsageAction.LID_OPENED
            duration = 0.0
        else:
            action = UsageAction.LID_CLOSED
            duration = 0.0
            if self._opened_at is not None and after.last_update is not None:
                duration = max(0.0, (after.last_update - self._opened_at).total_seconds())
            self._opened_at = None

        if not current.settings.analytics.enabled:
            _logger.debug("Analytics disabled; not recording %s", action)
            return

        self._store.dispatch(
            analytics_actions.add_usage_entry(
                action,
                duration=duration,
                trash_level_at_event=after.trash_level,
            )
        )


def recompute_analytics(
    store: StateStore,
    *,
    now: datetime | None = None,
    tz: tzinfo = UTC,
) -> bool:
    """Recompute weekly/monthly rollups from the usage log and dispatch them.

    ``weekly_stats.total_opens`` is left untouched.  Returns ``False`` when
    analytics are disabled in settings.
    """
    state = store.state
    settings = state.settings.analytics
    if not settings.enabled:
        _logger.debug("Analytics disabled; skipping recompute")
        return False

    when = ensure_utc(now if now is not None else store.now())
    history = state.analytics.daily_usage
    store.dispatch(analytics_actions.update_weekly_stats(compute_weekly_stats(history, settings, when, tz=tz)))
    store.dispatch(analytics_actions.update_monthly_report(compute_monthly_report(history, settings, when, tz=tz)))
    return True
