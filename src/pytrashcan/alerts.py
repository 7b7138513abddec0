"""Device alerts derived from state changes.

Alerts are filtered by the notification toggles in settings; the master
``notifications.enabled`` switch silences all of them.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from datetime import datetime

from pytrashcan.models._base import TrashcanBaseModel, UtcDatetime
from pytrashcan.models.device import FillLevel
from pytrashcan.models.state import AppState
from pytrashcan.state.events import Transition
from pytrashcan.state.store import StateStore

_logger = logging.getLogger(__name__)


class AlertKind(enum.StrEnum):
    LID_OPEN = "lid_open"
    TRASH_FULL = "trash_full"
    DEVICE_OFFLINE = "device_offline"


class DeviceAlert(TrashcanBaseModel):
    kind: AlertKind
    message: str
    raised_at: UtcDatetime | None = None
    trash_level: int | None = None


def evaluate_alerts(previous: AppState, current: AppState, *, when: datetime | None = None) -> list[DeviceAlert]:
    """Alerts triggered by the change from *previous* to *current*."""
    notifications = current.settings.notifications
    if not notifications.enabled:
        return []

    alerts: list[DeviceAlert] = []
    before = previous.device
    after = current.device

    if notifications.lid_open and after.status.lid_open and not before.status.lid_open:
        alerts.append(
            DeviceAlert(
                kind=AlertKind.LID_OPEN,
                message=f"{after.device_info.name}: lid opened",
                raised_at=when,
                trash_level=after.status.trash_level,
            )
        )

    if (
        notifications.trash_full
        and after.status.fill_level == FillLevel.FULL
        and before.status.fill_level != FillLevel.FULL
    ):
        alerts.append(
            DeviceAlert(
                kind=AlertKind.TRASH_FULL,
                message=f"{after.device_info.name} is {after.status.trash_level}% full",
                raised_at=when,
                trash_level=after.status.trash_level,
            )
        )

    if notifications.device_offline and before.is_connected and not after.is_connected:
        alerts.append(
            DeviceAlert(
                kind=AlertKind.DEVICE_OFFLINE,
                message=f"{after.device_info.name} disconnected",
                raised_at=when,
            )
        )

    return alerts


class AlertNotifier:
    """Store listener forwarding alerts to *callback*."""

    def __init__(self, store: StateStore, callback: Callable[[DeviceAlert], None]) -> None:
        self._store = store
        self._callback = callback
        self._unsubscribe: Callable[[], None] | None = None

    def attach(self) -> AlertNotifier:
        if self._unsubscribe is None:
            self._unsubscribe = self._store.subscribe(self._on_transition)
        return self

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_transition(self, previous: AppState, current: AppState, transition: Transition) -> None:
        for alert in evaluate_alerts(previous, current, when=transition.observed_at):
            _logger.debug("Alert raised: %s", alert.kind)
            self._callback(alert)
