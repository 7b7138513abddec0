"""Refresh flow for device telemetry.

The store never awaits.  A refresh is modelled as::

    set_loading(True) -> await source -> update_status(...) -> set_loading(False)

A refresh that fails leaves the last known status in place and surfaces the
failure through the device ``error`` field.  Overlapping refreshes are not
cancelled; the later ``update_status`` simply wins.
"""

from __future__ import annotations

import logging
from typing import Any

from pytrashcan.ingestion.telemetry import TelemetrySource
from pytrashcan.models.analytics import UsageAction
from pytrashcan.state.actions import analytics_actions, device_actions
from pytrashcan.state.store import StateStore

_logger = logging.getLogger(__name__)


async def refresh_device(
    store: StateStore,
    source: TelemetrySource,
    *,
    include_sensors: bool = True,
    record_usage: bool = True,
) -> bool:
    """Pull one telemetry sample into the store.

    Parameters
    ----------
    include_sensors
        Also fetch and merge a sensor reading.
    record_usage
        Append a ``refresh`` usage entry (only when analytics recording is
        enabled in settings).

    Returns ``True`` when the sample was applied.  A status sample the
    store rejects counts as a failed refresh and records no usage.
    """
    store.dispatch(device_actions.set_loading(True))
    try:
        try:
            status: dict[str, Any] = await source.fetch_status()
            sensors: dict[str, Any] | None = await source.fetch_sensors() if include_sensors else None
        except Exception as exc:
            _logger.debug("Telemetry refresh failed", exc_info=True)
            store.dispatch(device_actions.set_error(str(exc) or type(exc).__name__))
            return False

        previous_update = store.state.device.status.last_update
        applied = store.dispatch(device_actions.update_status(status))
        if applied.device.status.last_update == previous_update:
            # Rejected payload; the store has already set the device error.
            _logger.debug("Telemetry status sample rejected")
            return False

        if sensors:
            store.dispatch(device_actions.update_sensors(sensors))

        state = store.state
        if record_usage and state.settings.analytics.enabled:
            store.dispatch(
                analytics_actions.add_usage_entry(
                    UsageAction.REFRESH,
                    trash_level_at_event=state.device.status.trash_level,
                )
            )
        _logger.debug("Telemetry refresh applied")
        return True
    finally:
        store.dispatch(device_actions.set_loading(False))
