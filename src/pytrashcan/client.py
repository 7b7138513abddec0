"""High-level async client tying the store to its collaborators."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Mapping
from typing import Any

from pytrashcan.alerts import AlertNotifier, DeviceAlert
from pytrashcan.config import TrashcanConfig
from pytrashcan.ingestion.refresh import refresh_device
from pytrashcan.ingestion.telemetry import SimulatedTelemetrySource, TelemetrySource
from pytrashcan.ingestion.usage import UsageRecorder, recompute_analytics
from pytrashcan.models.state import AppState
from pytrashcan.persistence import SnapshotFile
from pytrashcan.state.actions import device_actions
from pytrashcan.state.store import StateStore

_logger = logging.getLogger(__name__)


class TrashcanClient:
    """Device controller for the presentation layer.

    Usage::

        async with TrashcanClient(TrashcanConfig.from_env()) as client:
            client.connect({"ip": "192.168.1.20"})
            await client.refresh()
            client.state.device.status.trash_level
    """

    def __init__(
        self,
        config: TrashcanConfig | None = None,
        *,
        store: StateStore | None = None,
        source: TelemetrySource | None = None,
        rng: random.Random | None = None,
        on_alert: Callable[[DeviceAlert], None] | None = None,
    ) -> None:
        self._config = config if config is not None else TrashcanConfig()
        self._store = store if store is not None else StateStore()
        if source is None:
            source = SimulatedTelemetrySource(delay=self._config.refresh_delay, rng=rng)
        self._source = source
        self._snapshots = SnapshotFile(self._config.snapshot_path) if self._config.snapshot_path else None
        self._recorder = UsageRecorder(self._store)
        self._notifier = AlertNotifier(self._store, on_alert) if on_alert is not None else None

        if self._config.auto_record_usage:
            self._recorder.attach()
        if self._notifier is not None and self._config.alerts_enabled:
            self._notifier.attach()

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> TrashcanClient:
        self.load()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        self.save()

    def close(self) -> None:
        """Detach listeners from the store."""
        self._recorder.detach()
        if self._notifier is not None:
            self._notifier.detach()

    # ------------------------------------------------------------------
    # Read surface
    # ------------------------------------------------------------------

    @property
    def store(self) -> StateStore:
        return self._store

    @property
    def state(self) -> AppState:
        return self._store.snapshot()

    # ------------------------------------------------------------------
    # Device actions
    # ------------------------------------------------------------------

    async def refresh(self, *, include_sensors: bool = True) -> bool:
        """Pull one telemetry sample; see :func:`refresh_device`."""
        return await refresh_device(
            self._store,
            self._source,
            include_sensors=include_sensors,
            record_usage=self._config.auto_record_usage,
        )

    def toggle_lid(self) -> AppState:
        lid_open = self._store.state.device.status.lid_open
        return self._store.dispatch(device_actions.update_status(lid_open=not lid_open))

    def connect(self, info: Mapping[str, Any] | None = None) -> AppState:
        """Mark the device connected, optionally merging discovery info (ip, mac...)."""
        if info:
            self._store.dispatch(device_actions.set_device_info(info))
        return self._store.dispatch(device_actions.set_connection(True))

    def disconnect(self) -> AppState:
        """Mark the device disconnected. The IP is cleared; status is kept."""
        self._store.dispatch(device_actions.set_connection(False))
        return self._store.dispatch(device_actions.set_device_info(ip=""))

    def recompute_analytics(self) -> bool:
        return recompute_analytics(self._store)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> bool:
        """Rehydrate the store from the configured snapshot file, if any."""
        if self._snapshots is None:
            return False
        snapshot = self._snapshots.load()
        if snapshot is None:
            _logger.debug("No snapshot at %s", self._snapshots.path)
            return False
        self._store.restore(snapshot)
        return True

    def save(self) -> bool:
        if self._snapshots is None:
            return False
        self._snapshots.save(self._store.snapshot())
        return True
