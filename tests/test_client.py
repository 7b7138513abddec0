from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from pytrashcan.alerts import AlertKind, DeviceAlert
from pytrashcan.client import TrashcanClient
from pytrashcan.config import TrashcanConfig
from pytrashcan.models.analytics import UsageAction
from pytrashcan.state.store import StateStore


class _StaticSource:
    def __init__(self, **status: Any) -> None:
        self.status = status

    async def fetch_status(self) -> dict[str, Any]:
        return dict(self.status)

    async def fetch_sensors(self) -> dict[str, Any]:
        return {"hand_detected": False, "distance": 42.0}


def test_toggle_lid_records_usage(store: StateStore) -> None:
    client = TrashcanClient(store=store, source=_StaticSource())

    assert client.toggle_lid().device.status.lid_open is True
    assert client.toggle_lid().device.status.lid_open is False

    actions = [entry.action for entry in client.state.analytics.daily_usage]
    assert actions == [UsageAction.LID_OPENED, UsageAction.LID_CLOSED]


def test_toggle_lid_without_recorder(store: StateStore) -> None:
    client = TrashcanClient(TrashcanConfig(auto_record_usage=False), store=store, source=_StaticSource())

    client.toggle_lid()

    assert client.state.analytics.daily_usage == ()


def test_connect_and_disconnect(store: StateStore) -> None:
    client = TrashcanClient(store=store, source=_StaticSource())

    client.connect({"ip": "192.168.1.20", "mac": "AA:BB:CC:DD:EE:FF"})
    assert client.state.device.is_connected is True
    assert client.state.device.device_info.ip == "192.168.1.20"

    client.toggle_lid()
    state = client.disconnect()

    assert state.device.is_connected is False
    assert state.device.device_info.ip == ""
    assert state.device.device_info.mac == "AA:BB:CC:DD:EE:FF"
    assert state.device.status.lid_open is True


def test_alert_callback(store: StateStore) -> None:
    received: list[DeviceAlert] = []
    client = TrashcanClient(store=store, source=_StaticSource(), on_alert=received.append)

    client.connect()
    client.disconnect()

    assert [alert.kind for alert in received] == [AlertKind.DEVICE_OFFLINE]


def test_alert_callback_disabled_by_config(store: StateStore) -> None:
    received: list[DeviceAlert] = []
    config = TrashcanConfig(alerts_enabled=False)
    client = TrashcanClient(config, store=store, source=_StaticSource(), on_alert=received.append)

    client.connect()
    client.disconnect()

    assert received == []


def test_close_detaches_listeners(store: StateStore) -> None:
    client = TrashcanClient(store=store, source=_StaticSource())
    client.close()

    client.toggle_lid()

    assert client.state.analytics.daily_usage == ()


@pytest.mark.asyncio
async def test_refresh_uses_source(store: StateStore) -> None:
    client = TrashcanClient(store=store, source=_StaticSource(lid_open=False, trash_level=75))

    assert await client.refresh() is True

    assert client.state.device.status.trash_level == 75
    assert client.state.device.sensors.distance == 42.0
    assert client.recompute_analytics() is True


@pytest.mark.asyncio
async def test_context_manager_persists_snapshot(tmp_path: Path) -> None:
    config = TrashcanConfig(snapshot_path=tmp_path / "state.json", refresh_delay=0)

    async with TrashcanClient(config, source=_StaticSource(trash_level=55)) as client:
        await client.refresh()
        client.connect({"ip": "10.0.0.2"})

    assert (tmp_path / "state.json").exists()

    async with TrashcanClient(config, source=_StaticSource()) as restored:
        state = restored.state
        assert state.device.status.trash_level == 55
        assert state.device.device_info.ip == "10.0.0.2"
        assert state.device.is_loading is False
        assert len(state.analytics.daily_usage) == 1


def test_persistence_disabled_without_path(store: StateStore) -> None:
    client = TrashcanClient(store=store, source=_StaticSource())

    assert client.load() is False
    assert client.save() is False
