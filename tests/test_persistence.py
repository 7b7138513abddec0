from __future__ import annotations

import json
from pathlib import Path

import pytest

from pytrashcan.exceptions import TrashcanSnapshotError
from pytrashcan.models.analytics import UsageAction
from pytrashcan.persistence import SnapshotFile
from pytrashcan.state.actions import analytics_actions, device_actions
from pytrashcan.state.store import StateStore


def test_save_and_load_round_trip(tmp_path: Path, store: StateStore) -> None:
    store.dispatch(device_actions.set_device_info(mac="AA:BB:CC:DD:EE:FF"))
    store.dispatch(device_actions.update_status(lid_open=True, trash_level=73))
    store.dispatch(analytics_actions.add_usage_entry(UsageAction.LID_OPENED, trash_level_at_event=73))

    snapshots = SnapshotFile(tmp_path / "nested" / "state.json")
    snapshots.save(store.snapshot())

    raw = json.loads(snapshots.path.read_text(encoding="utf-8"))
    assert raw["device"]["status"]["trashLevel"] == 73
    assert raw["analytics"]["dailyUsage"][0]["action"] == "lid_opened"

    assert snapshots.load() == store.snapshot()


def test_missing_file_loads_none(tmp_path: Path) -> None:
    assert SnapshotFile(tmp_path / "absent.json").load() is None


def test_malformed_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(TrashcanSnapshotError) as excinfo:
        SnapshotFile(path).load()
    assert excinfo.value.path == str(path)


def test_clear(tmp_path: Path, store: StateStore) -> None:
    snapshots = SnapshotFile(tmp_path / "state.json")
    snapshots.save(store.snapshot())
    snapshots.clear()
    snapshots.clear()

    assert not snapshots.path.exists()
    assert list(tmp_path.iterdir()) == []
