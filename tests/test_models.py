"""Tests for the pydantic state entities."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from pytrashcan.models.analytics import UsageAction, UsageEntry, WeeklyStats
from pytrashcan.models.device import DeviceInfo, DeviceState, DeviceStatus, FillLevel, SensorReading
from pytrashcan.models.settings import DeviceSettings, SettingsState, Theme
from pytrashcan.models.state import AppState

# ------------------------------------------------------------------
# FillLevel
# ------------------------------------------------------------------


class TestFillLevel:
    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            (0, FillLevel.EMPTY),
            (29, FillLevel.EMPTY),
            (30, FillLevel.HALF_FULL),
            (69, FillLevel.HALF_FULL),
            (70, FillLevel.FULL),
            (100, FillLevel.FULL),
        ],
    )
    def test_bands(self, level: int, expected: FillLevel) -> None:
        assert FillLevel.from_percentage(level) == expected

    def test_labels(self) -> None:
        assert FillLevel.HALF_FULL.label == "Half Full"
        assert DeviceStatus(trash_level=85).fill_level.label == "Full"


# ------------------------------------------------------------------
# Defaults
# ------------------------------------------------------------------


class TestDefaults:
    def test_device_defaults(self) -> None:
        state = DeviceState()
        assert state.is_connected is False
        assert state.device_info == DeviceInfo(name="Smart Trashcan", ip="", mac="", firmware_version="1.0.0")
        assert state.status == DeviceStatus(lid_open=False, trash_level=0, last_update=None)
        assert state.sensors == SensorReading(hand_detected=False, distance=0.0)
        assert state.is_loading is False
        assert state.error is None

    def test_settings_defaults(self) -> None:
        settings = SettingsState()
        assert settings.theme == Theme.LIGHT
        assert settings.notifications.enabled is True
        assert settings.device == DeviceSettings(auto_connect=True, connection_timeout_ms=5000, retry_attempts=3)
        assert settings.analytics.enabled is True
        assert settings.analytics.data_retention_days == 30
        assert settings.language == "en"
        assert settings.units.distance == "cm"
        assert settings.units.temperature == "celsius"

    def test_app_state_is_frozen(self) -> None:
        state = AppState()
        with pytest.raises(ValidationError):
            state.device = DeviceState()  # type: ignore[misc]


# ------------------------------------------------------------------
# Field parsing
# ------------------------------------------------------------------


class TestFieldParsing:
    def test_camel_case_and_snake_case_inputs(self) -> None:
        assert DeviceStatus.model_validate({"lidOpen": True, "trashLevel": 12}).trash_level == 12
        assert DeviceStatus.model_validate({"lid_open": True, "trash_level": 12}).lid_open is True

    def test_field_for_key(self) -> None:
        assert DeviceStatus.field_for_key("trashLevel") == "trash_level"
        assert DeviceStatus.field_for_key("trash_level") == "trash_level"
        assert DeviceInfo.field_for_key("firmware") == "firmware_version"
        assert DeviceStatus.field_for_key("colour") is None

    def test_percentage_clamped_and_rounded(self) -> None:
        assert DeviceStatus(trash_level=101).trash_level == 100
        assert DeviceStatus(trash_level=-1).trash_level == 0
        assert DeviceStatus(trash_level=42.6).trash_level == 43

    def test_naive_timestamps_become_utc(self) -> None:
        status = DeviceStatus(last_update=datetime(2026, 1, 5, 8, 0))
        assert status.last_update == datetime(2026, 1, 5, 8, 0, tzinfo=UTC)

        offset = timezone(timedelta(hours=2))
        entry = UsageEntry(timestamp=datetime(2026, 1, 5, 10, 0, tzinfo=offset), action="refresh")
        assert entry.timestamp.tzinfo is not None
        assert entry.timestamp.utcoffset() == timedelta(0)
        assert entry.timestamp.hour == 8

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("lid_opened", UsageAction.LID_OPENED),
            ("lid-closed", UsageAction.LID_CLOSED),
            ("REFRESH", UsageAction.REFRESH),
            (UsageAction.OTHER, UsageAction.OTHER),
            ("emptied", "emptied"),
        ],
    )
    def test_usage_action_coercion(self, raw: str, expected: str) -> None:
        entry = UsageEntry(timestamp=datetime(2026, 1, 5, tzinfo=UTC), action=raw)
        assert entry.action == expected

    def test_peak_hours_sorted_unique(self) -> None:
        assert WeeklyStats(peak_hours=[20, 8, 20]).peak_hours == [8, 20]
        with pytest.raises(ValidationError):
            WeeklyStats(peak_hours=[24])
