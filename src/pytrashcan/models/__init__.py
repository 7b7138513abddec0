"""State entity models."""

from pytrashcan.models._base import TrashcanBaseModel
from pytrashcan.models.analytics import AnalyticsState, MonthlyReport, UsageAction, UsageEntry, WeeklyStats
from pytrashcan.models.device import DeviceInfo, DeviceState, DeviceStatus, FillLevel, SensorReading
from pytrashcan.models.settings import (
    AnalyticsSettings,
    DeviceSettings,
    DistanceUnit,
    NotificationSettings,
    SettingsState,
    TemperatureUnit,
    Theme,
    UnitSettings,
)
from pytrashcan.models.state import AppState

__all__ = [
    "AnalyticsSettings",
    "AnalyticsState",
    "AppState",
    "DeviceInfo",
    "DeviceSettings",
    "DeviceState",
    "DeviceStatus",
    "DistanceUnit",
    "FillLevel",
    "MonthlyReport",
    "NotificationSettings",
    "SensorReading",
    "SettingsState",
    "TemperatureUnit",
    "Theme",
    "TrashcanBaseModel",
    "UnitSettings",
    "UsageAction",
    "UsageEntry",
    "WeeklyStats",
]
