"""Settings domain entities (user preferences)."""

from __future__ import annotations

import enum
from typing import ClassVar

from pydantic import Field

from pytrashcan.models._base import NonNegativeInt, TrashcanBaseModel


class Theme(enum.StrEnum):
    LIGHT = "light"
    DARK = "dark"


class DistanceUnit(enum.StrEnum):
    CENTIMETER = "cm"
    INCH = "inch"


class TemperatureUnit(enum.StrEnum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


class NotificationSettings(TrashcanBaseModel):
    """Per-event notification toggles. ``enabled`` is the master switch."""

    enabled: bool = True
    lid_open: bool = True
    trash_full: bool = True
    device_offline: bool = True


class DeviceSettings(TrashcanBaseModel):
    """Connection policy for the device link."""

    _KEY_ALIASES: ClassVar[dict[str, str]] = {"connectionTimeout": "connection_timeout_ms"}

    auto_connect: bool = True
    connection_timeout_ms: NonNegativeInt = 5000
    retry_attempts: NonNegativeInt = 3


class AnalyticsSettings(TrashcanBaseModel):
    """Analytics recording policy."""

    _KEY_ALIASES: ClassVar[dict[str, str]] = {"dataRetention": "data_retention_days"}

    enabled: bool = True
    data_retention_days: NonNegativeInt = 30


class UnitSettings(TrashcanBaseModel):
    distance: DistanceUnit = DistanceUnit.CENTIMETER
    temperature: TemperatureUnit = TemperatureUnit.CELSIUS


class SettingsState(TrashcanBaseModel):
    """Settings slice of the store."""

    theme: Theme = Theme.LIGHT
    notifications: NotificationSettings = Field(default_factory=NotificationSettings)
    device: DeviceSettings = Field(default_factory=DeviceSettings)
    analytics: AnalyticsSettings = Field(default_factory=AnalyticsSettings)
    language: str = "en"
    units: UnitSettings = Field(default_factory=UnitSettings)
