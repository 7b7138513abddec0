"""Device domain entities."""

from __future__ import annotations

import enum
from typing import ClassVar

from pydantic import Field

from pytrashcan._constants import (
    DEFAULT_DEVICE_NAME,
    DEFAULT_FIRMWARE_VERSION,
    FULL_THRESHOLD,
    HALF_FULL_THRESHOLD,
)
from pytrashcan.models._base import NonNegativeFloat, Percentage, TrashcanBaseModel, UtcDatetime

# ------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------


class FillLevel(enum.StrEnum):
    """Coarse fill band shown on the dashboard."""

    EMPTY = "empty"
    HALF_FULL = "half_full"
    FULL = "full"

    @classmethod
    def from_percentage(cls, level: int | float) -> FillLevel:
        if level < HALF_FULL_THRESHOLD:
            return cls.EMPTY
        if level < FULL_THRESHOLD:
            return cls.HALF_FULL
        return cls.FULL

    @property
    def label(self) -> str:
        """Human-readable label."""
        return {
            FillLevel.EMPTY: "Empty",
            FillLevel.HALF_FULL: "Half Full",
            FillLevel.FULL: "Full",
        }[self]


# ------------------------------------------------------------------
# Entities
# ------------------------------------------------------------------


class DeviceInfo(TrashcanBaseModel):
    """Static device identity, set at pairing time."""

    _KEY_ALIASES: ClassVar[dict[str, str]] = {"firmware": "firmware_version"}

    name: str = DEFAULT_DEVICE_NAME
    ip: str = ""
    """IP address, empty while disconnected."""
    mac: str = ""
    firmware_version: str = DEFAULT_FIRMWARE_VERSION


class DeviceStatus(TrashcanBaseModel):
    """Live lid/fill state, merged from telemetry."""

    lid_open: bool = False
    trash_level: Percentage = 0
    """Fill level in percent (0-100)."""
    last_update: UtcDatetime | None = None
    """Arrival time of the most recent status update."""

    @property
    def fill_level(self) -> FillLevel:
        return FillLevel.from_percentage(self.trash_level)


class SensorReading(TrashcanBaseModel):
    """Latest raw sensor values. No history is kept."""

    hand_detected: bool = False
    distance: NonNegativeFloat = 0.0
    """Distance reported by the proximity sensor, in sensor units."""


class DeviceState(TrashcanBaseModel):
    """Device slice of the store."""

    is_connected: bool = False
    device_info: DeviceInfo = Field(default_factory=DeviceInfo)
    status: DeviceStatus = Field(default_factory=DeviceStatus)
    sensors: SensorReading = Field(default_factory=SensorReading)
    is_loading: bool = False
    error: str | None = None
