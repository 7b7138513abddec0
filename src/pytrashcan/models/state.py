"""Full application snapshot."""

from __future__ import annotations

from pydantic import Field

from pytrashcan.models._base import TrashcanBaseModel
from pytrashcan.models.analytics import AnalyticsState
from pytrashcan.models.device import DeviceState
from pytrashcan.models.settings import SettingsState


class AppState(TrashcanBaseModel):
    """Snapshot of all three domains, read atomically from the store."""

    device: DeviceState = Field(default_factory=DeviceState)
    analytics: AnalyticsState = Field(default_factory=AnalyticsState)
    settings: SettingsState = Field(default_factory=SettingsState)
