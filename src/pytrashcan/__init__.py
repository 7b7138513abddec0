"""pytrashcan - State core for a connected smart trash can."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pytrashcan")
except PackageNotFoundError:
    __version__ = "0+local"
from pytrashcan.alerts import AlertKind, AlertNotifier, DeviceAlert, evaluate_alerts
from pytrashcan.client import TrashcanClient
from pytrashcan.config import TrashcanConfig
from pytrashcan.exceptions import (
    TrashcanConfigError,
    TrashcanDispatchError,
    TrashcanError,
    TrashcanSnapshotError,
)
from pytrashcan.ingestion import (
    SimulatedTelemetrySource,
    TelemetrySource,
    UsageRecorder,
    recompute_analytics,
    refresh_device,
)
from pytrashcan.models import (
    AnalyticsSettings,
    AnalyticsState,
    AppState,
    DeviceInfo,
    DeviceSettings,
    DeviceState,
    DeviceStatus,
    FillLevel,
    MonthlyReport,
    NotificationSettings,
    SensorReading,
    SettingsState,
    Theme,
    UnitSettings,
    UsageAction,
    UsageEntry,
    WeeklyStats,
)
from pytrashcan.persistence import SnapshotFile
from pytrashcan.state import (
    StateDomain,
    StateStore,
    Transition,
    analytics_actions,
    device_actions,
    settings_actions,
)

__all__ = [
    "__version__",
    "AlertKind",
    "AlertNotifier",
    "AnalyticsSettings",
    "AnalyticsState",
    "AppState",
    "DeviceAlert",
    "DeviceInfo",
    "DeviceSettings",
    "DeviceState",
    "DeviceStatus",
    "FillLevel",
    "MonthlyReport",
    "NotificationSettings",
    "SensorReading",
    "SettingsState",
    "SimulatedTelemetrySource",
    "SnapshotFile",
    "StateDomain",
    "StateStore",
    "TelemetrySource",
    "Theme",
    "Transition",
    "TrashcanClient",
    "TrashcanConfig",
    "TrashcanConfigError",
    "TrashcanDispatchError",
    "TrashcanError",
    "TrashcanSnapshotError",
    "UnitSettings",
    "UsageAction",
    "UsageEntry",
    "UsageRecorder",
    "WeeklyStats",
    "analytics_actions",
    "device_actions",
    "evaluate_alerts",
    "recompute_analytics",
    "refresh_device",
    "settings_actions",
]
