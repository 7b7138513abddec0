"""Runtime configuration for pytrashcan."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from pytrashcan.exceptions import TrashcanConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise TrashcanConfigError(f"{name} must be numeric, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class TrashcanConfig:
    """Process-level configuration.

    Parameters
    ----------
    snapshot_path : Path or None
        Where the state snapshot is persisted between runs.  ``None``
        disables persistence.
    refresh_delay : float
        Simulated network latency in seconds for the local telemetry
        source.
    auto_record_usage : bool
        Attach the usage recorder to the store so lid transitions are
        logged to the analytics history automatically.
    alerts_enabled : bool
        Attach the alert notifier to the store.
    """

    snapshot_path: Path | None = None
    refresh_delay: float = 1.0
    auto_record_usage: bool = True
    alerts_enabled: bool = True

    def __post_init__(self) -> None:
        if self.refresh_delay < 0:
            raise TrashcanConfigError(f"refresh_delay must be >= 0, got {self.refresh_delay}")

    @classmethod
    def from_env(cls, **overrides: Any) -> TrashcanConfig:
        """Create configuration from ``TRASHCAN_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        path_env = env.get("TRASHCAN_SNAPSHOT_PATH")
        if path_env and "snapshot_path" not in overrides:
            config_kwargs["snapshot_path"] = Path(path_env).expanduser()

        delay_env = env.get("TRASHCAN_REFRESH_DELAY")
        if delay_env is not None and "refresh_delay" not in overrides:
            config_kwargs["refresh_delay"] = _env_float("TRASHCAN_REFRESH_DELAY", delay_env)

        if "auto_record_usage" not in overrides:
            config_kwargs["auto_record_usage"] = _env_bool(env.get("TRASHCAN_AUTO_RECORD"), True)

        if "alerts_enabled" not in overrides:
            config_kwargs["alerts_enabled"] = _env_bool(env.get("TRASHCAN_ALERTS_ENABLED"), True)

        path_override = overrides.get("snapshot_path")
        if isinstance(path_override, str):
            overrides["snapshot_path"] = Path(path_override).expanduser()

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
