"""Transition requests.

Every state change is described by a :class:`Transition`.  Only the
state store is allowed to apply them.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_snake

from pytrashcan.exceptions import TrashcanDispatchError
from pytrashcan.models._base import UtcDatetime, ensure_utc


class StateDomain(StrEnum):
    DEVICE = "device"
    ANALYTICS = "analytics"
    SETTINGS = "settings"


TRANSITION_NAMES: dict[StateDomain, frozenset[str]] = {
    StateDomain.DEVICE: frozenset(
        {
            "set_connection",
            "set_device_info",
            "update_status",
            "update_sensors",
            "set_loading",
            "set_error",
            "reset",
        }
    ),
    StateDomain.ANALYTICS: frozenset(
        {
            "add_usage_entry",
            "update_weekly_stats",
            "update_monthly_report",
            "set_loading",
            "set_error",
            "reset",
        }
    ),
    StateDomain.SETTINGS: frozenset(
        {
            "update_theme",
            "update_notifications",
            "update_device_settings",
            "update_analytics_settings",
            "update_language",
            "update_units",
            "reset",
        }
    ),
}

# Action names used by the mobile app's slices.
_LEGACY_ACTION_NAMES: dict[str, str] = {
    "set_connection_status": "set_connection",
    "reset_device": "reset",
    "reset_analytics": "reset",
    "reset_settings": "reset",
}


def normalize_action_name(action: str) -> str:
    """``updateStatus`` / ``update_status`` / ``device/updateStatus`` -> ``update_status``."""
    name = action.strip().rsplit("/", 1)[-1]
    name = to_snake(name)
    return _LEGACY_ACTION_NAMES.get(name, name)


class Transition(BaseModel):
    """A named state transition with its payload.

    ``observed_at`` is assigned by the store clock at dispatch time; values
    supplied by callers are overwritten.
    """

    model_config = ConfigDict(frozen=True)

    domain: StateDomain
    action: str
    payload: Any = None
    observed_at: UtcDatetime | None = None

    @field_validator("domain", mode="before")
    @classmethod
    def _normalize_domain(cls, value: Any) -> Any:
        if isinstance(value, StateDomain):
            return value
        text = str(value).strip().lower()
        try:
            return StateDomain(text)
        except ValueError as exc:
            raise TrashcanDispatchError(f"unknown state domain {value!r}", domain=text) from exc

    @field_validator("action", mode="before")
    @classmethod
    def _normalize_action(cls, value: Any) -> Any:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("action must be a non-empty string")
        return normalize_action_name(value)

    @model_validator(mode="after")
    def _check_known_action(self) -> Transition:
        if self.action not in TRANSITION_NAMES[self.domain]:
            raise TrashcanDispatchError(
                f"unknown transition {self.action!r} for domain {self.domain.value!r}",
                domain=self.domain.value,
                action=self.action,
            )
        return self

    @property
    def type(self) -> str:
        """Qualified name, e.g. ``device/update_status``."""
        return f"{self.domain.value}/{self.action}"

    def stamped(self, when: datetime) -> Transition:
        return self.model_copy(update={"observed_at": ensure_utc(when)})
