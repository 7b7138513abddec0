"""Transition builders, one namespace per domain.

Partial-update builders accept a mapping, keyword fields, or both::

    device_actions.update_status({"trashLevel": 80}, lid_open=True)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pytrashcan.models.analytics import UsageAction
from pytrashcan.state.events import StateDomain, Transition


def _patch(patch: Mapping[str, Any] | None, fields: dict[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(patch) if patch else {}
    merged.update(fields)
    return merged


class _DomainActions:
    domain: StateDomain

    def _make(self, action: str, payload: Any = None) -> Transition:
        return Transition(domain=self.domain, action=action, payload=payload)

    def reset(self) -> Transition:
        return self._make("reset")


class DeviceActions(_DomainActions):
    domain = StateDomain.DEVICE

    def set_connection(self, connected: bool) -> Transition:
        return self._make("set_connection", connected)

    def set_device_info(self, patch: Mapping[str, Any] | None = None, **fields: Any) -> Transition:
        return self._make("set_device_info", _patch(patch, fields))

    def update_status(self, patch: Mapping[str, Any] | None = None, **fields: Any) -> Transition:
        return self._make("update_status", _patch(patch, fields))

    def update_sensors(self, patch: Mapping[str, Any] | None = None, **fields: Any) -> Transition:
        return self._make("update_sensors", _patch(patch, fields))

    def set_loading(self, loading: bool) -> Transition:
        return self._make("set_loading", loading)

    def set_error(self, message: str | None) -> Transition:
        return self._make("set_error", message)


class AnalyticsActions(_DomainActions):
    domain = StateDomain.ANALYTICS

    def add_usage_entry(
        self,
        action: UsageAction | str,
        duration: float | None = None,
        trash_level_at_event: int | None = None,
    ) -> Transition:
        payload: dict[str, Any] = {"action": action}
        if duration is not None:
            payload["duration"] = duration
        if trash_level_at_event is not None:
            payload["trash_level_at_event"] = trash_level_at_event
        return self._make("add_usage_entry", payload)

    def update_weekly_stats(self, patch: Mapping[str, Any] | None = None, **fields: Any) -> Transition:
        return self._make("update_weekly_stats", _patch(patch, fields))

    def update_monthly_report(self, patch: Mapping[str, Any] | None = None, **fields: Any) -> Transition:
        return self._make("update_monthly_report", _patch(patch, fields))

    def set_loading(self, loading: bool) -> Transition:
        return self._make("set_loading", loading)

    def set_error(self, message: str | None) -> Transition:
        return self._make("set_error", message)


class SettingsActions(_DomainActions):
    domain = StateDomain.SETTINGS

    def update_theme(self, theme: str) -> Transition:
        return self._make("update_theme", theme)

    def update_language(self, language: str) -> Transition:
        return self._make("update_language", language)

    def update_notifications(self, patch: Mapping[str, Any] | None = None, **fields: Any) -> Transition:
        return self._make("update_notifications", _patch(patch, fields))

    def update_device_settings(self, patch: Mapping[str, Any] | None = None, **fields: Any) -> Transition:
        return self._make("update_device_settings", _patch(patch, fields))

    def update_analytics_settings(self, patch: Mapping[str, Any] | None = None, **fields: Any) -> Transition:
        return self._make("update_analytics_settings", _patch(patch, fields))

    def update_units(self, patch: Mapping[str, Any] | None = None, **fields: Any) -> Transition:
        return self._make("update_units", _patch(patch, fields))


device_actions = DeviceActions()
analytics_actions = AnalyticsActions()
settings_actions = SettingsActions()
