"""Settings domain reducers."""

from __future__ import annotations

from collections.abc import Callable

from pytrashcan.models.settings import SettingsState
from pytrashcan.state.events import Transition
from pytrashcan.state.merge import merge_model

SettingsReducer = Callable[[SettingsState, Transition], SettingsState]


def initial_state() -> SettingsState:
    return SettingsState()


def _replace_scalar(field: str) -> SettingsReducer:
    def reducer(state: SettingsState, transition: Transition) -> SettingsState:
        return merge_model(state, {field: transition.payload})

    reducer.__name__ = f"update_{field}"
    return reducer


def _merge_section(field: str) -> SettingsReducer:
    def reducer(state: SettingsState, transition: Transition) -> SettingsState:
        section = merge_model(getattr(state, field), transition.payload)
        return state.model_copy(update={field: section})

    reducer.__name__ = f"update_{field}"
    return reducer


def reset(state: SettingsState, transition: Transition) -> SettingsState:
    return initial_state()


REDUCERS: dict[str, SettingsReducer] = {
    "update_theme": _replace_scalar("theme"),
    "update_language": _replace_scalar("language"),
    "update_notifications": _merge_section("notifications"),
    "update_device_settings": _merge_section("device"),
    "update_analytics_settings": _merge_section("analytics"),
    "update_units": _merge_section("units"),
    "reset": reset,
}
