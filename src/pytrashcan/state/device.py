"""Device domain reducers.

Each reducer is a pure function ``(state, transition) -> new state``.
Connectivity and status are orthogonal: a disconnected device keeps its
last known status and sensor reading.
"""

from __future__ import annotations

from collections.abc import Callable

from pytrashcan.models.device import DeviceState
from pytrashcan.state.events import Transition
from pytrashcan.state.merge import merge_model

DeviceReducer = Callable[[DeviceState, Transition], DeviceState]


def initial_state() -> DeviceState:
    return DeviceState()


def set_connection(state: DeviceState, transition: Transition) -> DeviceState:
    return merge_model(state, {"is_connected": transition.payload})


def set_device_info(state: DeviceState, transition: Transition) -> DeviceState:
    info = merge_model(state.device_info, transition.payload)
    return state.model_copy(update={"device_info": info})


def update_status(state: DeviceState, transition: Transition) -> DeviceState:
    """Merge the supplied status fields, then stamp ``last_update``.

    The stamp is applied even when the payload is empty.
    """
    status = merge_model(state.status, transition.payload)
    status = status.model_copy(update={"last_update": transition.observed_at})
    return state.model_copy(update={"status": status})


def update_sensors(state: DeviceState, transition: Transition) -> DeviceState:
    sensors = merge_model(state.sensors, transition.payload)
    return state.model_copy(update={"sensors": sensors})


def set_loading(state: DeviceState, transition: Transition) -> DeviceState:
    return merge_model(state, {"is_loading": transition.payload})


def set_error(state: DeviceState, transition: Transition) -> DeviceState:
    return merge_model(state, {"error": transition.payload})


def reset(state: DeviceState, transition: Transition) -> DeviceState:
    return initial_state()


REDUCERS: dict[str, DeviceReducer] = {
    "set_connection": set_connection,
    "set_device_info": set_device_info,
    "update_status": update_status,
    "update_sensors": update_sensors,
    "set_loading": set_loading,
    "set_error": set_error,
    "reset": reset,
}
