"""State/store layer.

This package is the single source of truth for device connectivity, live
status, usage analytics and user settings.  Presentation layers read
snapshots and dispatch transitions; nothing else mutates state.
"""

from pytrashcan.state.actions import analytics_actions, device_actions, settings_actions
from pytrashcan.state.events import StateDomain, Transition
from pytrashcan.state.store import StateStore

__all__ = [
    "StateDomain",
    "StateStore",
    "Transition",
    "analytics_actions",
    "device_actions",
    "settings_actions",
]
