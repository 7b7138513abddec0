"""Single-writer in-memory state store.

This is the only component allowed to apply transitions.  Transitions
are applied strictly in submission order; a dispatch issued from inside
a listener is queued and runs once the current transition (and its
notifications) has completed.  No transition is ever observed partially
applied, and ``dispatch`` never raises on a bad payload: the owning
domain's ``error`` field is set instead.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import BaseModel, ValidationError

from pytrashcan._redact import redact_for_log
from pytrashcan.exceptions import TrashcanError, TrashcanSnapshotError
from pytrashcan.models._base import ensure_utc
from pytrashcan.models.state import AppState
from pytrashcan.state import analytics as _analytics
from pytrashcan.state import device as _device
from pytrashcan.state import settings as _settings
from pytrashcan.state.events import StateDomain, Transition

_logger = logging.getLogger(__name__)

Listener = Callable[[AppState, AppState, Transition], None]
"""``listener(previous, current, transition)``."""

DOMAIN_REDUCERS: dict[StateDomain, Mapping[str, Callable[[Any, Transition], Any]]] = {
    StateDomain.DEVICE: _device.REDUCERS,
    StateDomain.ANALYTICS: _analytics.REDUCERS,
    StateDomain.SETTINGS: _settings.REDUCERS,
}

_TICK = timedelta(microseconds=1)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _describe_rejection(transition: Transition, exc: Exception) -> str:
    if isinstance(exc, ValidationError):
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ())) or "payload"
        return f"Invalid {transition.type} payload: {location}: {first.get('msg', 'invalid value')}"
    return f"Invalid {transition.type} payload: {exc}"


class StateStore:
    """Process-wide store for the device, analytics and settings domains.

    Construct one per process and hand it to every consumer explicitly.

    Usage::

        store = StateStore()
        store.dispatch(device_actions.update_status(trash_level=42))
        store.snapshot().device.status.trash_level  # 42
    """

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = _utcnow,
        initial: AppState | None = None,
    ) -> None:
        self._clock = clock
        self._state = initial if initial is not None else AppState()
        self._listeners: list[Listener] = []
        self._pending: deque[Transition] = deque()
        self._dispatching = False
        self._last_stamp: datetime | None = None

    # ------------------------------------------------------------------
    # Read surface
    # ------------------------------------------------------------------

    @property
    def state(self) -> AppState:
        return self._state

    def snapshot(self) -> AppState:
        """Current state. Instances are immutable, so this is safe to hold on to."""
        return self._state

    def snapshot_dict(self) -> dict[str, Any]:
        """JSON-compatible snapshot with camelCase keys."""
        return self._state.to_payload()

    def now(self) -> datetime:
        """Current time according to the store clock.

        Never earlier than the last transition stamp, so anything already
        recorded falls inside a window that ends at ``now()``.
        """
        now = ensure_utc(self._clock())
        if self._last_stamp is not None and now < self._last_stamp:
            return self._last_stamp
        return now

    # ------------------------------------------------------------------
    # Dispatch surface
    # ------------------------------------------------------------------

    def dispatch(self, transition: Transition) -> AppState:
        """Apply *transition* (or queue it when called from a listener)."""
        self._pending.append(transition)
        if self._dispatching:
            return self._state

        self._dispatching = True
        try:
            while self._pending:
                self._apply(self._pending.popleft())
        finally:
            self._dispatching = False
        return self._state

    def dispatch_named(self, domain: str, action: str, payload: Any = None) -> AppState:
        """Dispatch by name, e.g. ``dispatch_named("device", "updateStatus", {"trashLevel": 42})``.

        Raises :class:`~pytrashcan.exceptions.TrashcanDispatchError` for
        unknown domain or transition names.
        """
        return self.dispatch(Transition(domain=domain, action=action, payload=payload))

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def restore(self, snapshot: AppState | Mapping[str, Any]) -> AppState:
        """Rehydrate from a previously persisted snapshot.

        Only the structural shape is validated.  Transient loading flags are
        cleared and the usage log is cut back to the retention cap.
        Listeners are not notified.  Later transition stamps never fall
        behind the newest time found in the snapshot.
        """
        if self._dispatching:
            raise TrashcanError("cannot restore a snapshot while a transition is being applied")

        if isinstance(snapshot, AppState):
            state = snapshot
        else:
            try:
                state = AppState.model_validate(snapshot)
            except ValidationError as exc:
                raise TrashcanSnapshotError(f"snapshot does not match the state shape: {exc}") from exc

        device = state.device.model_copy(update={"is_loading": False})
        analytics = state.analytics.model_copy(
            update={
                "is_loading": False,
                "daily_usage": _analytics.retain_newest(state.analytics.daily_usage),
            }
        )
        self._state = state.model_copy(update={"device": device, "analytics": analytics})
        self._advance_stamp_floor(self._state)
        _logger.debug("Restored state snapshot (%d usage entries)", len(analytics.daily_usage))
        return self._state

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _advance_stamp_floor(self, state: AppState) -> None:
        # Restored times must not be undercut by the next stamp.
        restored = [entry.timestamp for entry in state.analytics.daily_usage[-1:]]
        if state.device.status.last_update is not None:
            restored.append(state.device.status.last_update)
        if self._last_stamp is not None:
            restored.append(self._last_stamp)
        if restored:
            self._last_stamp = max(restored)

    def _stamp(self) -> datetime:
        # Transition times are strictly increasing even if the clock stalls.
        now = ensure_utc(self._clock())
        if self._last_stamp is not None and now <= self._last_stamp:
            now = self._last_stamp + _TICK
        self._last_stamp = now
        return now

    def _apply(self, transition: Transition) -> None:
        stamped = transition.stamped(self._stamp())
        reducer = DOMAIN_REDUCERS[stamped.domain][stamped.action]
        previous = self._state
        current_slice: BaseModel = getattr(previous, stamped.domain.value)

        try:
            new_slice = reducer(current_slice, stamped)
        except (TypeError, ValueError) as exc:
            message = _describe_rejection(stamped, exc)
            _logger.warning("%s", message)
            if "error" not in type(current_slice).model_fields:
                return
            new_slice = current_slice.model_copy(update={"error": message})
        else:
            _logger.debug("Applied %s payload=%s", stamped.type, redact_for_log(stamped.payload))

        self._state = previous.model_copy(update={stamped.domain.value: new_slice})
        self._notify(previous, self._state, stamped)

    def _notify(self, previous: AppState, current: AppState, transition: Transition) -> None:
        for listener in list(self._listeners):
            try:
                listener(previous, current, transition)
            except Exception:
                _logger.warning("State listener failed for %s", transition.type, exc_info=True)
