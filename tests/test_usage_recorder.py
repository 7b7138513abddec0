from __future__ import annotations

from pytrashcan.ingestion.usage import UsageRecorder
from pytrashcan.models.analytics import UsageAction
from pytrashcan.state.actions import device_actions, settings_actions
from pytrashcan.state.store import StateStore


def test_lid_transitions_are_recorded(store: StateStore) -> None:
    UsageRecorder(store).attach()

    store.dispatch(device_actions.update_status(lid_open=True, trash_level=40))
    store.dispatch(device_actions.update_status(lid_open=False))

    history = store.snapshot().analytics.daily_usage
    assert [entry.action for entry in history] == [UsageAction.LID_OPENED, UsageAction.LID_CLOSED]
    assert history[0].trash_level_at_event == 40
    assert history[0].duration == 0
    # open stamped at t0, the queued append at t1, close at t2.
    assert history[1].duration == 2.0
    assert store.snapshot().analytics.weekly_stats.total_opens == 2


def test_unchanged_lid_is_not_recorded(store: StateStore) -> None:
    UsageRecorder(store).attach()

    store.dispatch(device_actions.update_status(trash_level=10))
    store.dispatch(device_actions.update_status(lid_open=False, trash_level=20))

    assert store.snapshot().analytics.daily_usage == ()


def test_recording_respects_analytics_setting(store: StateStore) -> None:
    UsageRecorder(store).attach()
    store.dispatch(settings_actions.update_analytics_settings(enabled=False))

    store.dispatch(device_actions.update_status(lid_open=True))

    assert store.snapshot().analytics.daily_usage == ()
    assert store.snapshot().analytics.weekly_stats.total_opens == 0


def test_reset_is_not_a_usage_event(store: StateStore) -> None:
    recorder = UsageRecorder(store).attach()
    store.dispatch(device_actions.update_status(lid_open=True))

    store.dispatch(device_actions.reset())

    assert len(store.snapshot().analytics.daily_usage) == 1
    assert recorder.attached is True


def test_detach(store: StateStore) -> None:
    recorder = UsageRecorder(store).attach()
    recorder.detach()

    store.dispatch(device_actions.update_status(lid_open=True))

    assert recorder.attached is False
    assert store.snapshot().analytics.daily_usage == ()
