from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from pytrashcan.state.store import StateStore

# 2026-01-05 is a Monday.
START = datetime(2026, 1, 5, 8, 0, tzinfo=UTC)


class FakeClock:
    """Returns START, START+step, START+2*step... on successive calls."""

    def __init__(self, start: datetime = START, step: timedelta = timedelta(seconds=1)) -> None:
        self.current = start
        self.step = step
        self.calls: list[datetime] = []

    def __call__(self) -> datetime:
        value = self.current
        self.current = value + self.step
        self.calls.append(value)
        return value


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> StateStore:
    return StateStore(clock=clock)
