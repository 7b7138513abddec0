"""Telemetry sources.

A source produces partial status/sensor patches for the device domain.
The only built-in source simulates the device locally, as the mobile app
does: a random lid state and fill level after a short network delay.
"""

from __future__ import annotations

import asyncio
import random
from typing import Any, Protocol


class TelemetrySource(Protocol):
    async def fetch_status(self) -> dict[str, Any]: ...

    async def fetch_sensors(self) -> dict[str, Any]: ...


class SimulatedTelemetrySource:
    """Random telemetry with a fixed artificial latency.

    Pass a seeded :class:`random.Random` for reproducible runs.
    """

    def __init__(self, *, delay: float = 1.0, rng: random.Random | None = None) -> None:
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self._delay = delay
        self._rng = rng if rng is not None else random.Random()

    async def _wait(self) -> None:
        if self._delay > 0:
            await asyncio.sleep(self._delay)

    async def fetch_status(self) -> dict[str, Any]:
        await self._wait()
        return {
            "lid_open": self._rng.random() > 0.5,
            "trash_level": self._rng.randrange(100),
        }

    async def fetch_sensors(self) -> dict[str, Any]:
        await self._wait()
        return {
            "hand_detected": self._rng.random() > 0.8,
            "distance": round(self._rng.uniform(0.0, 120.0), 1),
        }
