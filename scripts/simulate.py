#!/usr/bin/env python3
"""Run a simulated trash can session and dump the resulting state.

This script connects the simulated device, performs a number of refresh
cycles (random lid/fill samples), recomputes the analytics rollups and
prints the final snapshot.

Usage
-----
::

    python scripts/simulate.py --cycles 20 --seed 7

Options::

    --cycles N          Number of refresh cycles (default: 10)
    --seed N            Seed for the simulated telemetry
    --delay SECONDS     Simulated network latency per sample (default: 0)
    --snapshot FILE     Load/save the state snapshot at FILE
    --json              Output the snapshot as JSON
    --verbose           Enable DEBUG logging
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import random
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pytrashcan import AppState, DeviceAlert, TrashcanClient, TrashcanConfig  # noqa: E402


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


def _print_summary(state: AppState) -> None:
    device = state.device
    analytics = state.analytics
    print(_section("Device"))
    print(f"  name:       {device.device_info.name}")
    print(f"  connected:  {device.is_connected}")
    print(f"  lid:        {'open' if device.status.lid_open else 'closed'}")
    print(f"  trash:      {device.status.trash_level}% ({device.status.fill_level.label})")
    print(f"  updated:    {device.status.last_update}")
    if device.error:
        print(f"  error:      {device.error}")

    print(_section("Analytics"))
    print(f"  entries:    {len(analytics.daily_usage)}")
    print(f"  opens:      {analytics.weekly_stats.total_opens}")
    print(f"  avg level:  {analytics.weekly_stats.average_level}")
    print(f"  peak hours: {analytics.weekly_stats.peak_hours}")
    print(f"  busiest:    {analytics.monthly_report.most_active_day or '-'}")


def _on_alert(alert: DeviceAlert) -> None:
    print(f"[alert] {alert.kind}: {alert.message}", file=sys.stderr)


async def _run(args: argparse.Namespace) -> int:
    overrides: dict[str, object] = {"refresh_delay": args.delay}
    if args.snapshot:
        overrides["snapshot_path"] = args.snapshot
    config = TrashcanConfig.from_env(**overrides)
    rng = random.Random(args.seed)
    async with TrashcanClient(config, rng=rng, on_alert=_on_alert) as client:
        client.connect({"ip": "192.168.1.50", "mac": "AA:BB:CC:DD:EE:FF"})
        for _ in range(args.cycles):
            await client.refresh()
        client.recompute_analytics()
        state = client.state

    if args.json:
        print(json.dumps(state.to_payload(), indent=2))
    else:
        _print_summary(state)
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--cycles", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--delay", type=float, default=0.0)
    parser.add_argument("--snapshot", type=str, default=None)
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(_run(args))


if __name__ == "__main__":
    sys.exit(main())
