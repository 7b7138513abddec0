"""Ingestion layer.

Adapters that produce device telemetry (simulated locally; the real
transport is out of scope) and collaborators that turn device activity
into analytics transitions.
"""

from pytrashcan.ingestion.refresh import refresh_device
from pytrashcan.ingestion.telemetry import SimulatedTelemetrySource, TelemetrySource
from pytrashcan.ingestion.usage import UsageRecorder, recompute_analytics

__all__ = [
    "SimulatedTelemetrySource",
    "TelemetrySource",
    "UsageRecorder",
    "recompute_analytics",
    "refresh_device",
]
