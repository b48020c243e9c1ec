"""Telemetry records submitted by the game clients."""

from .types import MemoryTelemetry, ReflexTelemetry, Telemetry, TelemetryKind, parse_telemetry

__all__ = ["ReflexTelemetry", "MemoryTelemetry", "Telemetry", "TelemetryKind", "parse_telemetry"]
