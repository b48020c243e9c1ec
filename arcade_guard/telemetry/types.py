"""Telemetry datatypes and boundary validation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Sequence, Tuple, Union

from ..errors import TelemetryError


class TelemetryKind(str, Enum):
    """Telemetry shape produced by a game."""

    REFLEX = "REFLEX"
    MEMORY = "MEMORY"


@dataclass(frozen=True)
class ReflexTelemetry:
    """Score claim plus the epoch-millisecond timestamp of every hit."""

    claimed_score: int
    hit_timestamps: Tuple[int, ...]


@dataclass(frozen=True)
class MemoryTelemetry:
    """Level reached and wall time spent reaching it."""

    claimed_level: int
    elapsed_ms: int


Telemetry = Union[ReflexTelemetry, MemoryTelemetry]

# Wire key first, descriptive alias second.
_REFLEX_SCORE = ("score", "claimedScore")
_REFLEX_HISTORY = ("history", "hitTimestamps")
_MEMORY_LEVEL = ("level", "claimedLevel")
_MEMORY_ELAPSED = ("timeElapsed", "elapsedMillis")


def parse_telemetry(kind: Union[TelemetryKind, str], data: Mapping[str, Any]) -> Telemetry:
    """Validate a raw client payload into a typed telemetry record.

    Raises :class:`TelemetryError` on any shape problem. The score/history
    length invariant is left to the plausibility checker so it can be
    reported as its own rejection reason.
    """
    if not isinstance(data, Mapping):
        raise TelemetryError(f"Telemetry must be a mapping, got {type(data).__name__}.")
    try:
        kind = TelemetryKind(kind)
    except ValueError as e:
        raise TelemetryError(f"Unknown telemetry kind: {kind!r}") from e

    if kind == TelemetryKind.REFLEX:
        score = _non_negative_int(_lookup(data, _REFLEX_SCORE), _REFLEX_SCORE[0])
        history = _lookup(data, _REFLEX_HISTORY)
        if isinstance(history, (str, bytes)) or not isinstance(history, Sequence):
            raise TelemetryError(f"'{_REFLEX_HISTORY[0]}' must be a list of timestamps.")
        timestamps = tuple(_int(value, _REFLEX_HISTORY[0]) for value in history)
        return ReflexTelemetry(claimed_score=score, hit_timestamps=timestamps)

    level = _non_negative_int(_lookup(data, _MEMORY_LEVEL), _MEMORY_LEVEL[0])
    elapsed = _non_negative_int(_lookup(data, _MEMORY_ELAPSED), _MEMORY_ELAPSED[0])
    return MemoryTelemetry(claimed_level=level, elapsed_ms=elapsed)


def _lookup(data: Mapping[str, Any], keys: Tuple[str, str]) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    raise TelemetryError(f"Missing telemetry field '{keys[0]}'.")


def _int(value: Any, field: str) -> int:
    # bool is an int subclass; a client sending true/false is malformed.
    if isinstance(value, bool) or not isinstance(value, int):
        if isinstance(value, float) and value.is_integer():
            return int(value)
        raise TelemetryError(f"'{field}' must contain integers, got {value!r}.")
    return value


def _non_negative_int(value: Any, field: str) -> int:
    number = _int(value, field)
    if number < 0:
        raise TelemetryError(f"'{field}' must be >= 0, got {number}.")
    return number
