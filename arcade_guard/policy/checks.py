"""Plausibility checks on client-reported play telemetry.

Each check is a pure function of the telemetry and the configured policy
constants. They do not look at whether the game's win condition was reached
on screen, only whether a human could have produced the numbers.
"""

from __future__ import annotations

import logging

from ..config import GuardConfig
from ..telemetry.types import MemoryTelemetry, ReflexTelemetry
from .types import CheckOutcome, RejectReason

logger = logging.getLogger(__name__)


def check_reflex(telemetry: ReflexTelemetry, config: GuardConfig) -> CheckOutcome:
    """Check a reflex-game claim: history length, score floor, then hit spacing."""
    timestamps = telemetry.hit_timestamps
    if len(timestamps) != telemetry.claimed_score:
        return CheckOutcome.failed(RejectReason.TELEMETRY_MISMATCH, "Mismatch in score/history")

    if telemetry.claimed_score < config.win_score:
        if config.enforce_win_score:
            return CheckOutcome.failed(RejectReason.SCORE_TOO_LOW, "Score too low")
        logger.warning(
            "Allowing reflex score %d below win score %d (enforce_win_score disabled)",
            telemetry.claimed_score,
            config.win_score,
        )

    # Raw differences: out-of-order or duplicate timestamps come out <= 0 and fail.
    for previous, current in zip(timestamps, timestamps[1:]):
        if current - previous < config.min_human_interval_ms:
            return CheckOutcome.failed(RejectReason.INHUMAN_INTERVAL, "Inhuman reaction time detected")

    return CheckOutcome.passed()


def check_memory(telemetry: MemoryTelemetry, config: GuardConfig) -> CheckOutcome:
    """Check a memory-game claim against the level floor and minimum play time.

    The sequences themselves are never submitted, so elapsed time is the only
    evidence available.
    """
    if telemetry.claimed_level < config.win_level:
        return CheckOutcome.failed(RejectReason.LEVEL_TOO_LOW, "Level too low")

    if telemetry.elapsed_ms < config.min_elapsed_ms:
        return CheckOutcome.failed(RejectReason.IMPOSSIBLE_SPEED, "Impossible speed")

    return CheckOutcome.passed()
