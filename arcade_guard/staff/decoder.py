"""Stateless staff decoder for ``GAME-HHMM-OK`` short codes.

The decoder has no access to the signing secret, so it proves nothing
cryptographically. It accepts a code whose encoded minute-of-day falls within
the redemption window of the staff device's clock. A code can be redeemed
any number of times inside that window. Use
:meth:`arcade_guard.token.TokenVerifier.check` where the full token is
available.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from ..config import GuardConfig
from .short_code import CODE_RE

MINUTES_PER_DAY = 1440
HALF_DAY_MINUTES = 720

MALFORMED_MESSAGE = "Invalid code format. Expected format: GAME-HHMM-OK"


class CodeStatus(str, Enum):
    """Staff decision for a presented code."""

    VALID = "VALID"
    EXPIRED = "EXPIRED"
    FUTURE = "FUTURE"
    MALFORMED = "MALFORMED"


@dataclass(frozen=True)
class DecodeResult:
    status: CodeStatus
    message: str
    delta_minutes: Optional[int] = None
    game_prefix: Optional[str] = None

    @property
    def valid(self) -> bool:
        return self.status == CodeStatus.VALID


def minutes_since_issue(hours: int, minutes: int, now: datetime) -> int:
    """Minutes from the code's time-of-day to ``now``, folded across midnight.

    A code from 23:55 checked at 00:05 reads as +10, not -1430.
    """
    delta = (now.hour * 60 + now.minute) - (hours * 60 + minutes)
    if delta < -HALF_DAY_MINUTES:
        delta += MINUTES_PER_DAY
    elif delta > HALF_DAY_MINUTES:
        delta -= MINUTES_PER_DAY
    return delta


def decode_short_code(code: str, now: Optional[datetime] = None, *, config: Optional[GuardConfig] = None) -> DecodeResult:
    """Classify a typed code as VALID, EXPIRED, FUTURE or MALFORMED."""
    cfg = config or GuardConfig()
    if not isinstance(code, str):
        return DecodeResult(CodeStatus.MALFORMED, MALFORMED_MESSAGE)

    match = CODE_RE.fullmatch(code.strip().upper())
    if match is None:
        return DecodeResult(CodeStatus.MALFORMED, MALFORMED_MESSAGE)

    prefix, digits = match.group(1), match.group(2)
    # Hours above 23 are not rejected here; they land outside the window.
    hours, minutes = int(digits[:2]), int(digits[2:])
    current = now if now is not None else datetime.now(cfg.display_tz)
    delta = minutes_since_issue(hours, minutes, current)

    if cfg.code_min_delta <= delta <= cfg.code_max_delta:
        issued = "just now" if delta < 0 else f"{delta} minutes ago"
        return DecodeResult(CodeStatus.VALID, f"Code is VALID. Issued {issued}.", delta, prefix)
    if delta < cfg.code_min_delta:
        return DecodeResult(
            CodeStatus.FUTURE,
            f"Invalid time (Future code by {abs(delta)} mins). Check clocks.",
            delta,
            prefix,
        )
    return DecodeResult(
        CodeStatus.EXPIRED,
        f"Code EXPIRED. Issued {delta} minutes ago (Max {cfg.code_max_delta} mins).",
        delta,
        prefix,
    )


class StaffDecoder:
    """Decoder bound to one configuration, for the staff console."""

    def __init__(self, config: Optional[GuardConfig] = None) -> None:
        self.config = config or GuardConfig()

    def decode(self, code: str, now: Optional[datetime] = None) -> DecodeResult:
        return decode_short_code(code, now, config=self.config)
