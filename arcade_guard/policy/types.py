"""Policy datatypes and enums."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional, Union

from ..telemetry.types import TelemetryKind

if TYPE_CHECKING:
    from ..token.types import WinnerToken


class RejectReason(str, Enum):
    """Why a win claim, token or short code was refused."""

    TELEMETRY_MISMATCH = "telemetry_mismatch"
    SCORE_TOO_LOW = "score_too_low"
    LEVEL_TOO_LOW = "level_too_low"
    INHUMAN_INTERVAL = "inhuman_interval"
    IMPOSSIBLE_SPEED = "impossible_speed"
    MALFORMED_TELEMETRY = "malformed_telemetry"
    UNKNOWN_GAME = "unknown_game"
    UNCHECKED_GAME = "unchecked_game"
    MALFORMED = "malformed"
    EXPIRED = "expired"
    FUTURE_CODE = "future_code"
    SIGNATURE_INVALID = "signature_invalid"


@dataclass(frozen=True)
class CheckOutcome:
    """Result of a single plausibility check."""

    ok: bool
    reason: Optional[RejectReason] = None
    message: str = "ok"

    @classmethod
    def passed(cls) -> "CheckOutcome":
        return cls(ok=True)

    @classmethod
    def failed(cls, reason: RejectReason, message: str) -> "CheckOutcome":
        return cls(ok=False, reason=reason, message=message)


@dataclass(frozen=True)
class Accepted:
    """Win claim passed every check; carries the signed token and staff code."""

    token: "WinnerToken"
    short_code: str

    accepted = True


@dataclass(frozen=True)
class Rejected:
    """Win claim refused with a specific reason."""

    reason: RejectReason
    message: str

    accepted = False


VerificationResult = Union[Accepted, Rejected]

Checker = Callable[..., CheckOutcome]


@dataclass(frozen=True)
class GameProfile:
    """Registration metadata for one game.

    Games with no ``checker`` are accepted on claim alone, subject to
    ``GuardConfig.allow_unchecked_games``.
    """

    game_id: str
    code_prefix: str
    telemetry_kind: Optional[TelemetryKind] = None
    checker: Optional[Checker] = None

    @property
    def checked(self) -> bool:
        return self.checker is not None
