"""Audit span model for verification and redemption calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from ..utils.time import utc_now_naive


def _new_id() -> str:
    """Generate a unique span identifier as UUID text."""
    return str(uuid4())


@dataclass
class VerificationSpan:
    """Record of one verify/redeem call.

    Fields are aligned with the ``win_verifications`` table in
    ``schema/postgres.sql``. The raw token is never stored, only its hash.
    """

    service: str
    operation: str
    game_id: Optional[str] = None
    span_id: str = field(default_factory=_new_id)
    start_time: datetime = field(default_factory=utc_now_naive)
    end_time: Optional[datetime] = None
    outcome: Optional[str] = None
    reason: Optional[str] = None
    delta_minutes: Optional[int] = None
    token_hash: Optional[str] = None

    def finish(self) -> None:
        """Mark the span as finished."""
        self.end_time = utc_now_naive()

    def to_dict(self) -> dict:
        """Serialize span for exporters."""
        return {
            "span_id": self.span_id,
            "service": self.service,
            "operation": self.operation,
            "game_id": self.game_id,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "outcome": self.outcome,
            "reason": self.reason,
            "delta_minutes": self.delta_minutes,
            "token_hash": self.token_hash,
        }
