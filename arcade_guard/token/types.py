"""Winner token datatypes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..errors import TokenFormatError
from ..policy.types import RejectReason

SEPARATOR = ":"


@dataclass(frozen=True)
class WinnerToken:
    """Signed proof that a win passed verification at ``issued_at_ms``."""

    game_id: str
    issued_at_ms: int
    signature: str

    @property
    def payload(self) -> str:
        return f"{self.game_id}{SEPARATOR}{self.issued_at_ms}"

    def __str__(self) -> str:
        return f"{self.payload}{SEPARATOR}{self.signature}"

    @classmethod
    def parse(cls, text: str) -> "WinnerToken":
        """Split ``game_id:issued_at_ms:signature``; raise TokenFormatError otherwise."""
        if not isinstance(text, str):
            raise TokenFormatError(f"Token must be a string, got {type(text).__name__}.")
        fields = text.split(SEPARATOR)
        if len(fields) != 3:
            raise TokenFormatError(f"Token must have 3 fields, got {len(fields)}.")
        game_id, issued_raw, signature = fields
        if not game_id or not signature:
            raise TokenFormatError("Token has an empty field.")
        if not issued_raw.isascii() or not issued_raw.isdigit():
            raise TokenFormatError("Token timestamp is not a non-negative integer.")
        return cls(game_id=game_id, issued_at_ms=int(issued_raw), signature=signature)


@dataclass(frozen=True)
class TokenCheck:
    """Outcome of authoritative token verification."""

    valid: bool
    reason: str
    token: Optional[WinnerToken] = None
    age_minutes: Optional[int] = None

    @property
    def reject_reason(self) -> Optional[RejectReason]:
        return None if self.valid else RejectReason(self.reason)
