"""HMAC-backed winner token issuer."""

from __future__ import annotations

from typing import Optional

from ..utils.hashing import hmac_sha256_hex
from ..utils.time import epoch_ms
from .types import SEPARATOR, WinnerToken


class TokenIssuer:
    """Issue deterministic signed tokens of the form ``game_id:issued_at_ms:hexsig``.

    The same secret, game id and instant always produce the same token;
    tokens are not single-use.
    """

    def __init__(self, secret: bytes) -> None:
        if not secret:
            raise ValueError("TokenIssuer requires a non-empty secret.")
        self._secret = secret

    def issue(self, game_id: str, now_ms: Optional[int] = None) -> WinnerToken:
        if not game_id or SEPARATOR in game_id:
            raise ValueError(f"Invalid game id {game_id!r}: must be non-empty and contain no '{SEPARATOR}'.")
        issued_at = epoch_ms() if now_ms is None else int(now_ms)
        if issued_at < 0:
            raise ValueError("Issuance timestamp must be >= 0.")
        payload = f"{game_id}{SEPARATOR}{issued_at}"
        return WinnerToken(game_id=game_id, issued_at_ms=issued_at, signature=hmac_sha256_hex(self._secret, payload))
