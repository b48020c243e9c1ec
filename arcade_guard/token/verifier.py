"""Authoritative winner token verification."""

from __future__ import annotations

import hmac
from typing import Optional

from ..config import GuardConfig
from ..errors import TokenFormatError
from ..policy.types import RejectReason
from ..utils.hashing import hmac_sha256_hex
from ..utils.time import epoch_ms
from .types import SEPARATOR, TokenCheck, WinnerToken

_MINUTE_MS = 60_000


class TokenVerifier:
    """Recompute the HMAC over a presented token and compare in constant time.

    This is the only place unforgeability is enforced. The staff short-code
    decoder never sees the secret and only checks timestamp plausibility.
    """

    def __init__(
        self,
        secret: bytes,
        *,
        min_delta_minutes: int = GuardConfig.code_min_delta,
        max_delta_minutes: int = GuardConfig.code_max_delta,
    ) -> None:
        if not secret:
            raise ValueError("TokenVerifier requires a non-empty secret.")
        self._secret = secret
        self.min_delta_minutes = min_delta_minutes
        self.max_delta_minutes = max_delta_minutes

    def verify(self, token: str) -> bool:
        """Return True only if the signature matches the first two fields."""
        fields = token.split(SEPARATOR) if isinstance(token, str) else []
        if len(fields) != 3:
            return False
        expected = hmac_sha256_hex(self._secret, f"{fields[0]}{SEPARATOR}{fields[1]}")
        return hmac.compare_digest(expected.encode("utf-8"), fields[2].encode("utf-8"))

    def check(self, token: str, now_ms: Optional[int] = None) -> TokenCheck:
        """Verify signature, then the issuance age against the redemption window."""
        try:
            parsed = WinnerToken.parse(token)
        except TokenFormatError:
            return TokenCheck(False, RejectReason.MALFORMED.value)

        if not self.verify(token):
            return TokenCheck(False, RejectReason.SIGNATURE_INVALID.value, token=parsed)

        now = epoch_ms() if now_ms is None else now_ms
        age_ms = now - parsed.issued_at_ms
        # Window bounds are whole elapsed minutes.
        age_minutes = age_ms // _MINUTE_MS
        if age_minutes < self.min_delta_minutes:
            return TokenCheck(False, RejectReason.FUTURE_CODE.value, token=parsed, age_minutes=age_minutes)
        if age_minutes > self.max_delta_minutes:
            return TokenCheck(False, RejectReason.EXPIRED.value, token=parsed, age_minutes=age_minutes)

        return TokenCheck(True, "ok", token=parsed, age_minutes=age_minutes)


def verify_token(token: str, secret: bytes) -> bool:
    """Functional form of :meth:`TokenVerifier.verify`."""
    return TokenVerifier(secret).verify(token)
