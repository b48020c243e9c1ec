"""Hashing helpers."""

from __future__ import annotations

import hashlib
import hmac


def sha256_hex(value: str) -> str:
    """Return SHA-256 hex digest for the provided string value."""
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def hmac_sha256_hex(secret: bytes, message: str) -> str:
    """Return lower-case hex HMAC-SHA256 of ``message`` keyed by ``secret``."""
    return hmac.new(secret, message.encode("utf-8"), hashlib.sha256).hexdigest()
