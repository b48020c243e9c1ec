"""Utility helpers for hashing and time operations."""

from .hashing import hmac_sha256_hex, sha256_hex
from .time import epoch_ms, local_datetime, utc_now, utc_now_naive

__all__ = ["sha256_hex", "hmac_sha256_hex", "utc_now", "utc_now_naive", "epoch_ms", "local_datetime"]
