"""Time helpers."""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Optional


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def utc_now_naive() -> datetime:
    """Return naive UTC now for Postgres timestamp compatibility."""
    return utc_now().replace(tzinfo=None)


def epoch_ms(moment: Optional[datetime] = None) -> int:
    """Return milliseconds since the Unix epoch for ``moment`` (default: now)."""
    return int((moment or utc_now()).timestamp() * 1000)


def local_datetime(ms: int, tz: Optional[tzinfo] = None) -> datetime:
    """Convert epoch milliseconds to a wall-clock datetime.

    With ``tz=None`` the host's local zone is used, which is what a player's
    and a staff member's devices both see.
    """
    if tz is None:
        return datetime.fromtimestamp(ms / 1000).astimezone()
    return datetime.fromtimestamp(ms / 1000, tz)
