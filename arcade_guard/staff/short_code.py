"""Staff-facing short codes derived from a token's issuance time."""

from __future__ import annotations

import re
from datetime import tzinfo
from typing import Optional

from ..utils.time import local_datetime

CODE_SUFFIX = "OK"
CODE_RE = re.compile(r"([A-Z]+)-([0-9]{4})-" + CODE_SUFFIX)


def mint_short_code(prefix: str, issued_at_ms: int, tz: Optional[tzinfo] = None) -> str:
    """Render ``PREFIX-HHMM-OK`` using the wall-clock hour and minute of issuance.

    The code is not bound to the token's signature; it only encodes time.
    """
    if not re.fullmatch(r"[A-Z]+", prefix):
        raise ValueError(f"Invalid code prefix {prefix!r}: must be upper-case letters.")
    issued = local_datetime(issued_at_ms, tz)
    return f"{prefix}-{issued.hour:02d}{issued.minute:02d}-{CODE_SUFFIX}"
