"""Staff redemption: short-code minting and the no-secret decoder."""

from .decoder import CodeStatus, DecodeResult, StaffDecoder, decode_short_code, minutes_since_issue
from .short_code import mint_short_code

__all__ = [
    "CodeStatus",
    "DecodeResult",
    "StaffDecoder",
    "decode_short_code",
    "minutes_since_issue",
    "mint_short_code",
]
