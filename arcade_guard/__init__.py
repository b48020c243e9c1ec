"""arcade_guard package.

Integrity layer for browser mini-game rewards: plausibility checks on play
telemetry, HMAC-signed winner tokens and a stateless staff decoder for the
short codes players show at the counter.
"""

from .config import GuardConfig
from .policy.types import Accepted, Rejected, RejectReason
from .service import WinVerificationService, create_service_from_env
from .staff.decoder import CodeStatus, decode_short_code
from .token import TokenIssuer, TokenVerifier, WinnerToken, verify_token

__all__ = [
    "GuardConfig",
    "Accepted",
    "Rejected",
    "RejectReason",
    "WinVerificationService",
    "create_service_from_env",
    "CodeStatus",
    "decode_short_code",
    "TokenIssuer",
    "TokenVerifier",
    "WinnerToken",
    "verify_token",
]
