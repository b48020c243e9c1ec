"""Plausibility checks, game registry and verification result types."""

from .checks import check_memory, check_reflex
from .registry import DEFAULT_REGISTRY, GameRegistry, game_profile
from .types import Accepted, CheckOutcome, GameProfile, Rejected, RejectReason, VerificationResult

__all__ = [
    "check_reflex",
    "check_memory",
    "DEFAULT_REGISTRY",
    "GameRegistry",
    "game_profile",
    "Accepted",
    "Rejected",
    "CheckOutcome",
    "GameProfile",
    "RejectReason",
    "VerificationResult",
]
