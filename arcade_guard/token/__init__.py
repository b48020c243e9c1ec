"""Winner token issuance and verification."""

from .issuer import TokenIssuer
from .types import TokenCheck, WinnerToken
from .verifier import TokenVerifier, verify_token

__all__ = ["TokenIssuer", "TokenVerifier", "verify_token", "WinnerToken", "TokenCheck"]
