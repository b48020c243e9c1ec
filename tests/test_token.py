from datetime import datetime, timedelta, timezone

import pytest

from arcade_guard.config import GuardConfig
from arcade_guard.errors import TokenFormatError
from arcade_guard.policy.types import RejectReason
from arcade_guard.staff import decode_short_code, mint_short_code
from arcade_guard.token import TokenIssuer, TokenVerifier, WinnerToken, verify_token

SECRET = b"unit-secret"
T = 1_760_000_000_000


def test_issue_is_deterministic() -> None:
    a = TokenIssuer(SECRET).issue("quantum-reflex", T)
    b = TokenIssuer(SECRET).issue("quantum-reflex", T)
    assert a == b
    assert str(a) == str(b)
    assert str(a).startswith(f"quantum-reflex:{T}:")
    assert len(a.signature) == 64


def test_changing_any_input_changes_signature() -> None:
    base = TokenIssuer(SECRET).issue("quantum-reflex", T).signature
    assert TokenIssuer(b"other-secret").issue("quantum-reflex", T).signature != base
    assert TokenIssuer(SECRET).issue("memo-matrix", T).signature != base
    assert TokenIssuer(SECRET).issue("quantum-reflex", T + 1).signature != base


def test_issue_rejects_game_id_with_separator() -> None:
    with pytest.raises(ValueError):
        TokenIssuer(SECRET).issue("quantum:reflex", T)
    with pytest.raises(ValueError):
        TokenIssuer(SECRET).issue("", T)


def test_verify_accepts_issued_and_rejects_tampering() -> None:
    token = str(TokenIssuer(SECRET).issue("memo-matrix", T))
    assert verify_token(token, SECRET) is True
    assert verify_token(token, b"wrong") is False

    game_id, issued, sig = token.split(":")
    assert verify_token(f"quantum-reflex:{issued}:{sig}", SECRET) is False
    assert verify_token(f"{game_id}:{int(issued) + 60_000}:{sig}", SECRET) is False
    assert verify_token(f"{game_id}:{issued}:{sig.upper()}", SECRET) is False


def test_verify_rejects_wrong_arity() -> None:
    verifier = TokenVerifier(SECRET)
    assert verifier.verify("memo-matrix:123") is False
    assert verifier.verify("a:b:c:d") is False
    assert verifier.verify("") is False
    assert verifier.check("memo-matrix:123").reason == RejectReason.MALFORMED.value


def test_check_window_bounds() -> None:
    verifier = TokenVerifier(SECRET)
    token = str(TokenIssuer(SECRET).issue("quantum-reflex", T))

    ok = verifier.check(token, T + 14 * 60_000)
    assert ok.valid is True
    assert ok.age_minutes == 14
    assert ok.token == WinnerToken.parse(token)

    assert verifier.check(token, T + 16 * 60_000).reason == RejectReason.EXPIRED.value
    assert verifier.check(token, T - 6 * 60_000).reason == RejectReason.FUTURE_CODE.value
    assert verifier.check(token, T - 4 * 60_000).valid is True


def test_check_reports_signature_before_age() -> None:
    forged = f"quantum-reflex:{T}:{'0' * 64}"
    check = TokenVerifier(SECRET).check(forged, T)
    assert check.valid is False
    assert check.reject_reason == RejectReason.SIGNATURE_INVALID


def test_parse_rejects_non_numeric_timestamp() -> None:
    with pytest.raises(TokenFormatError):
        WinnerToken.parse("memo-matrix:-12:abc")
    with pytest.raises(TokenFormatError):
        WinnerToken.parse("memo-matrix:soon:abc")


def test_check_agrees_with_staff_code_at_partial_minutes() -> None:
    issued = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)
    issued_ms = int(issued.timestamp() * 1000)
    token = str(TokenIssuer(SECRET).issue("quantum-reflex", issued_ms))
    code = mint_short_code("REFLEX", issued_ms, timezone.utc)
    verifier = TokenVerifier(SECRET)

    for offset in (timedelta(minutes=15, seconds=30), timedelta(minutes=16, seconds=10), timedelta(minutes=-5, seconds=-20)):
        now = issued + offset
        token_check = verifier.check(token, int(now.timestamp() * 1000))
        code_check = decode_short_code(code, now)
        assert token_check.age_minutes == code_check.delta_minutes
        assert token_check.valid is code_check.valid

    late = verifier.check(token, issued_ms + 15 * 60_000 + 30_000)
    assert late.valid is True
    assert late.age_minutes == 15


def test_verifier_window_defaults_come_from_config() -> None:
    verifier = TokenVerifier(SECRET)
    assert verifier.min_delta_minutes == GuardConfig().code_min_delta
    assert verifier.max_delta_minutes == GuardConfig().code_max_delta
