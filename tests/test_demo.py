import asyncio

from arcade_guard.demo.run_demo import reflex_history, run_demo
from arcade_guard.policy.types import RejectReason
from arcade_guard.staff.decoder import CodeStatus


def test_demo_end_to_end():
    results = asyncio.run(run_demo())

    assert results["honest"].accepted is True
    assert results["scripted"].reason == RejectReason.INHUMAN_INTERVAL
    assert results["speedrun"].reason == RejectReason.IMPOSSIBLE_SPEED
    assert results["redemption"].status == CodeStatus.VALID
    assert results["late_redemption"].status == CodeStatus.EXPIRED
    assert results["token_check"].valid is True


def test_reflex_history_spacing():
    history = reflex_history(4, start_ms=0, gap_ms=100)
    assert history == [0, 100, 200, 300]
