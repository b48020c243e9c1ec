"""Run an end-to-end kiosk demo: plays, a cheat attempt and staff redemption."""

from __future__ import annotations

import asyncio
import logging
from datetime import timedelta
from typing import List, Optional

from arcade_guard.config import GuardConfig
from arcade_guard.exporters.memory import InMemoryExporter
from arcade_guard.policy.types import Accepted
from arcade_guard.service import WinVerificationService
from arcade_guard.utils.time import local_datetime


def reflex_history(hits: int, *, start_ms: int = 1_000, gap_ms: int = 320) -> List[int]:
    """Evenly spaced hit timestamps, the shape a real reflex round produces."""
    return [start_ms + i * gap_ms for i in range(hits)]


async def run_demo(service: Optional[WinVerificationService] = None) -> dict:
    own_service = service is None
    service = service or WinVerificationService(GuardConfig(), exporter=InMemoryExporter())
    try:
        honest = await service.verify_game("quantum-reflex", {"score": 25, "history": reflex_history(25)})
        scripted = await service.verify_game("quantum-reflex", {"score": 25, "history": reflex_history(25, gap_ms=20)})
        speedrun = await service.verify_game("memo-matrix", {"level": 10, "timeElapsed": 9_000})

        redemption = None
        late_redemption = None
        token_check = None
        if isinstance(honest, Accepted):
            issued = local_datetime(honest.token.issued_at_ms, service.config.display_tz)
            redemption = await service.redeem_code(honest.short_code, issued + timedelta(minutes=3))
            late_redemption = await service.redeem_code(honest.short_code, issued + timedelta(minutes=27))
            token_check = await service.verify_token(str(honest.token), honest.token.issued_at_ms + 60_000)

        return {
            "honest": honest,
            "scripted": scripted,
            "speedrun": speedrun,
            "redemption": redemption,
            "late_redemption": late_redemption,
            "token_check": token_check,
        }
    finally:
        if own_service:
            await service.close()


async def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    results = await run_demo()
    for name, result in results.items():
        print(f"{name.upper()}:", result)


if __name__ == "__main__":
    asyncio.run(main())
