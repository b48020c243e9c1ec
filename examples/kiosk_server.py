"""Example kiosk backend: verifies a memory-game claim with audit export from env."""

from __future__ import annotations

import asyncio
import logging

from arcade_guard import Accepted, create_service_from_env


async def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    service = create_service_from_env()
    try:
        result = await service.verify_game("memo-matrix", {"level": 10, "timeElapsed": 48_500})
        if isinstance(result, Accepted):
            print("WINNER! Show this code to the barista:", result.short_code)
            print("Token:", result.token)
        else:
            print("Verification failed:", result.reason.value, "-", result.message)
    finally:
        await service.close()


if __name__ == "__main__":
    asyncio.run(main())
