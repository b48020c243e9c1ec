"""Interactive staff console: type a winner code, get a decision."""

from __future__ import annotations

import logging

from arcade_guard.config import GuardConfig
from arcade_guard.staff.decoder import StaffDecoder


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    decoder = StaffDecoder(GuardConfig.from_env())
    print("Enter winner codes (e.g. REFLEX-1430-OK). Ctrl-D to quit.")
    while True:
        try:
            code = input("> ")
        except EOFError:
            print()
            return
        if not code.strip():
            continue
        result = decoder.decode(code)
        print(f"{result.status.value}: {result.message}")


if __name__ == "__main__":
    main()
