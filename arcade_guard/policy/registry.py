"""Registry of games and their plausibility checks."""

from __future__ import annotations

import re
from typing import Dict, Optional, Union

from ..telemetry.types import TelemetryKind
from .checks import check_memory, check_reflex
from .types import Checker, GameProfile

_PREFIX_RE = re.compile(r"[A-Z]+")

_KIND_CHECKERS: Dict[TelemetryKind, Checker] = {
    TelemetryKind.REFLEX: check_reflex,
    TelemetryKind.MEMORY: check_memory,
}


def _to_kind(value: Union[str, TelemetryKind, None]) -> Optional[TelemetryKind]:
    if value is None or isinstance(value, TelemetryKind):
        return value
    try:
        return TelemetryKind[value.upper()]
    except KeyError as e:
        raise ValueError(f"Unknown telemetry kind {value!r}.") from e


class GameRegistry:
    """In-memory registry for game profiles."""

    def __init__(self) -> None:
        self._profiles: Dict[str, GameProfile] = {}

    def register(self, profile: GameProfile) -> None:
        if ":" in profile.game_id or not profile.game_id:
            raise ValueError(f"Invalid game id {profile.game_id!r}: must be non-empty and contain no ':'.")
        if not _PREFIX_RE.fullmatch(profile.code_prefix):
            raise ValueError(f"Invalid code prefix {profile.code_prefix!r}: must be upper-case letters.")
        self._profiles[profile.game_id] = profile

    def get(self, game_id: str) -> GameProfile:
        return self._profiles[game_id]

    def find(self, game_id: str) -> Optional[GameProfile]:
        return self._profiles.get(game_id)

    def all(self) -> Dict[str, GameProfile]:
        return dict(self._profiles)


def game_profile(
    game_id: str,
    code_prefix: str,
    *,
    telemetry_kind: Union[str, TelemetryKind, None] = None,
    registry: Optional[GameRegistry] = None,
) -> GameProfile:
    """Build and register a profile, wiring the checker for its telemetry kind."""
    kind = _to_kind(telemetry_kind)
    profile = GameProfile(
        game_id=game_id,
        code_prefix=code_prefix,
        telemetry_kind=kind,
        checker=_KIND_CHECKERS[kind] if kind else None,
    )
    (registry or DEFAULT_REGISTRY).register(profile)
    return profile


DEFAULT_REGISTRY = GameRegistry()

game_profile("quantum-reflex", "REFLEX", telemetry_kind=TelemetryKind.REFLEX)
game_profile("memo-matrix", "MEMO", telemetry_kind=TelemetryKind.MEMORY)
game_profile("precision-tower", "TOWER")
game_profile("void-runner", "RUNNER")
