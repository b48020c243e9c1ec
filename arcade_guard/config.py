"""Runtime configuration for plausibility thresholds, signing and code windows."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import tzinfo
from typing import Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEV_SIGNING_SECRET = b"dev_secret_key_123"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class GuardConfig:
    """Single source of truth for every policy constant.

    ``code_min_delta``/``code_max_delta`` bound the redemption window in
    minutes relative to issuance: the negative side absorbs clock drift
    between devices, the positive side is the expiry.
    """

    signing_secret: bytes = DEV_SIGNING_SECRET
    win_score: int = 25
    enforce_win_score: bool = True
    min_human_interval_ms: int = 50
    win_level: int = 10
    min_elapsed_ms: int = 15_000
    code_min_delta: int = -5
    code_max_delta: int = 15
    allow_unchecked_games: bool = True
    simulated_latency_ms: int = 0
    display_tz: Optional[tzinfo] = None

    def __post_init__(self) -> None:
        if not self.signing_secret:
            raise ConfigError("signing_secret must not be empty.")
        if self.code_min_delta > self.code_max_delta:
            raise ConfigError(
                f"Invalid code window: min delta {self.code_min_delta} exceeds max delta {self.code_max_delta}."
            )
        if self.simulated_latency_ms < 0:
            raise ConfigError("simulated_latency_ms must be >= 0.")

    @property
    def uses_dev_secret(self) -> bool:
        return self.signing_secret == DEV_SIGNING_SECRET

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GuardConfig":
        """Build a config from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()

        secret = env.get("SIGNING_SECRET")
        config = cls(
            signing_secret=secret.encode("utf-8") if secret else DEV_SIGNING_SECRET,
            win_score=_int(env, "WIN_SCORE", defaults.win_score),
            enforce_win_score=_bool(env, "ENFORCE_WIN_SCORE", defaults.enforce_win_score),
            min_human_interval_ms=_int(env, "MIN_HUMAN_INTERVAL_MS", defaults.min_human_interval_ms),
            win_level=_int(env, "WIN_LEVEL", defaults.win_level),
            min_elapsed_ms=_int(env, "MIN_ELAPSED_MS", defaults.min_elapsed_ms),
            code_min_delta=_int(env, "CODE_MIN_DELTA_MINUTES", defaults.code_min_delta),
            code_max_delta=_int(env, "CODE_MAX_DELTA_MINUTES", defaults.code_max_delta),
            allow_unchecked_games=_bool(env, "ALLOW_UNCHECKED_GAMES", defaults.allow_unchecked_games),
            simulated_latency_ms=_int(env, "SIMULATED_LATENCY_MS", defaults.simulated_latency_ms),
            display_tz=_zone(env, "DISPLAY_TZ"),
        )
        if config.uses_dev_secret:
            logger.warning("SIGNING_SECRET is not set; using the development secret. Override it in production.")
        return config


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} is not an integer: {raw!r}") from e


def _bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{name} is not a boolean: {raw!r}")


def _zone(env: Mapping[str, str], name: str) -> Optional[tzinfo]:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return ZoneInfo(raw.strip())
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigError(f"{name} is not a known time zone: {raw!r}") from e
