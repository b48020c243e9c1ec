"""Async entry point used by the game transport and the staff console."""

from __future__ import annotations

import asyncio
import logging
import os
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from .config import GuardConfig
from .core.context import VerificationSpan
from .core.tracer import Tracer
from .errors import TelemetryError
from .exporters.base import Exporter
from .exporters.memory import InMemoryExporter
from .policy.registry import DEFAULT_REGISTRY, GameRegistry
from .policy.types import Accepted, Rejected, RejectReason, VerificationResult
from .staff.decoder import DecodeResult, decode_short_code
from .staff.short_code import mint_short_code
from .telemetry.types import parse_telemetry
from .token.issuer import TokenIssuer
from .token.types import TokenCheck
from .token.verifier import TokenVerifier
from .utils.hashing import sha256_hex
from .utils.time import epoch_ms, local_datetime

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


class WinVerificationService:
    """Checks win claims, issues tokens and validates redemptions.

    Holds no per-token state: every call depends only on its arguments, the
    configuration and the clock.
    """

    def __init__(
        self,
        config: Optional[GuardConfig] = None,
        *,
        registry: Optional[GameRegistry] = None,
        exporter: Optional[Exporter] = None,
        clock: Optional[Clock] = None,
        service_name: str = "arcade-guard",
    ) -> None:
        self.config = config or GuardConfig()
        self.registry = registry or DEFAULT_REGISTRY
        self.exporter = exporter
        self.clock: Clock = clock or epoch_ms
        self.tracer = Tracer(service=service_name)
        self.issuer = TokenIssuer(self.config.signing_secret)
        self.verifier = TokenVerifier(
            self.config.signing_secret,
            min_delta_minutes=self.config.code_min_delta,
            max_delta_minutes=self.config.code_max_delta,
        )

    async def close(self) -> None:
        if self.exporter is not None:
            await self.exporter.close()

    async def verify_game(self, game_id: str, data: Mapping[str, Any]) -> VerificationResult:
        """Check a game's telemetry and, if plausible, issue a winner token."""
        if self.config.simulated_latency_ms:
            await asyncio.sleep(self.config.simulated_latency_ms / 1000)

        with self.tracer.span(operation="verify_game", game_id=game_id) as span:
            result = self._verify_game(game_id, data)
            span.outcome = "accepted" if result.accepted else "rejected"
            if isinstance(result, Accepted):
                span.token_hash = sha256_hex(str(result.token))
                logger.info("Accepted %s win, token %s", game_id, span.token_hash[:12])
            else:
                span.reason = result.reason.value
                logger.info("Rejected %s win: %s", game_id, result.reason.value)
        await self._export(span)
        return result

    def _verify_game(self, game_id: str, data: Mapping[str, Any]) -> VerificationResult:
        profile = self.registry.find(game_id)
        if profile is None:
            return Rejected(RejectReason.UNKNOWN_GAME, f"Unknown game '{game_id}'")

        if profile.checker is None or profile.telemetry_kind is None:
            if not self.config.allow_unchecked_games:
                return Rejected(RejectReason.UNCHECKED_GAME, f"Game '{game_id}' has no plausibility check")
        else:
            try:
                telemetry = parse_telemetry(profile.telemetry_kind, data)
            except TelemetryError as e:
                return Rejected(RejectReason.MALFORMED_TELEMETRY, str(e))
            outcome = profile.checker(telemetry, self.config)
            if not outcome.ok:
                assert outcome.reason is not None
                return Rejected(outcome.reason, outcome.message)

        token = self.issuer.issue(profile.game_id, self.clock())
        short_code = mint_short_code(profile.code_prefix, token.issued_at_ms, self.config.display_tz)
        return Accepted(token=token, short_code=short_code)

    async def redeem_code(self, code: str, now: Optional[datetime] = None) -> DecodeResult:
        """Staff path: decode a short code against the local clock."""
        current = now if now is not None else local_datetime(self.clock(), self.config.display_tz)
        with self.tracer.span(operation="redeem_code") as span:
            result = decode_short_code(code, current, config=self.config)
            span.game_id = result.game_prefix
            span.outcome = result.status.value
            span.delta_minutes = result.delta_minutes
            logger.info("Redeem code: %s (delta=%s)", result.status.value, result.delta_minutes)
        await self._export(span)
        return result

    async def verify_token(self, token: str, now_ms: Optional[int] = None) -> TokenCheck:
        """Authoritative path: signature plus issuance-age window."""
        with self.tracer.span(operation="verify_token") as span:
            check = self.verifier.check(token, self.clock() if now_ms is None else now_ms)
            span.game_id = check.token.game_id if check.token else None
            span.outcome = "valid" if check.valid else "invalid"
            span.reason = None if check.valid else check.reason
            span.delta_minutes = check.age_minutes
            span.token_hash = sha256_hex(token) if isinstance(token, str) else None
            if not check.valid:
                logger.info("Token rejected: %s", check.reason)
        await self._export(span)
        return check

    async def _export(self, span: VerificationSpan) -> None:
        if self.exporter is None:
            return
        try:
            await self.exporter.export(span)
        except Exception:
            logger.exception("Failed to export %s span %s", span.operation, span.span_id)
            raise


def create_service_from_env() -> WinVerificationService:
    """Create a service with Postgres audit export if configured, otherwise in-memory."""
    config = GuardConfig.from_env()
    dsn = os.getenv("ARCADE_GUARD_PG_DSN") or os.getenv("DATABASE_URL")
    exporter: Exporter
    if dsn:
        from .exporters.postgres import PostgresExporter

        exporter = PostgresExporter(dsn=dsn)
    else:
        exporter = InMemoryExporter()
    return WinVerificationService(config, exporter=exporter)
