"""PostgreSQL exporter for verification audit spans."""

from __future__ import annotations

from typing import Optional

import asyncpg

from ..core.context import VerificationSpan
from .base import Exporter


INSERT_SQL = """
INSERT INTO win_verifications (
    span_id,
    service,
    operation,
    game_id,
    start_time,
    end_time,
    outcome,
    reason,
    delta_minutes,
    token_hash
)
VALUES (
    $1::uuid, $2, $3, $4, $5, $6, $7, $8, $9, $10
)
"""


class PostgresExporter(Exporter):
    """Exporter that persists spans into PostgreSQL using ``asyncpg``."""

    def __init__(
        self,
        dsn: Optional[str] = None,
        *,
        pool: Optional[asyncpg.Pool] = None,
        min_size: int = 1,
        max_size: int = 10,
    ) -> None:
        self._dsn = dsn
        self._pool = pool
        self._min_size = min_size
        self._max_size = max_size

    async def connect(self) -> None:
        """Initialize a connection pool if one was not supplied."""
        if self._pool is not None:
            return
        if not self._dsn:
            raise ValueError("Either `dsn` or `pool` must be provided for PostgresExporter.")

        self._pool = await asyncpg.create_pool(
            dsn=self._dsn,
            min_size=self._min_size,
            max_size=self._max_size,
        )

    async def export(self, span: VerificationSpan) -> None:
        """Insert a finished span into PostgreSQL."""
        if self._pool is None:
            await self.connect()

        assert self._pool is not None
        payload = span.to_dict()

        async with self._pool.acquire() as conn:
            await conn.execute(
                INSERT_SQL,
                payload["span_id"],
                payload["service"],
                payload["operation"],
                payload["game_id"],
                payload["start_time"],
                payload["end_time"],
                payload["outcome"],
                payload["reason"],
                payload["delta_minutes"],
                payload["token_hash"],
            )

    async def close(self) -> None:
        """Close the underlying pool if it exists."""
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
