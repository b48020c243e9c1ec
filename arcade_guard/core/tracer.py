"""Tracer creating and finalizing verification spans."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator, Optional

from .context import VerificationSpan


class Tracer:
    """Simple tracer that creates and finalizes :class:`VerificationSpan` records."""

    def __init__(self, service: str) -> None:
        self.service = service

    def start_span(self, *, operation: str, game_id: Optional[str] = None) -> VerificationSpan:
        return VerificationSpan(service=self.service, operation=operation, game_id=game_id)

    def end_span(self, span: VerificationSpan) -> VerificationSpan:
        """Mark a span as finished."""
        span.finish()
        return span

    @contextmanager
    def span(self, *, operation: str, game_id: Optional[str] = None) -> Generator[VerificationSpan, None, None]:
        """Context-manager helper for creating spans around operations."""
        span = self.start_span(operation=operation, game_id=game_id)
        try:
            yield span
        finally:
            self.end_span(span)
