"""Base exporter interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..core.context import VerificationSpan


class Exporter(ABC):
    """Abstract base class for audit span exporters."""

    @abstractmethod
    async def export(self, span: VerificationSpan) -> None:
        """Export one completed span."""

    async def close(self) -> None:
        """Close exporter resources if needed."""
