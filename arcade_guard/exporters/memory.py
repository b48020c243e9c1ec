"""In-memory exporter for tests and the demo kiosk."""

from __future__ import annotations

from typing import List

from ..core.context import VerificationSpan
from .base import Exporter


class InMemoryExporter(Exporter):
    """Keeps exported spans in a list. Nothing reads them back during verification."""

    def __init__(self) -> None:
        self.spans: List[VerificationSpan] = []

    async def export(self, span: VerificationSpan) -> None:
        self.spans.append(span)
