"""Audit tracing primitives."""

from .context import VerificationSpan
from .tracer import Tracer

__all__ = ["VerificationSpan", "Tracer"]
