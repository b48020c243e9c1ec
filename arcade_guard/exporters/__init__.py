"""Audit exporter implementations."""

from .base import Exporter
from .memory import InMemoryExporter

__all__ = ["Exporter", "InMemoryExporter", "PostgresExporter"]


def __getattr__(name: str):
    if name == "PostgresExporter":
        from .postgres import PostgresExporter

        return PostgresExporter
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
