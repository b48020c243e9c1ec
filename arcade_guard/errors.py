"""Exception hierarchy.

Verification outcomes are returned as values; these are raised only for
configuration and programming errors.
"""

from __future__ import annotations


class ArcadeGuardError(Exception):
    """Base class for arcade_guard errors."""


class ConfigError(ArcadeGuardError):
    """Raised when configuration values are missing or invalid."""


class TelemetryError(ArcadeGuardError):
    """Raised when a telemetry payload does not match its game's contract."""


class TokenFormatError(ArcadeGuardError):
    """Raised when a winner token string cannot be split into its fields."""
