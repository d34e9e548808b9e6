"""Typed exception hierarchy for lk-metrics.

Hierarchy
---------
LKMetricsError (base)
├── ConfigError            – invalid complexity-weight configuration
├── DiscoveryError         – analysis root missing or not a directory
├── InitializationError    – grammar / parser startup errors
└── ParsingError           – source file could not be read or parsed

The metrics engine itself never raises: every declaration, however
degenerate, maps to a zeroed metrics record. These exceptions belong to the
surrounding collaborators (configuration, discovery, front-end).
"""

from typing import Any


class LKMetricsError(Exception):
    """Base exception for lk-metrics."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


# ── Configuration layer ─────────────────────────────────────────────────


class ConfigError(LKMetricsError):
    """Configuration / validation errors."""

    pass


# ── Discovery layer ─────────────────────────────────────────────────────


class DiscoveryError(LKMetricsError):
    """Analysis root could not be traversed."""

    pass


# ── Front-end layer ─────────────────────────────────────────────────────


class InitializationError(LKMetricsError):
    """Parser / grammar startup errors."""

    pass


class ParsingError(LKMetricsError):
    """Source file could not be read or parsed."""

    pass
