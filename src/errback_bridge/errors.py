"""Exception hierarchy for errback-bridge.

These cover call-time misuse only. Producer and errback failures are never
wrapped: they travel through the bridge unchanged.
"""

from __future__ import annotations


class BridgeError(Exception):
    """Base exception for all errback-bridge errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(BridgeError):
    """Configuration validation failed."""


class InvalidErrbackError(BridgeError, TypeError):
    """The errback handed to the bridge is not callable."""


class NoRunningLoopError(BridgeError, RuntimeError):
    """The bridge was called outside of a running event loop."""
