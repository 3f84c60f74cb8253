"""Custom exception hierarchy for jpqlkit.

All public errors inherit from JpqlKitError so callers can catch the base
class for any jpqlkit-specific failure.  Errors raised by an execution
handle while compiling or binding a query are not wrapped; they reach the
caller unchanged.
"""
from __future__ import annotations


class JpqlKitError(Exception):
    """Base exception for all jpqlkit errors."""


class InvalidArgumentError(JpqlKitError, ValueError):
    """Raised when a builder operation receives an unusable argument.

    Args:
        message: Human-readable description.
        argument: Name of the offending argument, when known.
    """

    def __init__(self, message: str, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument
