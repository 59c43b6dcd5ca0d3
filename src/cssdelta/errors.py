"""Error types raised by cssdelta."""

from __future__ import annotations


class CssDeltaError(Exception):
    """Base class for every error raised by cssdelta."""


class InvalidArgumentError(CssDeltaError, ValueError):
    """Raised when a required argument is missing, empty, or unusable."""

    def __init__(self, arg_name: str, message: str | None = None) -> None:
        self.arg_name = arg_name
        super().__init__(message or f"Argument {arg_name} cannot be null or empty")


class UsageError(CssDeltaError):
    """Raised when an entry point is called in a way it cannot serve."""
