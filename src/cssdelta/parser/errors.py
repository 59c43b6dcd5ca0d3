"""Errors raised by the CSS front-ends."""

from __future__ import annotations

from cssdelta.errors import CssDeltaError


class ParseError(CssDeltaError):
    """CSS source the front-end could not read.

    ``line`` and ``column`` are 1-based and point at the offending token when
    the front-end knows it.  ``str()`` leads with ``line:column:`` so CLI
    errors can be traced back to the source.
    """

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if not self.line:
            return self.message
        if not self.column:
            return f"{self.line}: {self.message}"
        return f"{self.line}:{self.column}: {self.message}"
