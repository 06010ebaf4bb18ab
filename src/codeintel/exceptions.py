"""Exceptions raised by codeintel."""

from __future__ import annotations

from typing import Optional


class CodeIntelError(Exception):
    """Base class for codeintel errors."""


class InvalidArgument(CodeIntelError, ValueError):
    """An argument is outside the range an operation accepts."""


class MalformedInput(CodeIntelError, ValueError):
    """
    A commit log line cannot be decomposed into edges.

    Attributes:
        line_number: 1-based index of the offending line (None if unknown)
        line: The raw line text
    """

    def __init__(
        self, message: str, line_number: Optional[int] = None, line: str = ""
    ) -> None:
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


__all__ = ["CodeIntelError", "InvalidArgument", "MalformedInput"]
