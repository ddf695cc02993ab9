"""Error taxonomy of the core.

Every failure is local to one call: nothing is retried and the caller can
recover by clearing its output.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Machine readable category attached to every `ToolboxError`."""

    VALIDATION = "validation"
    DECODE = "decode"


class ToolboxError(Exception):
    """Base class for errors raised by the core tools."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ToolboxError, ValueError):
    """A numeric input violates a precondition (e.g. it is negative)."""

    kind = ErrorKind.VALIDATION


class DecodeError(ToolboxError, ValueError):
    """The input is not a strictly valid standard Base64 string."""

    kind = ErrorKind.DECODE
