# qif_stream/errors.py
"""
Exceptions raised by the QIF reader and codec.

All of them derive from ``ValueError`` so callers that already guard parsing
with ``except ValueError`` keep working.
"""

from __future__ import annotations

from typing import Sequence


class QifError(ValueError):
    """Base class for every QIF format error."""


class UnrecognizedDataError(QifError):
    """The input does not start with a ``!`` header line."""


class UnknownAccountTypeError(QifError):
    """The header names an account type outside the supported set."""

    def __init__(self, header: str, supported: Sequence[str]):
        self.header = header
        self.supported = tuple(supported)
        super().__init__(
            f"Unknown account type {header!r}. Should be one of: {list(self.supported)}"
        )


class MalformedRecordError(QifError):
    """A record block could not be normalized or decoded."""

    def __init__(self, message: str, lines: Sequence[str] = ()):
        self.lines = list(lines)
        super().__init__(message)
