"""
PNG Codec Errors
================

Error taxonomy for PNG character card decoding and encoding.

Every failure carries a ``kind`` from the closed ``PngErrorKind`` enum so
callers can match on the failure kind without depending on the class
hierarchy. The concrete subclasses exist for ``except`` clauses.
"""

from enum import Enum


class PngErrorKind(Enum):
    """Failure kinds raised by the codec."""
    FORMAT = "format"
    DECODE = "decode"
    MISSING_CHARACTER = "missing_character"
    INVALID_CHARACTER = "invalid_character"


class PngError(Exception):
    """Base exception for all codec failures."""

    kind: PngErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class PngFormatError(PngError):
    """Input does not start with the PNG signature."""
    kind = PngErrorKind.FORMAT


class PngDecodeError(PngError):
    """Chunk stream is truncated, overruns the buffer, or fails its CRC."""
    kind = PngErrorKind.DECODE


class PngMissingCharacterError(PngError):
    """Well-formed PNG without a character chunk."""
    kind = PngErrorKind.MISSING_CHARACTER


class PngInvalidCharacterError(PngError):
    """Character chunk payload is not base64, not UTF-8, or not a valid document."""
    kind = PngErrorKind.INVALID_CHARACTER
