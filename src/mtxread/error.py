"""
Error handling for mtxread.

Every failure while reading a MatrixMarket file raises a subclass of
MatrixMarketError. Each class carries a stable integer code so callers
(e.g. the CLI) can report failures without matching on message text.
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# Error Codes
# =============================================================================

MTX_OK = 0

# General errors (1-9)
MTX_ERROR_UNKNOWN = 1

# I/O errors (30-39)
MTX_ERROR_FILE_OPEN = 31

# Header errors (40-49)
MTX_ERROR_MALFORMED_HEADER = 40
MTX_ERROR_UNKNOWN_VALUE_FORMAT = 41
MTX_ERROR_UNKNOWN_SYMMETRY = 42

# Data line errors (50-59)
MTX_ERROR_MALFORMED_DATA_LINE = 50
MTX_ERROR_INVALID_NUMBER = 51
MTX_ERROR_UNEXPECTED_EOF = 52

# Range errors (60-69)
MTX_ERROR_OUT_OF_BOUNDS = 60
MTX_ERROR_OVERFLOW = 61


_ERROR_MESSAGES = {
    MTX_OK: "Success",
    MTX_ERROR_UNKNOWN: "Unknown error",
    MTX_ERROR_FILE_OPEN: "Could not open file for reading",
    MTX_ERROR_MALFORMED_HEADER: "Bad header",
    MTX_ERROR_UNKNOWN_VALUE_FORMAT: "Bad header: unknown value format",
    MTX_ERROR_UNKNOWN_SYMMETRY: "Bad header: unknown symmetry",
    MTX_ERROR_MALFORMED_DATA_LINE: "Bad matrix: ill-shaped data line",
    MTX_ERROR_INVALID_NUMBER: "Bad matrix: invalid numeric token",
    MTX_ERROR_UNEXPECTED_EOF: "Bad matrix: unexpected end of file",
    MTX_ERROR_OUT_OF_BOUNDS: "Bad matrix: coordinate out of bounds",
    MTX_ERROR_OVERFLOW: "Numeric overflow",
}


# =============================================================================
# Exception Classes
# =============================================================================

class MatrixMarketError(Exception):
    """
    Base exception for all mtxread errors.

    Attributes:
        code: Stable integer error code (one of the MTX_ERROR_* constants)
        message: Human readable description
        line: 1-based line number of the offending input line, if known
    """

    code = MTX_ERROR_UNKNOWN

    def __init__(self, message: Optional[str] = None, *, line: Optional[int] = None):
        if message is None:
            message = _ERROR_MESSAGES.get(self.code, f"Unknown error (code={self.code})")
        self.message = message
        self.line = line
        where = f" (line {line})" if line is not None else ""
        super().__init__(f"{message}{where}")

    @classmethod
    def from_code(cls, code: int, context: str = "") -> "MatrixMarketError":
        """Create the exception class registered for `code`."""
        klass = _ERROR_CLASSES.get(code, MatrixMarketError)
        base_msg = _ERROR_MESSAGES.get(code, "Unknown error")
        msg = f"{context}: {base_msg}" if context else base_msg
        return klass(msg)


class FileOpenError(MatrixMarketError):
    """The input path is missing or unreadable."""
    code = MTX_ERROR_FILE_OPEN


class MalformedHeader(MatrixMarketError):
    """Wrong token count or literal on the banner or size line."""
    code = MTX_ERROR_MALFORMED_HEADER


class UnknownValueFormat(MatrixMarketError):
    code = MTX_ERROR_UNKNOWN_VALUE_FORMAT


class UnknownSymmetry(MatrixMarketError):
    code = MTX_ERROR_UNKNOWN_SYMMETRY


class MalformedDataLine(MatrixMarketError):
    """Field count of a data line does not match the declared value format."""
    code = MTX_ERROR_MALFORMED_DATA_LINE


class InvalidNumber(MalformedDataLine):
    """A numeric field of a data line could not be parsed."""
    code = MTX_ERROR_INVALID_NUMBER


class UnexpectedEOF(MatrixMarketError):
    """Input ended before all declared data lines were read."""
    code = MTX_ERROR_UNEXPECTED_EOF


class OutOfBoundsCoordinate(MatrixMarketError):
    code = MTX_ERROR_OUT_OF_BOUNDS


class NumericOverflow(MatrixMarketError):
    """A count or value does not fit the requested numeric type."""
    code = MTX_ERROR_OVERFLOW


_ERROR_CLASSES = {
    klass.code: klass
    for klass in (
        FileOpenError,
        MalformedHeader,
        UnknownValueFormat,
        UnknownSymmetry,
        MalformedDataLine,
        InvalidNumber,
        UnexpectedEOF,
        OutOfBoundsCoordinate,
        NumericOverflow,
    )
}


def error_message(code: int) -> str:
    """Default message for an error code."""
    return _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")
