"""
luatok Error Hierarchy
======================

Rejected lexemes are described by ``ScanError`` records. The scanner
returns them from its sub-scanners, logs them, and keeps going. The
exception classes below are only raised when the caller opts in with
``ScannerOptions(strict=True)`` or ``max_errors``.

Exception Hierarchy
-------------------
LuaTokError (base)
├── LexicalError - a rejected lexeme (strict mode)
│   ├── UnexpectedCharacterError - character matches no scan rule
│   ├── InvalidDotSequenceError - exactly two dots
│   └── InvalidNumericLiteralError - more than one decimal point
└── TooManyErrorsError - max_errors reached

Message Format
--------------
Every diagnostic renders as:

    Error on line <N>: <description>
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


# =============================================================================
# Diagnostic Records
# =============================================================================

class ErrorKind(Enum):
    """Why a lexeme was rejected. Values are the human-readable descriptions."""

    UNEXPECTED_CHARACTER = "Unexpected character"
    INVALID_DOT_SEQUENCE = "Invalid dot sequence"
    INVALID_NUMERIC_LITERAL = "Invalid numeric literal"


@dataclass(frozen=True)
class ScanError:
    """
    A rejected lexeme.

    Attributes:
        kind: The ErrorKind classification
        text: The offending lexeme (possibly partial)
        line: Line where the lexeme started (1-indexed)
    """
    kind: ErrorKind
    text: str
    line: int

    @property
    def description(self) -> str:
        if self.kind is ErrorKind.UNEXPECTED_CHARACTER and self.text:
            return f"{self.kind.value} {self.text!r} (0x{ord(self.text[0]):02X})"
        return f"{self.kind.value} {self.text!r}"

    def __str__(self) -> str:
        return f"Error on line {self.line}: {self.description}"


# =============================================================================
# Exceptions
# =============================================================================

class LuaTokError(Exception):
    """
    Base exception for all luatok errors.

    Catch this to handle anything the package raises:

        try:
            tokens = tokenize(source, ScannerOptions(strict=True))
        except LuaTokError as e:
            print(e)
    """
    pass


class LexicalError(LuaTokError):
    """
    A rejected lexeme, raised in strict mode.

    Attributes:
        error: The ScanError record behind this exception
    """

    def __init__(self, error: ScanError):
        self.error = error
        super().__init__(str(error))

    @property
    def line(self) -> int:
        return self.error.line


class UnexpectedCharacterError(LexicalError):
    """A character that starts no token (e.g. '@', '!', non-ASCII)."""
    pass


class InvalidDotSequenceError(LexicalError):
    """Two dots not followed by a third."""
    pass


class InvalidNumericLiteralError(LexicalError):
    """A numeric literal with a second decimal point, e.g. 1.2.3"""
    pass


class TooManyErrorsError(LuaTokError):
    """Raised when the number of diagnostics reaches ``max_errors``."""

    def __init__(self, count: int, report: str):
        self.count = count
        super().__init__(f"{report}\nstopping after {count} errors")


_EXCEPTION_FOR_KIND = {
    ErrorKind.UNEXPECTED_CHARACTER: UnexpectedCharacterError,
    ErrorKind.INVALID_DOT_SEQUENCE: InvalidDotSequenceError,
    ErrorKind.INVALID_NUMERIC_LITERAL: InvalidNumericLiteralError,
}


def exception_for(error: ScanError) -> LexicalError:
    """Build the LexicalError subclass matching ``error.kind``."""
    return _EXCEPTION_FOR_KIND[error.kind](error)


# =============================================================================
# Diagnostic Collection
# =============================================================================

class DiagnosticCollector:
    """
    Collects ScanError records for one scan.

    Example:
        collector = DiagnosticCollector(max_errors=10)
        collector.add(error)
        if collector.should_stop():
            raise TooManyErrorsError(collector.error_count(), collector.report())
    """

    def __init__(self, max_errors: Optional[int] = None):
        """
        Initialize the collector.

        Args:
            max_errors: Stop threshold, or None for no limit
        """
        self.errors: List[ScanError] = []
        self.max_errors = max_errors

    def __iter__(self):
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def add(self, error: ScanError) -> None:
        """Add an error to the collection."""
        self.errors.append(error)

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def should_stop(self) -> bool:
        """Return True if max_errors has been reached."""
        return self.max_errors is not None and len(self.errors) >= self.max_errors

    def error_count(self) -> int:
        return len(self.errors)

    def report(self) -> str:
        """Format all errors followed by a summary line."""
        lines = [str(error) for error in self.errors]
        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} {error_word}")
        return "\n".join(lines)

    def clear(self) -> None:
        self.errors.clear()
