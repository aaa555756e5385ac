"""
Scanner Cursor
==============

``ScannerState`` owns the source buffer and the read cursor. Every
sub-scanner reads and moves the cursor only through the methods here, so
a test can build a state at any offset and drive a single scan rule.

Invariants
----------
- ``current`` is ``source[position]``, or ``END_OF_INPUT`` once
  ``position >= len(source)``.
- ``line`` goes up by exactly one for each consumed newline.
- ``position`` never moves backwards.
"""

from typing import Optional

# Returned for any read past the end of the buffer.
END_OF_INPUT = ""

WHITESPACE = " \t"


class ScannerState:
    """
    Source buffer plus cursor for one tokenization run.

    Attributes:
        source: The text being scanned
        position: Index of the current character
        current: Character at ``position`` or END_OF_INPUT
        line: Current line number (1-indexed)
    """

    __slots__ = ("source", "position", "current", "line")

    def __init__(self, source: str, position: int = 0, line: int = 1):
        """
        Create a cursor over ``source``.

        Args:
            source: The text to scan
            position: Starting offset (non-zero only in tests)
            line: Line number at ``position``
        """
        if position < 0:
            raise ValueError(f"position must be non-negative, got {position}")
        self.source = source
        self.position = position
        self.line = line
        self.current = self._char_at(position)

    def __repr__(self) -> str:
        return (
            f"ScannerState(position={self.position}, "
            f"current={self.current!r}, line={self.line})"
        )

    # =========================================================================
    # Character Access
    # =========================================================================

    def _char_at(self, index: int) -> str:
        if index < len(self.source):
            return self.source[index]
        return END_OF_INPUT

    def at_end(self) -> bool:
        """Check if the cursor is past the last character."""
        return self.current == END_OF_INPUT

    def peek_next(self) -> str:
        """Character after ``current``, without advancing."""
        return self._char_at(self.position + 1)

    def lexeme(self, start: int, end: Optional[int] = None) -> str:
        """Source text from ``start`` up to the cursor (or ``end``)."""
        return self.source[start:self.position if end is None else end]

    # =========================================================================
    # Cursor Movement
    # =========================================================================

    def advance(self) -> None:
        """Consume the current character."""
        if self.at_end():
            return
        if self.current == "\n":
            self.line += 1
        self.position += 1
        self.current = self._char_at(self.position)

    def skip_whitespace(self) -> None:
        """Skip spaces and tabs. Newlines are left for the dispatch loop."""
        while self.current and self.current in WHITESPACE:
            self.advance()

    def skip_to_line_end(self) -> None:
        """Advance to the next newline (not consumed) or end of input."""
        while not self.at_end() and self.current != "\n":
            self.advance()
