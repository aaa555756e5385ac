"""
Lua Token Definitions
=====================

Token kinds and the immutable token record produced by the scanner.

Token Categories
----------------
- Keywords: and, break, do, else, ..., until, while
- Identifiers: variable and function names
- Operators: + - * / ^ % # and the comparison family (==, ~=, <=, >=)
- Numeric literals: 42, 3.14
- Comments: -- to end of line
- Unclassified: ( ) { } [ ] ; , and dot sequences (., ...)

The scanner does not subclassify punctuation. A parser that needs to tell
"(" from "{" looks at ``Token.text``.
"""

from dataclasses import dataclass
from enum import Enum, auto


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Classification tag carried by every token."""

    KEYWORD = auto()            # and, break, do, ...
    IDENTIFIER = auto()         # names
    OPERATOR = auto()           # + - * / ^ % # < > = ~ and two-char forms
    NUMERIC_LITERAL = auto()    # 42, 3.14
    COMMENT = auto()            # -- to end of line
    UNCLASSIFIED = auto()       # symbols, brackets, dot sequences


# =============================================================================
# Keyword Table
# =============================================================================

KEYWORDS: frozenset[str] = frozenset({
    "and", "break", "do", "else", "elseif",
    "end", "false", "for", "function", "if",
    "in", "local", "nil", "not", "or",
    "repeat", "return", "then", "true", "until",
    "while",
})


def classify_word(word: str) -> TokenKind:
    """Return KEYWORD for an exact keyword match, IDENTIFIER otherwise."""
    return TokenKind.KEYWORD if word in KEYWORDS else TokenKind.IDENTIFIER


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Attributes:
        kind: The TokenKind classification
        text: Exact lexeme as it appeared in source
        line: Line number where the lexeme starts (1-indexed)
    """
    kind: TokenKind
    text: str
    line: int

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, line {self.line})"

    def is_comment(self) -> bool:
        """Return True if this token is a line comment."""
        return self.kind is TokenKind.COMMENT

    def to_dict(self) -> dict:
        """Plain-data form used for JSON output."""
        return {"kind": self.kind.name, "text": self.text, "line": self.line}
