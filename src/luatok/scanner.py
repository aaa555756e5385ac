"""
Lua Scanner (Tokenizer)
=======================

This module implements the scanning engine: a dispatch loop that looks at
the current character, hands off to a sub-scanner, and appends the
resulting token.

Dispatch Rules
--------------
| Current char          | Action                                  |
|-----------------------|-----------------------------------------|
| space, tab            | skip                                    |
| newline               | skip, next line                         |
| -                     | comment if "--", else operator "-"      |
| + * / ^ % #           | one-char operator                       |
| > < = ~               | operator, plus one of < > = ~ if next   |
| ( ) { } ; , [ ]       | one-char unclassified symbol            |
| .                     | dot sequence: "." or "..."              |
| 0-9                   | numeric literal                         |
| a-z A-Z _             | identifier or keyword                   |
| anything else         | unexpected character                    |

Error Recovery
--------------
Sub-scanners never raise. They return either a Token or a ScanError, and
the dispatch loop decides what to do with an error: log it, then skip to
the end of the line (default) or only past the bad lexeme
(``RecoveryMode.TOKEN``). Tokens already produced are kept, so one bad
lexeme never aborts the whole run.

Example Usage
-------------
>>> from luatok import tokenize
>>> for token in tokenize("local x = 1.5 -- set x"):
...     print(token)
Token(KEYWORD, 'local', line 1)
Token(IDENTIFIER, 'x', line 1)
Token(OPERATOR, '=', line 1)
Token(NUMERIC_LITERAL, '1.5', line 1)
Token(COMMENT, '-- set x', line 1)
"""

import logging
import string
from typing import Iterator, Optional, Union

from luatok.cursor import ScannerState, WHITESPACE
from luatok.errors import (
    DiagnosticCollector,
    ErrorKind,
    ScanError,
    TooManyErrorsError,
    exception_for,
)
from luatok.options import RecoveryMode, ScannerOptions
from luatok.tokens import Token, TokenKind, classify_word

logger = logging.getLogger(__name__)

ScanResult = Union[Token, ScanError]


# =============================================================================
# Character Classes
# =============================================================================

SINGLE_OPERATORS = "+*/^%#"
COMPARISON_STARTS = "><=~"

# Any of these after a comparison start forms a two-char operator. The set
# is symmetric, so "<~" and "=<" are accepted too.
COMPARISON_FOLLOWS = "<>=~"

SYMBOLS = "(){};,[]"

DIGITS = string.digits
IDENT_START = string.ascii_letters + "_"
IDENT_CHARS = string.ascii_letters + string.digits + "_"


def decode_source(source: Union[str, bytes]) -> str:
    """
    Return source as text.

    Bytes are decoded as latin-1, which maps every byte to exactly one
    character; non-ASCII bytes then scan as unexpected characters.
    """
    if isinstance(source, (bytes, bytearray)):
        return bytes(source).decode("latin-1")
    return source


def _is_in(char: str, charset: str) -> bool:
    # "" is a substring of everything, so the sentinel needs a guard.
    return bool(char) and char in charset


# =============================================================================
# Sub-scanners
# =============================================================================
# Each takes the state positioned on the first character of a lexeme and
# leaves it on the first character after it.

def scan_minus(state: ScannerState) -> Token:
    """Scan "-" or a "--" line comment."""
    start, line = state.position, state.line
    state.advance()
    if state.current == "-":
        return scan_comment(state, start, line)
    return Token(TokenKind.OPERATOR, "-", line)


def scan_comment(state: ScannerState, start: int, line: int) -> Token:
    """
    Finish a line comment.

    ``start`` is the offset of the first "-"; the cursor is on the second.
    The comment runs to the end of the line, newline excluded.
    """
    state.skip_to_line_end()
    return Token(TokenKind.COMMENT, state.lexeme(start), line)


def scan_single(state: ScannerState, kind: TokenKind) -> Token:
    """Consume one character as a token of the given kind."""
    char, line = state.current, state.line
    state.advance()
    return Token(kind, char, line)


def scan_comparison(state: ScannerState) -> Token:
    """Scan one of > < = ~, greedily taking a second char from < > = ~."""
    start, line = state.position, state.line
    state.advance()
    if _is_in(state.current, COMPARISON_FOLLOWS):
        state.advance()
    return Token(TokenKind.OPERATOR, state.lexeme(start), line)


def scan_dot(state: ScannerState, allow_double_dot: bool = False) -> ScanResult:
    """
    Scan a dot sequence.

    "." and "..." are valid. Exactly two dots is an error unless
    ``allow_double_dot`` is set.
    """
    start, line = state.position, state.line
    state.advance()
    if state.current != ".":
        return Token(TokenKind.UNCLASSIFIED, ".", line)

    state.advance()
    if state.current == ".":
        state.advance()
        return Token(TokenKind.UNCLASSIFIED, "...", line)

    if allow_double_dot:
        return Token(TokenKind.UNCLASSIFIED, "..", line)
    return ScanError(ErrorKind.INVALID_DOT_SEQUENCE, state.lexeme(start), line)


def scan_number(state: ScannerState) -> ScanResult:
    """
    Scan a decimal literal: digits with at most one decimal point.

    On a second point the rest of the digit/dot run is consumed so the
    error carries the whole malformed literal.
    """
    start, line = state.position, state.line
    seen_point = False
    malformed = False

    while _is_in(state.current, DIGITS) or state.current == ".":
        if state.current == ".":
            if seen_point:
                malformed = True
            seen_point = True
        state.advance()

    if malformed:
        return ScanError(ErrorKind.INVALID_NUMERIC_LITERAL, state.lexeme(start), line)
    return Token(TokenKind.NUMERIC_LITERAL, state.lexeme(start), line)


def scan_identifier(state: ScannerState) -> Token:
    """Scan a name and classify it against the keyword table."""
    start, line = state.position, state.line
    while _is_in(state.current, IDENT_CHARS):
        state.advance()
    word = state.lexeme(start)
    return Token(classify_word(word), word, line)


def reject_character(state: ScannerState) -> ScanError:
    """Consume a character that starts no token and describe it."""
    char, line = state.current, state.line
    state.advance()
    return ScanError(ErrorKind.UNEXPECTED_CHARACTER, char, line)


# =============================================================================
# Scanner
# =============================================================================

class Scanner:
    """
    Tokenizes Lua-like source code.

    Usage:
        scanner = Scanner(source)
        tokens = scanner.scan()
        for error in scanner.errors:
            print(error)

    Every call to ``scan()`` or ``iter_tokens()`` starts from a fresh
    ScannerState, so repeated runs give identical results.

    Attributes:
        source: The source code being tokenized
        options: Scanner configuration
        errors: Diagnostics collected during the last run
    """

    def __init__(
        self,
        source: Union[str, bytes],
        options: Optional[ScannerOptions] = None,
    ):
        """
        Initialize the scanner.

        Args:
            source: The source code to tokenize; bytes are decoded as latin-1
            options: Scanner configuration (uses defaults if None)
        """
        self.source = decode_source(source)
        self.options = options or ScannerOptions()
        self.errors = DiagnosticCollector(self.options.max_errors)

    def scan(self) -> list[Token]:
        """
        Tokenize the whole source.

        Returns:
            Tokens in source order

        Raises:
            LexicalError: On the first rejected lexeme, in strict mode only
            TooManyErrorsError: When ``max_errors`` is reached
        """
        return list(self.iter_tokens())

    def iter_tokens(self) -> Iterator[Token]:
        """Generate tokens one at a time. See ``scan()``."""
        self.errors.clear()
        state = ScannerState(self.source)
        emitted = 0

        while not state.at_end():
            result = self._dispatch(state)
            if result is None:
                continue
            if isinstance(result, ScanError):
                self._recover(state, result)
                continue
            if result.is_comment() and not self.options.keep_comments:
                continue
            emitted += 1
            yield result

        logger.debug(
            f"Scanned {len(self.source)} chars into {emitted} tokens "
            f"({self.errors.error_count()} errors, {state.line} lines)"
        )

    def _dispatch(self, state: ScannerState) -> Optional[ScanResult]:
        """Pick a scan rule for the current character. None means no token."""
        char = state.current

        if char in WHITESPACE:
            state.skip_whitespace()
            return None

        if char == "\n":
            state.advance()
            return None

        if char == "-":
            return scan_minus(state)

        if char in SINGLE_OPERATORS:
            return scan_single(state, TokenKind.OPERATOR)

        if char in COMPARISON_STARTS:
            return scan_comparison(state)

        if char in SYMBOLS:
            return scan_single(state, TokenKind.UNCLASSIFIED)

        if char == ".":
            return scan_dot(state, self.options.allow_double_dot)

        if char in DIGITS:
            return scan_number(state)

        if char in IDENT_START:
            return scan_identifier(state)

        return reject_character(state)

    def _recover(self, state: ScannerState, error: ScanError) -> None:
        """Record a rejected lexeme and move the cursor past the damage."""
        self.errors.add(error)
        logger.error(str(error))

        if self.options.strict:
            raise exception_for(error)
        if self.errors.should_stop():
            raise TooManyErrorsError(self.errors.error_count(), self.errors.report())

        if self.options.recovery is RecoveryMode.LINE:
            state.skip_to_line_end()


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(
    source: Union[str, bytes],
    options: Optional[ScannerOptions] = None,
) -> list[Token]:
    """
    Tokenize source code.

    Args:
        source: Lua source text, or bytes decoded as latin-1
        options: Scanner configuration (uses defaults if None)

    Returns:
        Tokens in source order. Rejected lexemes are logged and skipped.
    """
    return Scanner(source, options).scan()


def tokenize_with_diagnostics(
    source: Union[str, bytes],
    options: Optional[ScannerOptions] = None,
) -> tuple[list[Token], list[ScanError]]:
    """Tokenize source and also return the rejected lexemes."""
    scanner = Scanner(source, options)
    tokens = scanner.scan()
    return tokens, list(scanner.errors)
