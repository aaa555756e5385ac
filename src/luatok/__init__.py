"""
luatok - Lexical Analyzer for Lua-like Source
=============================================

This package converts Lua-like source text into an ordered list of
classified tokens for a downstream parser.

Main Components
---------------
- **tokens**: TokenKind, Token and the keyword table
- **cursor**: ScannerState, the bounds-checked read cursor
- **scanner**: the dispatch loop, sub-scanners and ``tokenize()``
- **errors**: ScanError diagnostics and the exception hierarchy
- **options**: ScannerOptions (recovery policy, strictness, limits)
- **cli**: the ``luatok`` command

Quick Start
-----------
    >>> from luatok import tokenize
    >>> [t.text for t in tokenize("if x ~= 1 then")]
    ['if', 'x', '~=', '1', 'then']

Rejected lexemes never stop the scan. They are logged on the
``luatok.scanner`` logger as ``Error on line <N>: <description>`` and the
rest of the line is skipped:

    >>> from luatok import tokenize_with_diagnostics
    >>> tokens, errors = tokenize_with_diagnostics("1.2.3\\nlocal x")
    >>> [t.text for t in tokens]
    ['local', 'x']
    >>> str(errors[0])
    "Error on line 1: Invalid numeric literal '1.2.3'"

Or use the command-line tool:
    $ luatok script.lua
    $ luatok --format json script.lua
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from luatok.tokens import Token, TokenKind, KEYWORDS
from luatok.cursor import ScannerState, END_OF_INPUT
from luatok.options import ScannerOptions, RecoveryMode
from luatok.errors import (
    ErrorKind,
    ScanError,
    LuaTokError,
    LexicalError,
    UnexpectedCharacterError,
    InvalidDotSequenceError,
    InvalidNumericLiteralError,
    TooManyErrorsError,
)
from luatok.scanner import Scanner, tokenize, tokenize_with_diagnostics

__all__ = [
    "__version__",
    # Tokens
    "Token",
    "TokenKind",
    "KEYWORDS",
    # Cursor
    "ScannerState",
    "END_OF_INPUT",
    # Configuration
    "ScannerOptions",
    "RecoveryMode",
    # Diagnostics and exceptions
    "ErrorKind",
    "ScanError",
    "LuaTokError",
    "LexicalError",
    "UnexpectedCharacterError",
    "InvalidDotSequenceError",
    "InvalidNumericLiteralError",
    "TooManyErrorsError",
    # Scanner
    "Scanner",
    "tokenize",
    "tokenize_with_diagnostics",
]
