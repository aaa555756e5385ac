"""
Scanner configuration.

Defaults reproduce the classic behaviour: line-level recovery, ``..``
rejected, comments kept, never raise.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RecoveryMode(Enum):
    """What the dispatch loop skips after a rejected lexeme."""

    LINE = "line"      # drop the rest of the line
    TOKEN = "token"    # drop only the offending lexeme


@dataclass
class ScannerOptions:
    """
    Scanner configuration options.

    Attributes:
        recovery: Recovery policy after a rejected lexeme
        allow_double_dot: Accept ".." as an unclassified token instead of
                          rejecting it. Off by default; standard Lua uses ".."
                          for concatenation.
        keep_comments: Emit COMMENT tokens. When False, comments are still
                       scanned but not returned.
        strict: Raise a LexicalError at the first rejected lexeme
        max_errors: Raise TooManyErrorsError once this many diagnostics
                    have been collected. None means no limit.
    """
    recovery: RecoveryMode = RecoveryMode.LINE
    allow_double_dot: bool = False
    keep_comments: bool = True
    strict: bool = False
    max_errors: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.recovery, str):
            self.recovery = RecoveryMode(self.recovery)
        if self.max_errors is not None and self.max_errors < 1:
            raise ValueError(f"max_errors must be at least 1, got {self.max_errors}")
