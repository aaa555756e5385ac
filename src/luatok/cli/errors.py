"""
CLI Exit Handling
=================

Maps the outcome of a tokenizer run onto exit codes.

Rejected lexemes are already written to stderr by the ``luatok.scanner``
logger as they are found, so nothing here repeats them. This module only
adds the one-line summary and the exit code.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from luatok.errors import LexicalError, TooManyErrorsError


class ExitCode(IntEnum):
    """Exit codes for the luatok command."""
    SUCCESS = 0
    LEX_ERROR = 1        # One or more lexemes were rejected
    INVALID_ARGS = 2     # Unreadable input
    INTERNAL_ERROR = 3   # Unexpected internal error


def exit_with_error_summary(count: int) -> NoReturn:
    """Print how many lexemes were rejected and exit with LEX_ERROR."""
    click.echo(f"{count} {'error' if count == 1 else 'errors'}", err=True)
    sys.exit(ExitCode.LEX_ERROR)


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception raised while reading or scanning, then exit.

    - LexicalError (``--strict``): the diagnostic was logged when the
      lexeme was rejected; exit without echoing it again.
    - TooManyErrorsError (``--max-errors``): every diagnostic was logged;
      print only why the scan stopped.
    - OSError: the input could not be read.
    - Anything else is an internal error.

    Raises:
        SystemExit: Always
    """
    if isinstance(error, LexicalError):
        sys.exit(ExitCode.LEX_ERROR)

    if isinstance(error, TooManyErrorsError):
        click.echo(f"stopping after {error.count} errors", err=True)
        sys.exit(ExitCode.LEX_ERROR)

    if isinstance(error, OSError):
        click.echo(f"Error: cannot read input: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    click.echo(f"Internal error: {error}", err=True)
    if verbose:
        traceback.print_exc()
    sys.exit(ExitCode.INTERNAL_ERROR)
