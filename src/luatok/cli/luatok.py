"""
luatok - Tokenizer Command-Line Interface
=========================================

Tokenizes a Lua source file and prints one token per line, or the whole
token list as JSON.

Usage Examples
--------------
Print tokens:
    $ luatok script.lua

Read from stdin:
    $ cat script.lua | luatok

JSON output without comments:
    $ luatok --format json --no-comments script.lua

Keep going after a bad lexeme without losing the rest of its line:
    $ luatok --recovery token script.lua

Exit Codes
----------
0 - Success, no lexemes rejected
1 - One or more lexemes rejected (or strict mode / error limit hit)
2 - Invalid arguments or missing input file
3 - Internal error
"""

import json
import logging
from typing import BinaryIO, Optional

import click

from luatok import __version__
from luatok.cli.errors import exit_with_error_summary, handle_cli_exception
from luatok.options import RecoveryMode, ScannerOptions
from luatok.scanner import Scanner, decode_source
from luatok.tokens import Token

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def read_source(stream: BinaryIO) -> str:
    """
    Read source bytes as text.

    Latin-1 maps every byte to exactly one character, so non-ASCII input
    reaches the scanner as single unexpected characters rather than
    failing to decode. CRLF line endings are folded to LF.
    """
    return decode_source(stream.read()).replace("\r\n", "\n")


def format_token(token: Token) -> str:
    """Format a token as 'LINE<TAB>KIND<TAB>TEXT'."""
    return f"{token.line}\t{token.kind.name}\t{token.text!r}"


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.File("rb"),
    default="-",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format",
)
@click.option(
    "--no-comments",
    is_flag=True,
    help="Drop comment tokens from the output",
)
@click.option(
    "-r", "--recovery",
    type=click.Choice([mode.value for mode in RecoveryMode], case_sensitive=False),
    default=RecoveryMode.LINE.value,
    show_default=True,
    help="After a bad lexeme, skip the rest of the line or just the lexeme",
)
@click.option(
    "--allow-double-dot",
    is_flag=True,
    help="Accept '..' as a token instead of rejecting it",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Stop at the first rejected lexeme",
)
@click.option(
    "--max-errors",
    type=click.IntRange(min=1),
    default=None,
    help="Stop after this many rejected lexemes",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="luatok")
def main(
    input_file: BinaryIO,
    output_format: str,
    no_comments: bool,
    recovery: str,
    allow_double_dot: bool,
    strict: bool,
    max_errors: Optional[int],
    verbose: bool,
) -> None:
    """
    Tokenize Lua source code.

    INPUT_FILE is the source file to scan; omit it or pass '-' to read
    standard input.

    \b
    Examples:
        luatok script.lua                 # One token per line
        luatok -f json script.lua         # JSON array of tokens
        luatok --no-comments script.lua   # Skip comments
        luatok --strict script.lua        # Fail on first error

    Rejected lexemes are reported on stderr as
    "Error on line <N>: <description>".
    """
    setup_logging(verbose)

    options = ScannerOptions(
        recovery=RecoveryMode(recovery.lower()),
        allow_double_dot=allow_double_dot,
        keep_comments=not no_comments,
        strict=strict,
        max_errors=max_errors,
    )

    try:
        source = read_source(input_file)
        logger.debug(f"Read {len(source)} chars from {getattr(input_file, 'name', '<stdin>')}")

        scanner = Scanner(source, options)
        tokens = scanner.scan()
    except Exception as e:
        handle_cli_exception(e, verbose)

    if output_format.lower() == "json":
        click.echo(json.dumps([token.to_dict() for token in tokens], indent=2))
    else:
        for token in tokens:
            click.echo(format_token(token))

    if scanner.errors.has_errors():
        exit_with_error_summary(scanner.errors.error_count())


if __name__ == "__main__":
    main()
