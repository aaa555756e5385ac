"""
luatok Command-Line Interface
=============================

- **luatok**: tokenize a Lua source file and print the tokens

The tool is a Click-based CLI application with help text and
consistent exit codes (see ``luatok.cli.errors.ExitCode``).
"""

__all__ = ["luatok"]
