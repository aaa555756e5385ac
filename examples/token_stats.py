#!/usr/bin/env python3
"""
luatok Token Statistics Demo
============================

This script shows how to use the luatok scanner from Python to:
1. Tokenize a source file
2. Count tokens by kind
3. List the diagnostics for rejected lexemes

Usage:
    python examples/token_stats.py examples/sample.lua
"""

import sys
from collections import Counter
from pathlib import Path

from luatok import RecoveryMode, Scanner, ScannerOptions


def main():
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).with_name("sample.lua")
    source = path.read_text(encoding="latin-1")

    # ==========================================================================
    # 1. Scan with token-level recovery so one bad lexeme costs one token
    # ==========================================================================
    scanner = Scanner(source, ScannerOptions(recovery=RecoveryMode.TOKEN))
    tokens = scanner.scan()

    # ==========================================================================
    # 2. Count tokens by kind
    # ==========================================================================
    print(f"{path}: {len(tokens)} tokens")
    for kind, count in Counter(t.kind.name for t in tokens).most_common():
        print(f"  {kind:<16} {count}")

    # ==========================================================================
    # 3. Report rejected lexemes
    # ==========================================================================
    if scanner.errors.has_errors():
        print()
        print(scanner.errors.report())


if __name__ == "__main__":
    main()
