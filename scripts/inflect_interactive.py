#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Interactive inflection front end.

Reads lines of the form ROOT SUFFIX SUFFIX ... and prints every
intermediate stem followed by the final word.

Usage:
    python scripts/inflect_interactive.py
    Input root and suffixes:
    bu(n) lAr (n)In
    Stem: buN
    Adding suffix lAr
    Stem: bunlar
    Adding suffix (n)In
    Stem: bunların
    Word: bunların

An empty line or EOF ends the session.
"""

import sys
from pathlib import Path
from typing import List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# pylint: disable=wrong-import-position
from suffix_notation import InvalidInput, parse_root_suffixes  # noqa: E402
from turkish_inflection_lib import attach, to_word  # noqa: E402

# pylint: enable=wrong-import-position

PROMPT = "Input root and suffixes:"


def trace_lines(line: str) -> List[str]:
    """
    Output lines for one input line.

    A parse failure produces a single error line instead of a trace.
    """
    try:
        root, suffixes = parse_root_suffixes(line)
    except InvalidInput as exc:
        return [f"Error: failed to parse input ({exc})"]

    lines = []
    stem = root.to_stem()
    for suffix in suffixes:
        lines.append(f"Stem: {stem}")
        lines.append(f"Adding suffix {suffix}")
        stem = attach(stem, suffix)
    lines.append(f"Stem: {stem}")
    lines.append(f"Word: {to_word(stem)}")
    return lines


def main() -> None:
    """Read lines from stdin until EOF or a blank line."""
    while True:
        print(PROMPT)
        line = sys.stdin.readline()
        if not line.strip():
            return
        print("\n".join(trace_lines(line)))
        print()


if __name__ == "__main__":
    main()
