#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Batch inflection of ROOT SUFFIX ... lines from a CSV file.

Usage:
    python scripts/batch_inflect.py

Input:
    data/inflection_inputs.csv    (column: input)

Output:
    data/inflection_outputs.csv   (input, root, suffixes, stems, word, error)

Lines that fail to parse keep an empty word and the parser's message
in the error column; the rest of the batch is unaffected.
"""

import sys
from pathlib import Path
from typing import Dict

import pandas as pd

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# pylint: disable=wrong-import-position
from suffix_notation import InvalidInput, parse_root_suffixes  # noqa: E402
from turkish_inflection_lib import iter_stems, to_word  # noqa: E402

# pylint: enable=wrong-import-position

BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = BASE_DIR / "data"

INPUT_CSV = DATA_DIR / "inflection_inputs.csv"
OUTPUT_CSV = DATA_DIR / "inflection_outputs.csv"

OUTPUT_FIELDS = ["input", "root", "suffixes", "stems", "word", "error"]


def process_line(line: str) -> Dict[str, str]:
    """Inflect one input line into an output row."""
    row = {field: "" for field in OUTPUT_FIELDS}
    row["input"] = line
    try:
        root, suffixes = parse_root_suffixes(line)
    except InvalidInput as exc:
        row["error"] = str(exc)
        return row

    stems = list(iter_stems(root, suffixes))
    row["root"] = str(root)
    row["suffixes"] = " ".join(str(s) for s in suffixes)
    row["stems"] = "|".join(str(s) for s in stems)
    row["word"] = str(to_word(stems[-1]))
    return row


def process_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Inflect every row of a frame with an 'input' column."""
    lines = df["input"].fillna("").astype(str)
    rows = [process_line(line) for line in lines]
    return pd.DataFrame(rows, columns=OUTPUT_FIELDS)


def main() -> None:
    """Main entry point for batch inflection."""
    if not INPUT_CSV.exists():
        print(f"ERROR: input not found: {INPUT_CSV}")
        return

    print(f"Reading {INPUT_CSV}...")
    df_in = pd.read_csv(INPUT_CSV, dtype=str, keep_default_na=False)
    if "input" not in df_in.columns:
        print("ERROR: input CSV has no 'input' column")
        return

    df_out = process_frame(df_in)
    print(f"Writing {len(df_out)} rows to {OUTPUT_CSV}...")
    df_out.to_csv(OUTPUT_CSV, index=False)

    failed = int((df_out["error"] != "").sum())
    print("\n" + "=" * 80)
    print("SUMMARY")
    print("=" * 80)
    print(f"Total lines: {len(df_out)}")
    print(f"Inflected: {len(df_out) - failed}")
    print(f"Failed to parse: {failed}")
    print("=" * 80)


if __name__ == "__main__":
    main()
