#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
QC of generated verb forms against Wiktionary conjugation tables.

Inflects each root in QC_ROOTS through every label chain in QC_CHAINS
(labels from data/suffixes.toml), then checks whether the word appears
in the conjugation table of the root's infinitive on en.wiktionary.

Usage:
    python scripts/wiktionary_qc.py

Output:
    data/wiktionary_qc_audit.csv   (root, lemma, chain, labels, word, attested)
"""

import sys
from pathlib import Path
from typing import Dict, List, Set

import pandas as pd

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# pylint: disable=wrong-import-position
from suffix_inventory import SuffixInventory, load_suffix_inventory  # noqa: E402
from suffix_notation import parse_root  # noqa: E402
from turkish_inflection_lib import inflect  # noqa: E402
from wiktionary_forms import (  # noqa: E402
    attested_forms,
    load_disk_cache,
    save_disk_cache,
)

# pylint: enable=wrong-import-position

# ------------------------------------------------------------
# Config
# ------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = BASE_DIR / "data"
AUDIT_CSV = DATA_DIR / "wiktionary_qc_audit.csv"

# Verb roots in notation; giD covers the git-/gid- alternation
QC_ROOTS = [
    "yap",
    "gel",
    "giD",
    "oku",
    "başla",
    "söyle",
    "ver",
    "gör",
    "iç",
    "konuş",
]

# Regular chains only: the aorist vowel is lexical, so it is left out
QC_CHAINS: Dict[str, List[str]] = {
    "inf": ["INF"],
    "past.1sg": ["TAM.PPFV.KNWN", "VB.1sg"],
    "past.3pl": ["TAM.PPFV.KNWN", "VB.3pl"],
    "infr.2sg": ["TAM.PPFV.INFR", "PRED.2sg"],
    "prog.1sg": ["TAM.PRS.IPFV", "PRED.1sg"],
    "prog.1pl": ["TAM.PRS.IPFV", "PRED.1pl"],
    "fut.1sg": ["TAM.FUT", "PRED.1sg"],
    "fut.3sg": ["TAM.FUT", "PRED.3sg"],
    "cond.1pl": ["TAM.COND", "VB.1pl"],
    "neg.past.1sg": ["NEG.NEG", "TAM.PPFV.KNWN", "VB.1sg"],
    "nec.3sg": ["TAM.NEC"],
}

AUDIT_FIELDS = ["root", "lemma", "chain", "labels", "word", "attested"]


def check_root(
    root_text: str,
    inventory: SuffixInventory,
    attested: Set[str],
) -> List[Dict[str, object]]:
    """One audit row per chain for a single root."""
    root = parse_root(root_text)
    lemma = lemma_for(root_text, inventory)
    rows: List[Dict[str, object]] = []
    for chain, labels in QC_CHAINS.items():
        word = str(inflect(root, inventory.resolve(labels)))
        rows.append(
            {
                "root": root_text,
                "lemma": lemma,
                "chain": chain,
                "labels": " ".join(labels),
                "word": word,
                "attested": word in attested,
            }
        )
    return rows


def lemma_for(root_text: str, inventory: SuffixInventory) -> str:
    """Wiktionary headword of a verb root: its infinitive."""
    return str(inflect(parse_root(root_text), inventory.resolve(["INF"])))


def main() -> None:
    """Main entry point for the Wiktionary QC pass."""
    print("=" * 80)
    print("Turkish inflection QC against Wiktionary")
    print("=" * 80)

    inventory = load_suffix_inventory()
    print(f"Loaded {len(inventory)} suffix labels")
    load_disk_cache()

    rows: List[Dict[str, object]] = []
    missing_pages = 0
    try:
        for i, root_text in enumerate(QC_ROOTS, 1):
            lemma = lemma_for(root_text, inventory)
            print(f"  [{i}/{len(QC_ROOTS)}] {root_text} -> {lemma}")
            forms = attested_forms(lemma)
            if not forms:
                print(f"    WARNING: no table forms found for {lemma}")
                missing_pages += 1
                continue
            rows.extend(check_root(root_text, inventory, forms))
    finally:
        save_disk_cache()

    df = pd.DataFrame(rows, columns=AUDIT_FIELDS)
    print(f"\nWriting {len(df)} rows to {AUDIT_CSV}...")
    df.to_csv(AUDIT_CSV, index=False)

    print("\n" + "=" * 80)
    print("STATISTICS")
    print("=" * 80)
    print(f"Roots checked: {len(QC_ROOTS) - missing_pages}/{len(QC_ROOTS)}")
    print(f"Forms generated: {len(df)}")
    if len(df):
        attested = int(df["attested"].sum())
        print(f"Attested: {attested} ({attested / len(df):.1%})")
        misses = df[~df["attested"].astype(bool)]
        if len(misses):
            print("\nNot attested:")
            for _, r in misses.iterrows():
                print(f"  {r['root']:<8} {r['chain']:<14} {r['word']}")
    print("=" * 80)


if __name__ == "__main__":
    main()
