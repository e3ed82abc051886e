#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Suffix inventory: grammatical labels mapped to Suffix values.

The inventory lives in data/suffixes.toml. Nested tables become dotted
labels (``TAM.PPFV.KNWN``); empty strings are null morphemes, kept as
labels that contribute no suffix. Which suffix may follow which is not
checked here.
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Set, Tuple

from suffix_notation import InvalidSuffix, parse_suffix
from turkish_inflection_lib import Suffix

DEFAULT_INVENTORY_PATH = (
    Path(__file__).resolve().parent.parent / "data" / "suffixes.toml"
)


@dataclass
class SuffixInventory:
    """Label -> Suffix lookup, null morphemes tracked separately."""

    suffixes: Dict[str, Suffix] = field(default_factory=dict)
    null_labels: Set[str] = field(default_factory=set)
    order: List[str] = field(default_factory=list)

    def __contains__(self, label: str) -> bool:
        return label in self.suffixes or label in self.null_labels

    def __len__(self) -> int:
        return len(self.order)

    def labels(self) -> List[str]:
        """All labels in document order."""
        return list(self.order)

    def get(self, label: str) -> Optional[Suffix]:
        """
        Look up a label.

        Returns:
            The Suffix, or None for a null morpheme

        Raises:
            KeyError: unknown label
        """
        if label in self.suffixes:
            return self.suffixes[label]
        if label in self.null_labels:
            return None
        raise KeyError(f"unknown suffix label: {label}")

    def resolve(self, labels: Iterable[str]) -> List[Suffix]:
        """Map labels to suffixes in order, skipping null morphemes."""
        resolved = []
        for label in labels:
            suffix = self.get(label)
            if suffix is not None:
                resolved.append(suffix)
        return resolved


def flatten_table(
    table: Dict[str, Any], prefix: str = ""
) -> Iterator[Tuple[str, Any]]:
    """Yield (dotted_label, value) for every leaf of a nested table."""
    for key, value in table.items():
        label = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            yield from flatten_table(value, label)
        else:
            yield label, value


def build_inventory(table: Dict[str, Any]) -> SuffixInventory:
    """
    Build an inventory from an already-parsed TOML table.

    Raises:
        InvalidSuffix: a value is not valid suffix notation
        ValueError: a value is not a string
    """
    inventory = SuffixInventory()
    for label, value in flatten_table(table):
        if not isinstance(value, str):
            raise ValueError(
                f"suffix {label} must be a notation string, got {value!r}"
            )
        inventory.order.append(label)
        if not value.strip():
            inventory.null_labels.add(label)
            continue
        try:
            inventory.suffixes[label] = parse_suffix(value)
        except InvalidSuffix as exc:
            raise InvalidSuffix(f"{label}: {exc}") from exc
    return inventory


def load_suffix_inventory(
    path: Path = DEFAULT_INVENTORY_PATH,
) -> SuffixInventory:
    """Load and parse a TOML suffix inventory file."""
    with open(path, "rb") as f:
        table = tomllib.load(f)
    return build_inventory(table)
