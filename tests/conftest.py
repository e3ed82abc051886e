"""Shared pytest setup: make src/ and scripts/ importable."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT / "scripts"))

from suffix_notation import parse_root_suffixes  # noqa: E402
from turkish_inflection_lib import inflect  # noqa: E402


def inflect_line(line: str) -> str:
    """Parse a ROOT SUFFIX ... line and return the surface word."""
    root, suffixes = parse_root_suffixes(line)
    return str(inflect(root, suffixes))


@pytest.fixture
def inflect_text():
    return inflect_line
