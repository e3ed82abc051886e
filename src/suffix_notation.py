#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Suffix Notation Parser

Decodes the compact text notation into Root and Suffix values.

ROOT:    exact letters, the last of which may instead be B/C/D/K or the
         optional nasal written (n)           yap, giD, bu(n)
SUFFIX:  (H)BODY(T) - optional single head in parentheses, a body of
         exact letters and A/I/B/C/D/K, optional (n) tail
                                              lAr, (y)AcAK, (s)I(n)
LINE:    ROOT SUFFIX SUFFIX ... separated by whitespace

Usage:
    >>> from suffix_notation import parse_root_suffixes
    >>> root, suffixes = parse_root_suffixes("yap Iyor (y)sA (I)m")
    >>> str(root), [str(s) for s in suffixes]
    ('yap', ['Iyor', '(y)sA', '(I)m'])
"""

import re
from typing import List, Tuple

from turkish_inflection_lib import Root, Suffix
from turkish_phonology import EXACT_LETTERS, Placeholder, to_letter

# ============================================================================
# ERRORS
# ============================================================================


class InvalidInput(ValueError):
    """Text does not match the ROOT SUFFIX ... notation."""


class InvalidRoot(InvalidInput):
    """Text does not match the root grammar."""


class InvalidSuffix(InvalidInput):
    """Text does not match the suffix grammar."""


# ============================================================================
# GRAMMAR
# ============================================================================

_EXACT = EXACT_LETTERS

ROOT_RE = re.compile(rf"([{_EXACT}]*)(?:([{_EXACT}BCDK])|\((n)\))")

SUFFIX_RE = re.compile(
    rf"(?:\(([{_EXACT}ABCDIK])\))?([{_EXACT}ABCDIK]+)(?:\((n)\))?"
)


def _clean(text: str) -> str:
    """Trim surrounding whitespace; the characters themselves are kept as-is."""
    return text.strip()


def parse_root(text: str) -> Root:
    """
    Parse root notation.

    Args:
        text: e.g. "yap", "  giD ", "bu(n)"

    Returns:
        Root whose final letter may be a Placeholder (B/C/D/K/N)

    Raises:
        InvalidRoot: empty text, a disallowed character, a placeholder
            anywhere but the end, or a bare N
    """
    cleaned = _clean(text)
    m = ROOT_RE.fullmatch(cleaned)
    if m is None:
        raise InvalidRoot(f"invalid root notation: {text!r}")
    prefix, final, nasal = m.groups()
    letters = list(prefix)
    letters.append(Placeholder.N if nasal else to_letter(final))
    return Root(tuple(letters))


def parse_suffix(text: str) -> Suffix:
    """
    Parse suffix notation.

    Examples:
        >>> str(parse_suffix("(y)AcAK"))
        '(y)AcAK'
        >>> parse_suffix("(I)")
        Traceback (most recent call last):
        ...
        suffix_notation.InvalidSuffix: invalid suffix notation: '(I)'

    Raises:
        InvalidSuffix: empty body, multi-letter parentheses, a tail other
            than (n), or stray characters
    """
    cleaned = _clean(text)
    m = SUFFIX_RE.fullmatch(cleaned)
    if m is None:
        raise InvalidSuffix(f"invalid suffix notation: {text!r}")
    head, body, tail = m.groups()
    return Suffix(
        body=tuple(to_letter(ch) for ch in body),
        head=to_letter(head) if head else None,
        tail=Placeholder.N if tail else None,
    )


def parse_root_suffixes(text: str) -> Tuple[Root, List[Suffix]]:
    """
    Parse a whitespace-separated line: ROOT SUFFIX SUFFIX ...

    Suffix order is preserved; they attach left to right.

    Raises:
        InvalidInput: the line has no tokens
        InvalidRoot: the first token is not a root
        InvalidSuffix: any later token is not a suffix (the first
            failure wins, nothing partial is returned)
    """
    tokens = text.split()
    if not tokens:
        raise InvalidInput("empty input: expected ROOT SUFFIX ...")
    root = parse_root(tokens[0])
    suffixes = [parse_suffix(token) for token in tokens[1:]]
    return root, suffixes
