#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Turkish Phonology Tables

Static character classes and the two context rules used during
suffixation:

1. Vowel harmony: A = a/e (low), I = ı/i/u/ü (high), chosen by the
   backness and roundness of the preceding vowel.
2. Consonant mutation: B = b/p, C = c/ç, D = d/t, K = g/k (ğ between
   vowels), chosen by the neighbouring phonemes. N is an optional
   nasal, realized as n only when something follows it.

Lowercase letters are exact and match themselves. The uppercase
symbols are modelled as the closed ``Placeholder`` enum so an exact
letter can never be confused with an unresolved one.
"""

from enum import Enum
from typing import Dict, NamedTuple, Optional, Sequence, Tuple, Union


class Placeholder(Enum):
    """Notation symbols standing for a class of phonemes."""

    A = "A"  # low vowel
    I = "I"  # high vowel  # noqa: E741
    B = "B"
    C = "C"
    D = "D"
    K = "K"
    N = "N"  # optional nasal, stem/suffix tail only

    def __str__(self) -> str:
        return self.value


# A single position in a root, stem or suffix
Letter = Union[str, Placeholder]


# ============================================================================
# CONSTANTS
# ============================================================================

# Exact letters accepted in notation (lowercase ASCII plus Turkish letters)
EXACT_LETTERS = "abcdefghijklmnopqrstuvwxyzçğıöşü"

# fıstıkçı şahap
VOICELESS = frozenset("fstkçşhp")

EXACT_VOWELS = frozenset("aeıioöuü")

VOWEL_PLACEHOLDERS = frozenset({Placeholder.A, Placeholder.I})

CONSONANT_PLACEHOLDERS = frozenset(
    {Placeholder.B, Placeholder.C, Placeholder.D, Placeholder.K}
)


class VowelQuality(NamedTuple):
    """Front/round/high features of a vowel."""

    front: bool
    round: bool
    high: bool


class Harmony(NamedTuple):
    """Running harmony context: backness and roundness of the last vowel."""

    front: bool = False
    round: bool = False


DEFAULT_HARMONY = Harmony(front=False, round=False)

VOWEL_QUALITY: Dict[str, VowelQuality] = {
    "a": VowelQuality(False, False, False),
    "e": VowelQuality(True, False, False),
    "ı": VowelQuality(False, False, True),
    "i": VowelQuality(True, False, True),
    "o": VowelQuality(False, True, False),
    "ö": VowelQuality(True, True, False),
    "u": VowelQuality(False, True, True),
    "ü": VowelQuality(True, True, True),
}

QUALITY_VOWEL: Dict[VowelQuality, str] = {
    quality: vowel for vowel, quality in VOWEL_QUALITY.items()
}

# placeholder -> (voiced, voiceless)
CONSONANT_FORMS: Dict[Placeholder, Tuple[str, str]] = {
    Placeholder.B: ("b", "p"),
    Placeholder.C: ("c", "ç"),
    Placeholder.D: ("d", "t"),
    Placeholder.K: ("g", "k"),
}


# ============================================================================
# CLASSIFICATION
# ============================================================================


def is_exact(letter: Optional[Letter]) -> bool:
    """True for a resolved (lowercase) letter."""
    return isinstance(letter, str) and letter != ""


def is_vowel(letter: Optional[Letter]) -> bool:
    """True for exact vowels and the A/I placeholders."""
    if isinstance(letter, Placeholder):
        return letter in VOWEL_PLACEHOLDERS
    return letter in EXACT_VOWELS


def is_voiceless(letter: Optional[Letter]) -> bool:
    return isinstance(letter, str) and letter in VOICELESS


def to_letter(char: str) -> Letter:
    """Map a notation character to an exact letter or a Placeholder."""
    if char.isupper():
        return Placeholder(char)
    return char


def letters_to_text(letters: Sequence[Letter]) -> str:
    """Render letters back to notation, placeholders in uppercase."""
    return "".join(str(letter) for letter in letters)


def vowel_harmony(vowel: str) -> Harmony:
    """Harmony context contributed by an exact vowel."""
    quality = VOWEL_QUALITY[vowel]
    return Harmony(front=quality.front, round=quality.round)


# ============================================================================
# RESOLUTION RULES
# ============================================================================


def resolve_vowel(vowel: Letter, harmony: Harmony) -> Tuple[str, Harmony]:
    """
    Resolve a vowel against the current harmony context.

    A takes only the backness of the context (a/e); I takes backness and
    roundness (ı/i/u/ü). An exact vowel is returned unchanged.

    Args:
        vowel: Exact vowel or Placeholder.A / Placeholder.I
        harmony: Context from the most recent vowel

    Returns:
        (resolved_vowel, new_harmony) where new_harmony is the context
        contributed by the resolved vowel
    """
    if vowel is Placeholder.A:
        resolved = QUALITY_VOWEL[VowelQuality(harmony.front, False, False)]
    elif vowel is Placeholder.I:
        resolved = QUALITY_VOWEL[VowelQuality(harmony.front, harmony.round, True)]
    else:
        resolved = vowel
    return resolved, vowel_harmony(resolved)


def resolve_consonant(
    prev: Optional[Letter], consonant: Letter, next_: Optional[Letter]
) -> str:
    """
    Resolve B/C/D/K/N from its neighbours.

    Voiced when a vowel follows and a non-voiceless phoneme precedes,
    voiceless otherwise (including at either word boundary). A voiced K
    after a vowel becomes ğ. N becomes n when anything follows it and
    disappears (empty string) at the end of the word.

    Args:
        prev: Preceding letter, or None at the start of the word
        consonant: Placeholder to resolve; exact letters pass through
        next_: Following letter, or None at the end of the word

    Returns:
        The exact consonant, or "" for a dropped nasal
    """
    if consonant is Placeholder.N:
        return "" if next_ is None else "n"
    if consonant not in CONSONANT_FORMS:
        return consonant

    voiced, voiceless = CONSONANT_FORMS[consonant]
    if is_vowel(next_) and prev is not None and not is_voiceless(prev):
        resolved = voiced
    else:
        resolved = voiceless
    if resolved == "g" and is_vowel(prev):
        resolved = "ğ"
    return resolved
