"""Tests for the harmony and consonant mutation rules."""

import pytest

from turkish_phonology import (
    DEFAULT_HARMONY,
    Harmony,
    Placeholder,
    is_vowel,
    letters_to_text,
    resolve_consonant,
    resolve_vowel,
    to_letter,
    vowel_harmony,
)

BACK_FLAT = Harmony(front=False, round=False)
FRONT_FLAT = Harmony(front=True, round=False)
BACK_ROUND = Harmony(front=False, round=True)
FRONT_ROUND = Harmony(front=True, round=True)


def test_vowel_classes():
    assert all(is_vowel(v) for v in "aeıioöuü")
    assert is_vowel(Placeholder.A)
    assert is_vowel(Placeholder.I)
    for p in (Placeholder.B, Placeholder.C, Placeholder.D, Placeholder.K, Placeholder.N):
        assert not is_vowel(p)
    assert not is_vowel("k")
    assert not is_vowel(None)


def test_placeholder_is_distinct_from_exact_letter():
    assert to_letter("A") is Placeholder.A
    assert to_letter("a") == "a"
    assert Placeholder.A != "A"
    assert letters_to_text(("g", "i", Placeholder.D)) == "giD"


@pytest.mark.parametrize(
    "harmony, low, high",
    [
        (BACK_FLAT, "a", "ı"),
        (FRONT_FLAT, "e", "i"),
        (BACK_ROUND, "a", "u"),
        (FRONT_ROUND, "e", "ü"),
    ],
)
def test_resolve_vowel_placeholders(harmony, low, high):
    assert resolve_vowel(Placeholder.A, harmony)[0] == low
    assert resolve_vowel(Placeholder.I, harmony)[0] == high


def test_resolved_vowel_sets_new_harmony():
    vowel, harmony = resolve_vowel(Placeholder.A, FRONT_ROUND)
    assert vowel == "e"
    assert harmony == FRONT_FLAT


def test_exact_vowel_passes_through():
    assert resolve_vowel("o", FRONT_FLAT) == ("o", BACK_ROUND)
    assert vowel_harmony("ü") == FRONT_ROUND
    assert DEFAULT_HARMONY == BACK_FLAT


@pytest.mark.parametrize(
    "prev, consonant, next_, expected",
    [
        ("r", Placeholder.D, "a", "d"),
        ("ş", Placeholder.D, "ı", "t"),
        ("r", Placeholder.D, "l", "t"),
        ("r", Placeholder.D, None, "t"),
        (None, Placeholder.B, "a", "p"),
        ("a", Placeholder.B, "ı", "b"),
        ("n", Placeholder.C, "ı", "c"),
        ("t", Placeholder.C, "ı", "ç"),
        ("n", Placeholder.K, "e", "g"),
        ("u", Placeholder.K, "a", "ğ"),
        ("u", Placeholder.K, Placeholder.A, "ğ"),
        ("a", Placeholder.K, None, "k"),
        ("ö", Placeholder.K, "l", "k"),
    ],
)
def test_resolve_consonant(prev, consonant, next_, expected):
    assert resolve_consonant(prev, consonant, next_) == expected


def test_nasal_realized_only_before_something():
    assert resolve_consonant("u", Placeholder.N, "l") == "n"
    assert resolve_consonant("u", Placeholder.N, Placeholder.I) == "n"
    assert resolve_consonant("u", Placeholder.N, None) == ""


def test_exact_consonant_unchanged():
    assert resolve_consonant("a", "g", "a") == "g"
    assert resolve_consonant("a", "k", "a") == "k"
