#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Turkish Inflection - Agglutination Library

Builds a surface word from a root and an ordered list of suffixes while
respecting phonotactics (vowel harmony, consonant mutation).

Each suffix has a body that is always included and an optional head
and tail letter:

- A head is realized only when it is the opposite class (vowel or
  consonant) of the stem's final letter: (y)A gives araba + ya but
  ev + e.
- The only tail is the nasal N, written (n). It stays unresolved at the
  end of the stem and becomes n only if another suffix follows it
  (bu(n) + (y)I -> bunu, bu(n) alone -> bu).
- Two vowels never meet: a vowel-initial body drops the stem's final
  vowel (başla + Iyor -> başlıyor).

Sections:
1. Data model (Root, Stem, Suffix, Word)
2. Attaching a suffix
3. Finalizing and folding
"""

from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from turkish_phonology import (
    CONSONANT_PLACEHOLDERS,
    DEFAULT_HARMONY,
    Harmony,
    Letter,
    Placeholder,
    is_exact,
    is_vowel,
    letters_to_text,
    resolve_consonant,
    resolve_vowel,
    vowel_harmony,
)

# ============================================================================
# DATA MODEL
# ============================================================================


@dataclass(frozen=True)
class Stem:
    """
    A root plus zero or more attached suffixes.

    Every letter is exact except possibly the last, which may still be
    one of B/C/D/K/N until the next suffix (or the end of the word)
    decides it.
    """

    letters: Tuple[Letter, ...]

    def __str__(self) -> str:
        return letters_to_text(self.letters)

    def __len__(self) -> int:
        return len(self.letters)


@dataclass(frozen=True)
class Root(Stem):
    """A bare lexical stem, e.g. yap, giD (git/gid-), buN (bu/bun-)."""

    def to_stem(self) -> Stem:
        return Stem(self.letters)


@dataclass(frozen=True)
class Suffix:
    """
    An optional single-letter head, a non-empty body and an optional
    tail. Only Placeholder.N is a valid tail.
    """

    body: Tuple[Letter, ...]
    head: Optional[Letter] = None
    tail: Optional[Placeholder] = None

    def __str__(self) -> str:
        head = f"({self.head})" if self.head is not None else ""
        tail = "(n)" if self.tail is not None else ""
        return head + letters_to_text(self.body) + tail


@dataclass(frozen=True)
class Word:
    """A fully resolved surface form."""

    letters: Tuple[str, ...]

    def __str__(self) -> str:
        return "".join(self.letters)

    def __len__(self) -> int:
        return len(self.letters)


# ============================================================================
# ATTACHING A SUFFIX
# ============================================================================


def _last_exact_harmony(letters: Sequence[Letter], end: int) -> Harmony:
    """Harmony of the last exact vowel in letters[:end], back/flat if none."""
    for i in range(end - 1, -1, -1):
        letter = letters[i]
        if is_exact(letter) and is_vowel(letter):
            return vowel_harmony(letter)
    return DEFAULT_HARMONY


def attach(stem: Stem, suffix: Suffix) -> Stem:
    """
    Attach a suffix to a stem and resolve the new material.

    The stem's own trailing B/C/D/K/N and every placeholder of the suffix
    are resolved, except the new final letter, which stays open for the
    next suffix or for to_word(). Neither input is modified.

    Args:
        stem: Root or partially suffixed form (non-empty)
        suffix: Suffix to attach

    Returns:
        A new Stem
    """
    buf: List[Letter] = list(stem.letters)

    # Optional head only when it is the opposite class of the final letter
    if suffix.head is not None and is_vowel(buf[-1]) != is_vowel(suffix.head):
        buf.append(suffix.head)

    # No vowel-vowel sequences (-Iyor)
    if is_vowel(buf[-1]) and suffix.body and is_vowel(suffix.body[0]):
        buf.pop()

    buf.extend(suffix.body)
    if suffix.tail is not None:
        buf.append(Placeholder.N)

    # Resolution starts at the stem's last position: its pending
    # consonant (or, after elision, the first letter of the body)
    start = len(stem.letters) - 1
    harmony = _last_exact_harmony(buf, start + 1)

    for i in range(start, len(buf) - 1):
        letter = buf[i]
        if is_vowel(letter):
            buf[i], harmony = resolve_vowel(letter, harmony)
        elif letter in CONSONANT_PLACEHOLDERS or letter is Placeholder.N:
            prev = buf[i - 1] if i > 0 else None
            buf[i] = resolve_consonant(prev, letter, buf[i + 1])

    if buf[-1] in (Placeholder.A, Placeholder.I):
        buf[-1], _ = resolve_vowel(buf[-1], harmony)

    return Stem(tuple(buf))


# ============================================================================
# FINALIZING AND FOLDING
# ============================================================================


def to_word(stem: Stem) -> Word:
    """
    Resolve the stem's final letter at the end of the word.

    A trailing B/C/D/K is devoiced, a trailing N is dropped; anything
    else is already exact. Calling this on a fully resolved stem is a
    no-op copy.
    """
    letters = list(stem.letters)
    last = letters[-1]
    if isinstance(last, Placeholder) and not is_vowel(last):
        prev = letters[-2] if len(letters) > 1 else None
        resolved = resolve_consonant(prev, last, None)
        letters = letters[:-1] + ([resolved] if resolved else [])
    return Word(tuple(str(letter) for letter in letters))


def _as_stem(root: Stem) -> Stem:
    return root.to_stem() if isinstance(root, Root) else root


def iter_stems(root: Stem, suffixes: Iterable[Suffix]) -> Iterator[Stem]:
    """Yield the root as a Stem, then the stem after each suffix."""
    stem = _as_stem(root)
    yield stem
    for suffix in suffixes:
        stem = attach(stem, suffix)
        yield stem


def inflect(root: Stem, suffixes: Iterable[Suffix]) -> Word:
    """
    Fold suffixes onto a root left to right and finalize.

    Examples:
        yap + Iyor + (y)sA + (I)m -> yapıyorsam
        bu(n) + lAr + (n)In + ki + lAr + DAn -> bunlarınkilerden
    """
    return to_word(reduce(attach, suffixes, _as_stem(root)))
