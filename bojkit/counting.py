"""Counting-array exercises."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Iterable

_LETTERS = string.ascii_lowercase


def _check_lowercase(word: str) -> None:
    if any(ch not in _LETTERS for ch in word):
        raise ValueError(f"expected lowercase letters only: {word!r}")


def count_value(values: Iterable[int], x: int) -> int:
    """How many of the values equal ``x``; all must lie in -100..100."""
    counts = Counter()
    for value in values:
        if not -100 <= value <= 100:
            raise ValueError(f"value {value} outside -100..100")
        counts[value] += 1
    if not -100 <= x <= 100:
        raise ValueError(f"value {x} outside -100..100")
    return counts[x]


def letter_counts(word: str) -> list[int]:
    """Occurrences of each letter a..z in a lowercase word."""
    _check_lowercase(word)
    counts = Counter(word)
    return [counts[letter] for letter in _LETTERS]


def is_strfry(a: str, b: str) -> bool:
    """Whether ``b`` is a rearrangement of ``a``."""
    _check_lowercase(a)
    _check_lowercase(b)
    return Counter(a) == Counter(b)


def rooms_needed(students: Iterable[tuple[int, int]], k: int) -> int:
    """Rooms for students given as (sex, grade), at most ``k`` per room.

    Each room holds one sex and one grade; sex is 0 or 1, grade 1..6.
    """
    if k <= 0:
        raise ValueError("room capacity must be positive")
    groups: Counter[tuple[int, int]] = Counter()
    for sex, grade in students:
        if sex not in (0, 1):
            raise ValueError(f"sex must be 0 or 1, got {sex}")
        if not 1 <= grade <= 6:
            raise ValueError(f"grade must be in 1..6, got {grade}")
        groups[sex, grade] += 1
    return sum(-(-size // k) for size in groups.values())


def digit_sets(room: int) -> int:
    """Digit sets needed to spell the room number; 6 and 9 stand in for each other."""
    if room <= 0:
        return 0
    counts = Counter(int(d) for d in str(room))
    shared = counts.pop(6, 0) + counts.pop(9, 0)
    return max([*counts.values(), (shared + 1) // 2])


def anagram_removals(a: str, b: str) -> int:
    """Letters to delete from both words so they become anagrams."""
    _check_lowercase(a)
    _check_lowercase(b)
    ca, cb = Counter(a), Counter(b)
    return sum(((ca - cb) + (cb - ca)).values())


def digit_counts(a: int, b: int, c: int) -> list[int]:
    """Occurrences of each digit 0..9 in ``a * b * c``."""
    product = a * b * c
    if product < 0:
        raise ValueError("the product must not be negative")
    counts = Counter(str(product))
    return [counts[d] for d in string.digits]


def count_pairs_with_sum(values: list[int], x: int) -> int:
    """Number of pairs of values that add up to ``x``."""
    present = set(values)
    hits = sum(1 for value in values if x - value in present)
    return hits // 2