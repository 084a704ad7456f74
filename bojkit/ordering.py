"""Ordering, reversal and selection exercises."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import NamedTuple

_CARD_COUNT = 20


def reverse_ranges(ranges: Iterable[tuple[int, int]]) -> list[int]:
    """Lay out cards 1..20 and reverse each 1-based inclusive range in turn."""
    cards = list(range(1, _CARD_COUNT + 1))
    for start, end in ranges:
        if not 1 <= start <= end <= _CARD_COUNT:
            raise ValueError(f"invalid range {start}..{end} for {_CARD_COUNT} cards")
        cards[start - 1 : end] = cards[start - 1 : end][::-1]
    return cards


class MaxPosition(NamedTuple):
    """The largest value and its 1-based position."""

    value: int
    position: int


def max_with_position(values: Iterable[int]) -> MaxPosition:
    """Largest positive value and the 1-based position of its first occurrence.

    When no value is positive the result is ``(0, 0)``.
    """
    best = MaxPosition(0, 0)
    for position, value in enumerate(values, start=1):
        if value > best.value:
            best = MaxPosition(value, position)
    return best


class OddSummary(NamedTuple):
    """Sum and minimum of the odd values."""

    total: int
    smallest: int


def odd_summary(values: Iterable[int]) -> OddSummary | None:
    """Sum and smallest of the positive odd values, or ``None`` if there are none."""
    odds = [value for value in values if value > 0 and value % 2 == 1]
    if not odds:
        return None
    return OddSummary(sum(odds), min(odds))


class MeanMedian(NamedTuple):
    """Integer mean (truncated toward zero) and median."""

    mean: int
    median: int


def mean_and_median(values: Sequence[int]) -> MeanMedian:
    """Truncated integer mean and the middle element after sorting."""
    if not values:
        raise ValueError("at least one value is required")
    total = sum(values)
    mean = abs(total) // len(values)
    if total < 0:
        mean = -mean
    ordered = sorted(values)
    return MeanMedian(mean, ordered[len(ordered) // 2])


def sort_three(values: Sequence[int]) -> list[int]:
    """The three values in ascending order."""
    if len(values) != 3:
        raise ValueError(f"expected exactly three values, got {len(values)}")
    return sorted(values)