"""List insertion and removal exercises and a pair-sum check."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import NamedTuple


def insert(values: Sequence[int], idx: int, num: int) -> list[int]:
    """Return a copy of ``values`` with ``num`` inserted at ``idx``.

    An index that names the last element (other than the first) places
    ``num`` after it, at the very end, rather than in front of it.
    """
    result = list(values)
    if not 0 <= idx <= len(result):
        raise IndexError(f"insert index {idx} out of range for length {len(result)}")
    if idx != 0 and idx == len(result) - 1:
        result.append(num)
    else:
        result.insert(idx, num)
    return result


def erase(values: Sequence[int], idx: int) -> list[int]:
    """Return a copy of ``values`` without the element at ``idx``."""
    result = list(values)
    if not 0 <= idx < len(result):
        raise IndexError(f"erase index {idx} out of range for length {len(result)}")
    del result[idx]
    return result


class IteratorDemo(NamedTuple):
    """What the cursor demo observed and the list it left behind."""

    seen: int
    items: list[int]


def iterator_demo() -> IteratorDemo:
    """Walk a cursor through a short list while editing around it."""
    items = [1, 2]
    cursor = 0  # on the element 1

    items.insert(0, 10)
    cursor += 1
    seen = items[cursor]

    items.append(5)
    items.insert(cursor, 6)  # in front of the cursor
    cursor += 1

    cursor += 1  # step forward onto the element 2
    del items[cursor]
    return IteratorDemo(seen, items)


def has_pair_summing_to_100(numbers: Iterable[int]) -> bool:
    """Tell whether two of the numbers (or a single 50) add up to 100."""
    seen: set[int] = set()
    for number in numbers:
        if not 0 <= number <= 100:
            raise ValueError(f"number {number} outside 0..100")
        seen.add(number)
        if 100 - number in seen:
            return True
    return False