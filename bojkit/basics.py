"""Introductory input/output and conditional exercises."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import NamedTuple

_CAT = "\\    /\\\n )  ( ')\n(  /  )\n \\(__)|"


def add(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return a + b


class Arithmetic(NamedTuple):
    """Results of the five basic integer operations."""

    total: int
    difference: int
    product: int
    quotient: int
    remainder: int


def _truncated_divmod(a: int, b: int) -> tuple[int, int]:
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - b * quotient


def arithmetic(a: int, b: int) -> Arithmetic:
    """Sum, difference, product, and quotient/remainder truncated toward zero."""
    quotient, remainder = _truncated_divmod(a, b)
    return Arithmetic(a + b, a - b, a * b, quotient, remainder)


def hello_world() -> str:
    """Return the classic greeting."""
    return "Hello World!"


def cat_art() -> str:
    """Return the ASCII cat drawing."""
    return _CAT


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def grade(score: int) -> str:
    """Letter grade for a numeric score."""
    if score >= 90:
        return "A"
    if score >= 80:
        return "B"
    if score >= 70:
        return "C"
    if score >= 60:
        return "D"
    return "F"


def dice_prize(a: int, b: int, c: int) -> int:
    """Prize money for a roll of three dice."""
    if a == b == c:
        return 10000 + a * 1000
    if a == b or a == c:
        return 1000 + a * 100
    if b == c:
        return 1000 + b * 100
    return max(a, b, c) * 100


_YUT = {0: "D", 1: "C", 2: "B", 3: "A"}


def yut_result(flags: Sequence[int]) -> str:
    """Name the yut throw from four sticks (1 for face up, 0 for face down)."""
    if len(flags) != 4:
        raise ValueError("a yut throw has exactly four sticks")
    return _YUT.get(sum(flags), "E")


def phone_plan(durations: Iterable[int]) -> tuple[str, int]:
    """Pick the cheaper of the Y and M plans; ``"Y M"`` when they tie."""
    y_cost = m_cost = 0
    for duration in durations:
        y_cost += (duration // 30 + 1) * 10
        m_cost += (duration // 60 + 1) * 15
    if y_cost > m_cost:
        return "M", m_cost
    if y_cost == m_cost:
        return "Y M", y_cost
    return "Y", y_cost


def numbers_between(a: int, b: int) -> list[int]:
    """Integers strictly between ``a`` and ``b``, in increasing order."""
    low, high = min(a, b), max(a, b)
    return list(range(low + 1, high))


def sum_pairs(pairs: Iterable[tuple[int, int]]) -> list[int]:
    """Sum each pair."""
    return [a + b for a, b in pairs]