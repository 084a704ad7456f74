"""Command line: solve a numbered exercise from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from bojkit.basics import (
    add,
    arithmetic,
    cat_art,
    dice_prize,
    grade,
    hello_world,
    is_leap_year,
    numbers_between,
    phone_plan,
    sum_pairs,
    yut_result,
)
from bojkit.counting import (
    anagram_removals,
    count_pairs_with_sum,
    count_value,
    digit_counts,
    digit_sets,
    is_strfry,
    letter_counts,
    rooms_needed,
)
from bojkit.editor import run_editor
from bojkit.ordering import (
    max_with_position,
    mean_and_median,
    odd_summary,
    reverse_ranges,
    sort_three,
)
from bojkit.stars import (
    bowtie,
    diamond,
    hourglass,
    inverted_left_triangle,
    inverted_right_triangle,
    left_triangle,
    pyramid,
    right_triangle,
)


class _Reader:
    """Whitespace-separated tokens of the input."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.number(), self.number()) for _ in range(count)]


def _spaced(values) -> str:
    return "".join(f"{value} " for value in values)


def _lines(values) -> str:
    return "".join(f"{value}\n" for value in values)


def _between(r: _Reader) -> str:
    between = numbers_between(r.number(), r.number())
    if not between:
        return "0"
    return f"{len(between)}\n" + _spaced(between)


def _phone(r: _Reader) -> str:
    plan, cost = phone_plan(r.numbers(r.number()))
    return f"{plan} {cost}"


def _strfry(r: _Reader) -> str:
    count = r.number()
    return "".join(
        ("Possible" if is_strfry(r.word(), r.word()) else "Impossible") + "\n"
        for _ in range(count)
    )


def _count_value(r: _Reader) -> str:
    values = r.numbers(r.number())
    return str(count_value(values, r.number()))


def _rooms(r: _Reader) -> str:
    count, capacity = r.number(), r.number()
    return str(rooms_needed(r.pairs(count), capacity))


def _pair_sum(r: _Reader) -> str:
    values = r.numbers(r.number())
    return str(count_pairs_with_sum(values, r.number()))


def _max_position(r: _Reader) -> str:
    value, position = max_with_position(r.numbers(9))
    return f"{value}\n{position}"


def _odds(r: _Reader) -> str:
    summary = odd_summary(r.numbers(7))
    if summary is None:
        return "-1"
    return f"{summary.total}\n{summary.smallest}"


def _mean_median(r: _Reader) -> str:
    mean, median = mean_and_median(r.numbers(5))
    return f"{mean}\n{median}"


def _editor(r: _Reader) -> str:
    text = r.word()
    commands = []
    for _ in range(r.number()):
        name = r.word()
        commands.append(f"P {r.word()}" if name == "P" else name)
    return run_editor(text, commands)


_SOLVERS: dict[str, Callable[[_Reader], str]] = {
    "1000": lambda r: str(add(r.number(), r.number())),
    "10093": _between,
    "10171": lambda r: cat_art(),
    "10869": lambda r: _lines(arithmetic(r.number(), r.number())),
    "1267": _phone,
    "15552": lambda r: _lines(sum_pairs(r.pairs(r.number()))),
    "2480": lambda r: str(dice_prize(*r.numbers(3))),
    "2490": lambda r: "".join(yut_result(r.numbers(4)) + "\n" for _ in range(3)),
    "2557": lambda r: hello_world(),
    "2753": lambda r: "1" if is_leap_year(r.number()) else "0",
    "9498": lambda r: grade(r.number()),
    "2438": lambda r: left_triangle(r.number()),
    "2439": lambda r: right_triangle(r.number()),
    "2440": lambda r: inverted_left_triangle(r.number()),
    "2441": lambda r: inverted_right_triangle(r.number()),
    "2442": lambda r: pyramid(r.number()),
    "2443": lambda r: diamond(r.number()),
    "2445": lambda r: bowtie(r.number()),
    "2446": lambda r: hourglass(r.number()),
    "10807": _count_value,
    "10808": lambda r: _spaced(letter_counts(r.word())),
    "11328": _strfry,
    "13300": _rooms,
    "1475": lambda r: str(digit_sets(r.number())),
    "1919": lambda r: str(anagram_removals(r.word(), r.word())),
    "2577": lambda r: _lines(digit_counts(*r.numbers(3))),
    "3273": _pair_sum,
    "10804": lambda r: _spaced(reverse_ranges(r.pairs(10))),
    "2562": _max_position,
    "2576": _odds,
    "2587": _mean_median,
    "2752": lambda r: _spaced(sort_three(r.numbers(3))),
    "1406": _editor,
}


def solve(problem: str | int, text: str) -> str:
    """Solve the numbered problem for the given input text and return its output."""
    key = str(problem).strip()
    solver = _SOLVERS.get(key)
    if solver is None:
        raise ValueError(f"unknown problem {problem!r}")
    return solver(_Reader(text))


def main(argv: Sequence[str] | None = None) -> int:
    """Read the problem input from standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="bojkit", description="Solve a numbered exercise from standard input."
    )
    parser.add_argument("problem", help="problem number, e.g. 1000")
    args = parser.parse_args(argv)
    try:
        output = solve(args.problem, sys.stdin.read())
    except ValueError as exc:
        print(f"bojkit: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())