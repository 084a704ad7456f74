# bojkit

Small, tested solutions to introductory judge problems. Each one is a plain
Python function, and a `bojkit` command solves any of them by number from
standard input.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Modules

- `bojkit.arrays`: `insert(values, idx, num)` and `erase(values, idx)` return
  a new list with an element added or removed by position and raise
  `IndexError` for a position out of range. `insert` at the last index
  (other than 0) appends after the last element. `iterator_demo()` walks a
  cursor through a short list while editing around it and returns what it
  saw and the final list. `has_pair_summing_to_100(numbers)` tells whether
  two of the numbers (or a single 50) add up to 100, and raises
  `ValueError` for numbers outside 0..100.
- `bojkit.basics`: `add`, `arithmetic` (sum, difference, product, and
  quotient and remainder truncated toward zero), `hello_world`, `cat_art`,
  `is_leap_year`, `grade`, `dice_prize`, `yut_result`, `phone_plan`,
  `numbers_between` and `sum_pairs`.
- `bojkit.stars`: star patterns returned as strings: `left_triangle`,
  `right_triangle`, `inverted_left_triangle`, `inverted_right_triangle`,
  `pyramid`, `diamond`, `bowtie` and `hourglass`.
- `bojkit.counting`: frequency problems: `count_value`, `letter_counts`,
  `is_strfry`, `rooms_needed`, `digit_sets`, `anagram_removals`,
  `digit_counts` and `count_pairs_with_sum`. Functions that take words
  accept lowercase letters only and raise `ValueError` otherwise.
- `bojkit.ordering`: `reverse_ranges` (reverse ranges of the cards 1..20),
  `max_with_position`, `odd_summary` (returns `None` when there are no
  positive odd values), `mean_and_median` and `sort_three`.
- `bojkit.editor`: `Editor`, a line of text with a cursor that starts at the
  end. It has `left()`, `right()`, `backspace()`, `insert(char)` and
  `execute(command)` for the commands `L`, `D`, `B` and `P x`, and the
  `text` and `cursor` properties. `run_editor(text, commands)` applies a
  whole list of commands and returns the resulting text.
- `bojkit.cli`: `solve(problem, text)` returns the output for a problem
  number and its input text; `main()` is the `bojkit` command.

## Example

```python
from bojkit.basics import is_leap_year
from bojkit.stars import pyramid
from bojkit.editor import run_editor

is_leap_year(2000)                         # True
print(pyramid(3))
run_editor("abcd", ["P x", "L", "P y"])    # 'abcdyx'
```

## Command line

The `bojkit` command takes a problem number, reads that problem's input
from standard input and writes the answer to standard output:

    echo "1 2" | bojkit 1000

Input is read as whitespace-separated tokens. An unknown problem number or
malformed input prints an error to standard error and exits with status 1.

Problems the command knows:

| Number | Function |
| --- | --- |
| 1000 | `add` |
| 10093 | `numbers_between` |
| 10171 | `cat_art` |
| 10869 | `arithmetic` |
| 1267 | `phone_plan` |
| 15552 | `sum_pairs` |
| 2480 | `dice_prize` |
| 2490 | `yut_result` (three throws) |
| 2557 | `hello_world` |
| 2753 | `is_leap_year` |
| 9498 | `grade` |
| 2438, 2439, 2440, 2441 | `left_triangle`, `right_triangle`, `inverted_left_triangle`, `inverted_right_triangle` |
| 2442, 2443, 2445, 2446 | `pyramid`, `diamond`, `bowtie`, `hourglass` |
| 10807 | `count_value` |
| 10808 | `letter_counts` |
| 11328 | `is_strfry` |
| 13300 | `rooms_needed` |
| 1475 | `digit_sets` |
| 1919 | `anagram_removals` |
| 2577 | `digit_counts` |
| 3273 | `count_pairs_with_sum` |
| 10804 | `reverse_ranges` |
| 2562 | `max_with_position` |
| 2576 | `odd_summary` |
| 2587 | `mean_and_median` |
| 2752 | `sort_three` |
| 1406 | `run_editor` |

## Not included

The functions in `bojkit.arrays` have no problem number and can only be
used from Python, not through the `bojkit` command.