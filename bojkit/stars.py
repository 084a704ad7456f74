"""Star pattern drawings."""

from __future__ import annotations


def left_triangle(n: int) -> str:
    """Left-aligned triangle growing from one star to ``n``."""
    return "\n".join("*" * (i + 1) for i in range(n))


def right_triangle(n: int) -> str:
    """Right-aligned triangle growing from one star to ``n``."""
    return "\n".join(" " * (n - i - 1) + "*" * (i + 1) for i in range(n))


def inverted_left_triangle(n: int) -> str:
    """Left-aligned triangle shrinking from ``n`` stars to one."""
    return "\n".join("*" * (n - i) for i in range(n))


def inverted_right_triangle(n: int) -> str:
    """Right-aligned triangle shrinking from ``n`` stars to one."""
    return "\n".join(" " * i + "*" * (n - i) for i in range(n))


def _pyramid_lines(n: int) -> list[str]:
    return [" " * (n - i - 1) + "*" * (2 * i + 1) for i in range(n)]


def pyramid(n: int) -> str:
    """Centred pyramid with odd star counts, ``n`` rows tall."""
    return "\n".join(_pyramid_lines(n))


def diamond(n: int) -> str:
    """Diamond ``2n - 1`` rows tall; every row ends with a newline."""
    top = _pyramid_lines(n)
    bottom = [" " * (i + 1) + "*" * (2 * (n - i - 1) - 1) for i in range(n - 1)]
    return "".join(line + "\n" for line in top + bottom)


def bowtie(n: int) -> str:
    """Bow tie ``2n - 1`` rows tall; the last row has no newline unless ``n`` is 1."""
    top = ["*" * i + " " * (2 * (n - i)) + "*" * i for i in range(1, n + 1)]
    bottom = ["*" * (n - i) + " " * (2 * i) + "*" * (n - i) for i in range(1, n)]
    return "".join(line + "\n" for line in top) + "\n".join(bottom)


def hourglass(n: int) -> str:
    """Hourglass ``2n - 1`` rows tall; every row ends with a newline."""
    top = [" " * i + "*" * (2 * (n - i) - 1) for i in range(n)]
    bottom = [" " * (n - i - 1) + "*" * (2 * i + 1) for i in range(1, n)]
    return "".join(line + "\n" for line in top + bottom)