"""A line editor with a cursor, driven by single-letter commands."""

from __future__ import annotations

from collections.abc import Iterable


class Editor:
    """Text with a cursor that starts after the last character."""

    def __init__(self, text: str) -> None:
        self._before = list(text)
        self._after: list[str] = []  # characters right of the cursor, reversed

    @property
    def text(self) -> str:
        """The whole text."""
        return "".join(self._before) + "".join(reversed(self._after))

    @property
    def cursor(self) -> int:
        """Number of characters left of the cursor."""
        return len(self._before)

    def __str__(self) -> str:
        return self.text

    def left(self) -> None:
        """Move the cursor one place left; nothing happens at the start."""
        if self._before:
            self._after.append(self._before.pop())

    def right(self) -> None:
        """Move the cursor one place right; nothing happens at the end."""
        if self._after:
            self._before.append(self._after.pop())

    def backspace(self) -> None:
        """Delete the character left of the cursor, if any."""
        if self._before:
            self._before.pop()

    def insert(self, char: str) -> None:
        """Insert one character left of the cursor."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        self._before.append(char)

    def execute(self, command: str) -> None:
        """Run one of ``L``, ``D``, ``B`` or ``P x``."""
        parts = command.split()
        if parts == ["L"]:
            self.left()
        elif parts == ["D"]:
            self.right()
        elif parts == ["B"]:
            self.backspace()
        elif len(parts) == 2 and parts[0] == "P":
            self.insert(parts[1])
        else:
            raise ValueError(f"unknown editor command {command!r}")


def run_editor(text: str, commands: Iterable[str]) -> str:
    """Apply the commands to the text and return the result."""
    editor = Editor(text)
    for command in commands:
        editor.execute(command)
    return editor.text