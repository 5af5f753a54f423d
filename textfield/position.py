"""Line/column positions within a text field.

A Position is a plain value. Its column is allowed to run past the end of
its line so that vertical movement can remember the column the caret came
from; call `constrained()` before using a position to index text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, order=True)
class Position:
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        return f"({self.line}, {self.column})"

    @staticmethod
    def _line_length(lines: Sequence[str], line: int) -> int:
        assert 0 <= line < len(lines), f"line {line} outside document of {len(lines)} lines"
        return len(lines[line])

    def left(self, lines: Sequence[str]) -> Position:
        """Return the position one character to the left.

        A sticky column past the end of the line snaps to the end of the
        line before moving.
        """
        if self.column == 0:
            if self.line == 0:
                return self
            previous = self.line - 1
            return Position(previous, self._line_length(lines, previous))
        length = self._line_length(lines, min(self.line, len(lines) - 1))
        if self.column > length:
            return Position(self.line, length).left(lines)
        return Position(self.line, self.column - 1)

    def right(self, lines: Sequence[str]) -> Position:
        """Return the position one character to the right."""
        if self.column < self._line_length(lines, self.line):
            return Position(self.line, self.column + 1)
        if self.line < len(lines) - 1:
            return Position(self.line + 1, 0)
        return self

    def up(self) -> Position:
        """Return the position one line up, keeping the column."""
        if self.line == 0:
            return Position(0, 0)
        return Position(self.line - 1, self.column)

    def down(self, lines: Sequence[str]) -> Position:
        """Return the position one line down, keeping the column.

        On the last line this moves to the end of the text instead.
        """
        last = len(lines) - 1
        if self.line >= last:
            return Position(last, self._line_length(lines, last))
        return Position(self.line + 1, self.column)

    def constrained(self, lines: Sequence[str]) -> Position:
        """Return a copy clamped to the lines and columns of the document."""
        line = min(max(self.line, 0), len(lines) - 1)
        column = min(max(self.column, 0), len(lines[line]))
        return Position(line, column)

    def min(self, other: Position) -> Position:
        return self if self < other else other

    def max(self, other: Position) -> Position:
        return self if self > other else other
