import logging
from abc import ABC, abstractmethod
from typing import Optional

from .position import Position

logger = logging.getLogger(__name__)


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


class TextView(ABC):
    _model: "Optional[TextField]" = None

    @property
    def model(self):
        assert self._model
        return self._model

    @abstractmethod
    def render(self):
        """Recompute whatever the view derives from the model.

        Called after every navigation and edit. The view may assume the
        cursor and selection marker are unconstrained and must clamp them
        before use.

        """


class TextField:
    lines: list[str]
    cursor: Position
    selection_marker: Position
    view: Optional[TextView]

    def __init__(self, text: str = "", view: Optional[TextView] = None):
        self.lines = _normalize_newlines(text).split("\n")
        self.cursor = Position()
        self.selection_marker = Position()
        self.view = view
        if view is not None:
            view._model = self

    @classmethod
    def from_lines(cls, lines: list[str], view: Optional[TextView] = None) -> "TextField":
        field = cls(view=view)
        field.lines = list(lines) if lines else [""]
        return field

    def _render(self):
        assert self.lines, "a text field always has at least one line"
        if self.view is not None:
            self.view.render()

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def constrained_cursor(self) -> Position:
        """The caret as it is displayed."""
        return self.cursor.constrained(self.lines)

    # --- Selection ---

    def has_selection(self) -> bool:
        return self.cursor.constrained(self.lines) != self.selection_marker.constrained(self.lines)

    def clear_selection(self):
        self.selection_marker = self.cursor

    def selection_span(self) -> tuple[Position, Position]:
        """Return the (first, last) ends of the selection, constrained."""
        cursor = self.cursor.constrained(self.lines)
        marker = self.selection_marker.constrained(self.lines)
        return cursor.min(marker), cursor.max(marker)

    def set_cursor(self, position: Position, extend: bool = False):
        """Place the cursor, or the moving end of the selection if extending."""
        if extend:
            if not self.has_selection():
                self.selection_marker = self.cursor.constrained(self.lines)
            self.selection_marker = position
        else:
            self.cursor = position
            self.clear_selection()
        self._render()

    def select_all(self):
        last = len(self.lines) - 1
        self.cursor = Position(0, 0)
        self.selection_marker = Position(last, len(self.lines[last]))
        self._render()

    # --- Navigation ---

    def left(self):
        if self.has_selection():
            self.cursor = self.cursor.min(self.selection_marker)
        else:
            self.cursor = self.cursor.left(self.lines)
        self.clear_selection()
        self._render()

    def right(self):
        if self.has_selection():
            self.cursor = self.cursor.max(self.selection_marker)
        else:
            self.cursor = self.cursor.right(self.lines)
        self.clear_selection()
        self._render()

    def up(self):
        if self.has_selection():
            moved = self.cursor.min(self.selection_marker).constrained(self.lines).up()
            self.cursor = Position(moved.line, self.cursor.column)
        else:
            self.cursor = self.cursor.up()
        self.clear_selection()
        self._render()

    def down(self):
        if self.has_selection():
            moved = self.cursor.max(self.selection_marker).constrained(self.lines).down(self.lines)
            self.cursor = Position(moved.line, self.cursor.column)
        else:
            self.cursor = self.cursor.down(self.lines)
        self.clear_selection()
        self._render()

    def home(self):
        """Move to the start of the cursor's line, collapsing any selection."""
        self.cursor = Position(self.constrained_cursor.line, 0)
        self.clear_selection()
        self._render()

    def end(self):
        """Move to the end of the cursor's line, collapsing any selection."""
        line = self.constrained_cursor.line
        self.cursor = Position(line, len(self.lines[line]))
        self.clear_selection()
        self._render()

    def _start_selection_if_needed(self):
        if not self.has_selection():
            self.selection_marker = self.cursor.constrained(self.lines)

    def select_left(self):
        self._start_selection_if_needed()
        self.selection_marker = self.selection_marker.left(self.lines)
        self._render()

    def select_right(self):
        self._start_selection_if_needed()
        self.selection_marker = self.selection_marker.right(self.lines)
        self._render()

    def select_up(self):
        self._start_selection_if_needed()
        self.selection_marker = self.selection_marker.up()
        self._render()

    def select_down(self):
        self._start_selection_if_needed()
        self.selection_marker = self.selection_marker.down(self.lines)
        self._render()

    # --- Editing ---

    def selected_text(self) -> str:
        """Get the currently selected text."""
        if not self.has_selection():
            return ""
        first, last = self.selection_span()

        if first.line == last.line:
            return self.lines[first.line][first.column:last.column]

        result = [self.lines[first.line][first.column:]]
        result.extend(self.lines[first.line + 1:last.line])
        result.append(self.lines[last.line][:last.column])
        return "\n".join(result)

    def delete_selection(self):
        """Delete the currently selected text."""
        if self._remove_selection():
            self._render()

    def _remove_selection(self) -> bool:
        """Delete the selected text without rendering. Returns whether anything was selected."""
        if not self.has_selection():
            return False
        first, last = self.selection_span()

        if first.line == last.line:
            line = self.lines[first.line]
            self.lines[first.line] = line[:first.column] + line[last.column:]
        else:
            self.lines[first.line] = (
                self.lines[first.line][:first.column] + self.lines[last.line][last.column:]
            )
            del self.lines[first.line + 1:last.line + 1]

        self.cursor = first
        self.selection_marker = first
        return True

    def delete_previous(self):
        """Delete the character before the cursor (backspace)."""
        if self.has_selection():
            self.delete_selection()
            return

        cursor = self.constrained_cursor
        if cursor.column > 0:
            line = self.lines[cursor.line]
            self.lines[cursor.line] = line[:cursor.column - 1] + line[cursor.column:]
            self.cursor = Position(cursor.line, cursor.column - 1)
        elif cursor.line > 0:
            # Join with the previous line, cursor at the join point
            previous = self.lines[cursor.line - 1]
            self.lines[cursor.line - 1] = previous + self.lines[cursor.line]
            del self.lines[cursor.line]
            self.cursor = Position(cursor.line - 1, len(previous))
            logger.debug("joined line %d into line %d", cursor.line, cursor.line - 1)
        else:
            return

        self.clear_selection()
        self._render()

    def delete_next(self):
        """Delete the character at the cursor (forward delete)."""
        if self.has_selection():
            self.delete_selection()
            return

        cursor = self.constrained_cursor
        line = self.lines[cursor.line]
        if cursor.column < len(line):
            self.lines[cursor.line] = line[:cursor.column] + line[cursor.column + 1:]
        elif cursor.line + 1 < len(self.lines):
            # Join with the next line, cursor stays put
            self.lines[cursor.line] = line + self.lines[cursor.line + 1]
            del self.lines[cursor.line + 1]
            logger.debug("joined line %d into line %d", cursor.line + 1, cursor.line)
        else:
            return

        self.cursor = cursor
        self.clear_selection()
        self._render()

    def insert(self, text: str):
        """Insert text at the cursor, replacing any selection."""
        self._remove_selection()

        cursor = self.constrained_cursor
        current = self.lines[cursor.line]
        before_cursor = current[:cursor.column]
        after_cursor = current[cursor.column:]

        # A trailing newline leaves an empty last part, i.e. a new empty line
        parts = _normalize_newlines(text).split("\n")
        parts[0] = before_cursor + parts[0]
        end_column = len(parts[-1])
        parts[-1] += after_cursor

        self.lines[cursor.line:cursor.line + 1] = parts
        self.cursor = Position(cursor.line + len(parts) - 1, end_column)
        self.clear_selection()
        self._render()

    def debug(self) -> str:
        """Render the text with a '|' at the cursor position."""
        cursor = self.constrained_cursor
        out = []
        for lineno, line in enumerate(self.lines):
            if lineno == cursor.line:
                out.append(line[:cursor.column] + "|" + line[cursor.column:])
            else:
                out.append(line)
        return "\n".join(out)
