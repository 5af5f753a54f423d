"""Caret placement, hit testing and selection geometry for wrapped lines.

Coordinates are relative to the top-left corner of one logical line. Every
visual row of that line is `line_height` tall; `row_width` is the width of
the content area (the wrap width when wrapping).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, NamedTuple, Sequence, Tuple

from .position import Position
from .wrap import Measure

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def offset(self, dx: float, dy: float) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.width, self.height)


def _half(value):
    return value // 2 if isinstance(value, int) else value / 2


def cursor_x_position(column: int, line: str, measure: Measure) -> float:
    """Find out at which x coordinate to draw a caret before line[column].

    Measuring the prefix alone places the caret where the glyph run ends,
    which can disagree with where the next glyph is drawn once the two
    neighbouring characters kern or are hinted together. Half of the
    difference between measuring the pair together and separately is added
    to land the caret between the glyphs.
    """
    if column <= 0:
        return 0
    if column >= len(line):
        return measure(line)

    left_char = line[column - 1]
    right_char = line[column]
    single_width = measure(left_char) + measure(right_char)
    combined_width = measure(left_char + right_char)
    if combined_width < single_width:
        char_offset = 0
    else:
        char_offset = _half(combined_width - single_width)
    return measure(line[:column]) + char_offset


def cursor_position(column: int, segments: Sequence[str], measure: Measure) -> Tuple[int, float]:
    """Find the visual row and x coordinate of a caret in a wrapped line.

    A column exactly at the end of a row that is followed by another row
    belongs to the start of the next row.
    """
    assert segments, "a line always has at least one segment"
    remaining = column
    last = len(segments) - 1
    for row, segment in enumerate(segments):
        if remaining < len(segment) or row == last:
            return row, cursor_x_position(remaining, segment, measure)
        remaining -= len(segment)
    raise AssertionError("unreachable")


def caret_line(column: int, segments: Sequence[str], measure: Measure,
               line_height: float) -> Tuple[Point, Point]:
    """Return the top and bottom end points of the caret line."""
    row, x = cursor_position(column, segments, measure)
    top = row * line_height
    return Point(x, top), Point(x, top + line_height)


def column_at_x(x: float, line: str, measure: Measure) -> int:
    """Return the caret column closest to x. Ties go to the left."""
    best = 0
    best_distance = abs(x)
    for column in range(1, len(line) + 1):
        caret_x = cursor_x_position(column, line, measure)
        distance = abs(caret_x - x)
        if distance < best_distance:
            best, best_distance = column, distance
        elif caret_x > x:
            break
    return best


def column_at_point(x: float, row: int, segments: Sequence[str], measure: Measure) -> int:
    """Map a click at (x, visual row) to a column of the logical line."""
    assert segments, "a line always has at least one segment"
    row = min(max(row, 0), len(segments) - 1)
    offset = sum(len(segment) for segment in segments[:row])
    segment = segments[row]
    column = column_at_x(x, segment, measure)
    # The end of a non-final row is drawn at the start of the next one
    if row < len(segments) - 1 and segment and column >= len(segment):
        column = len(segment) - 1
    return offset + column


def _row_right(segment: str, measure: Measure, row_width: float) -> float:
    """Right edge of a selected row; hanging whitespace may reach past row_width."""
    return max(row_width, measure(segment))


def _visible(rects: List[Rect]) -> List[Rect]:
    return [rect for rect in rects if rect.width > 0]


def middle_line_selection(first_row: int, end_row: int, row_width: float,
                          line_height: float) -> List[Rect]:
    """Full-width rectangles for rows first_row up to (not including) end_row."""
    return [
        Rect(0, row * line_height, row_width, line_height)
        for row in range(first_row, end_row)
    ]


def single_line_selection(start_column: int, end_column: int, segments: Sequence[str],
                          measure: Measure, row_width: float,
                          line_height: float) -> List[Rect]:
    """Selection that starts and ends within the same logical line."""
    first_row, start_x = cursor_position(start_column, segments, measure)
    last_row, end_x = cursor_position(end_column, segments, measure)
    if first_row == last_row:
        return _visible([Rect(start_x, first_row * line_height, end_x - start_x, line_height)])

    right = _row_right(segments[first_row], measure, row_width)
    rects = [Rect(start_x, first_row * line_height, right - start_x, line_height)]
    rects.extend(middle_line_selection(first_row + 1, last_row, row_width, line_height))
    rects.append(Rect(0, last_row * line_height, end_x, line_height))
    return _visible(rects)


def first_line_selection(start_column: int, segments: Sequence[str], measure: Measure,
                         row_width: float, line_height: float) -> List[Rect]:
    """Selection that starts in this line and continues past its end."""
    row, start_x = cursor_position(start_column, segments, measure)
    right = _row_right(segments[row], measure, row_width)
    rects = [Rect(start_x, row * line_height, right - start_x, line_height)]
    rects.extend(middle_line_selection(row + 1, len(segments), row_width, line_height))
    return _visible(rects)


def last_line_selection(end_column: int, segments: Sequence[str], measure: Measure,
                        row_width: float, line_height: float) -> List[Rect]:
    """Selection that started on an earlier line and ends in this one."""
    row, end_x = cursor_position(end_column, segments, measure)
    rects = middle_line_selection(0, row, row_width, line_height)
    rects.append(Rect(0, row * line_height, end_x, line_height))
    return _visible(rects)


def line_selections(lineno: int, first: Position, last: Position, segments: Sequence[str],
                    measure: Measure, row_width: float, line_height: float) -> List[Rect]:
    """Return the selection rectangles for one logical line.

    `first` and `last` are the constrained, ordered ends of the selection.
    """
    if lineno < first.line or lineno > last.line:
        return []
    if first.line < lineno < last.line:
        return middle_line_selection(0, len(segments), row_width, line_height)
    if lineno == first.line == last.line:
        logger.debug("selection starts and ends at line %d", lineno)
        return single_line_selection(first.column, last.column, segments, measure,
                                     row_width, line_height)
    if lineno == first.line:
        logger.debug("selection starts at line %d", lineno)
        return first_line_selection(first.column, segments, measure, row_width, line_height)
    logger.debug("selection ends at line %d", lineno)
    return last_line_selection(last.column, segments, measure, row_width, line_height)
