from typing import Any, Dict, Optional

from .constants import LayoutConstants
from .layout import Point, Rect, caret_line, column_at_point, line_selections
from .measure import FixedPitchMeasure, measure_for
from .model import TextView
from .position import Position
from .settings_persistence import SettingsPersistence, get_persistence
from .wrap import Measure, WrapCache


class TextFieldView(TextView):
    """Geometry of a whole text field, ready for a renderer to draw.

    Logical lines are stacked top to bottom; each takes one row per wrapped
    segment. After `render()`:

    - `rows[i]` holds the segments of line i,
    - `line_tops[i]` is the y coordinate of line i's first row,
    - `caret` is the (top, bottom) of the caret line, or None while text
      is selected,
    - `selection_rects` are the selection highlights.
    """

    measure: Measure
    measure_name: str = LayoutConstants.DEFAULT_MEASURE
    font_name: Optional[str] = None
    wrap_width: Optional[float]
    line_width: float
    line_height: float
    rows: list[list[str]]
    line_tops: list[float]
    height: float = 0
    caret: Optional[tuple[Point, Point]] = None
    selection_rects: list[Rect]

    def __init__(self, measure: Optional[Measure] = None,
                 line_width: float = LayoutConstants.DEFAULT_LINE_WIDTH,
                 line_height: float = LayoutConstants.DEFAULT_LINE_HEIGHT,
                 wrap_width: Optional[float] = LayoutConstants.DEFAULT_WRAP_WIDTH):
        self.measure = measure or measure_for(self.measure_name)
        self.line_width = line_width
        self.line_height = line_height
        self.wrap_width = wrap_width
        self._cache = WrapCache(self.measure, wrap_width)
        self.rows = []
        self.line_tops = []
        self.selection_rects = []

    @classmethod
    def from_profile(cls, profile: str = LayoutConstants.DEFAULT_PROFILE,
                     persistence: Optional[SettingsPersistence] = None) -> "TextFieldView":
        """Create a view configured from a saved layout profile."""
        view = cls()
        view.configure((persistence or get_persistence()).load_settings(profile))
        return view

    def configure(self, settings: Dict[str, Any]) -> None:
        """Apply layout settings (already validated) and re-render."""
        if 'measure' in settings or 'font_name' in settings:
            self.measure_name = settings.get('measure', self.measure_name)
            self.font_name = settings.get('font_name', self.font_name)
            self.measure = measure_for(self.measure_name, self.font_name)
            self._cache.set_measure(self.measure)
            # Font widths are in points, so rows default to the font's leading
            if isinstance(self.measure, FixedPitchMeasure):
                self.line_height = self.measure.font.line_height
        if 'wrap_width' in settings:
            self.wrap_width = settings['wrap_width']
        self.line_width = settings.get('line_width', self.line_width)
        self.line_height = settings.get('line_height', self.line_height)
        self._cache.set_limit(self.wrap_width)
        if self._model is not None:
            self.render()

    @property
    def row_width(self) -> float:
        """Width of a fully selected row."""
        return self.wrap_width if self.wrap_width is not None else self.line_width

    def segments(self, line: str) -> list[str]:
        return self._cache.segments(line)

    def render(self):
        model = self.model
        self._cache.prune(model.lines)

        self.rows = [self.segments(line) for line in model.lines]
        self.line_tops = []
        y = 0
        for segments in self.rows:
            self.line_tops.append(y)
            y += len(segments) * self.line_height
        self.height = y

        self.selection_rects = []
        if model.has_selection():
            self.caret = None
            first, last = model.selection_span()
            for lineno in range(first.line, last.line + 1):
                rects = line_selections(lineno, first, last, self.rows[lineno], self.measure,
                                        self.row_width, self.line_height)
                top = self.line_tops[lineno]
                self.selection_rects.extend(rect.offset(0, top) for rect in rects)
        else:
            cursor = model.constrained_cursor
            top, bottom = caret_line(cursor.column, self.rows[cursor.line], self.measure,
                                     self.line_height)
            offset = self.line_tops[cursor.line]
            self.caret = (Point(top.x, top.y + offset), Point(bottom.x, bottom.y + offset))

    def position_at(self, x: float, y: float) -> Position:
        """Map a point in view coordinates to the nearest cursor position.

        Points above the text land on the first row and points below it on
        the last row.
        """
        lines = self.model.lines
        row = int(y // self.line_height)
        last = len(lines) - 1
        for lineno, line in enumerate(lines):
            segments = self.segments(line)
            if row < len(segments) or lineno == last:
                return Position(lineno, column_at_point(x, row, segments, self.measure))
            row -= len(segments)
        raise AssertionError("unreachable")

    def click(self, x: float, y: float, extend: bool = False):
        """Move the cursor (or extend the selection) to the clicked point."""
        self.model.set_cursor(self.position_at(x, y), extend=extend)
