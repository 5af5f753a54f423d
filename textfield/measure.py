"""Width oracles for wrapping and caret placement.

Anything callable as ``measure(text) -> width`` works with the layout
functions. The ones here cover plain character counting, terminal cells
and fixed-pitch fonts.
"""

from __future__ import annotations

from typing import Optional

import blessed

from .font_config import FontMetrics, get_font_config

MEASURES = ("chars", "cells", "font")


def char_count(text: str) -> int:
    """One unit per character."""
    return len(text)


class TerminalMeasure:
    """Width in terminal cells, as Blessed computes it.

    Wide East Asian characters take two cells and terminal sequences take
    none.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        self.term = terminal or blessed.Terminal()

    def __call__(self, text: str) -> int:
        return self.term.length(text)


class FixedPitchMeasure:
    """Width in points for a fixed-pitch font."""

    def __init__(self, font: FontMetrics):
        self.font = font

    def __call__(self, text: str) -> float:
        return len(text) * self.font.advance


def measure_for(kind: str, font_name: Optional[str] = None,
                terminal: Optional[blessed.Terminal] = None):
    """Build the width oracle named by a layout setting."""
    if kind == "chars":
        return char_count
    if kind == "cells":
        return TerminalMeasure(terminal)
    if kind == "font":
        font = get_font_config(font_name or "Courier")
        if font is None:
            raise ValueError(f"Unknown font: {font_name}")
        return FixedPitchMeasure(font)
    raise ValueError(f"Unknown measure: {kind}")
