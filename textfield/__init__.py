"""Textfield - the editing and layout core of a proportional text widget."""

from .position import Position
from .model import TextField, TextView
from .wrap import WrapCache, split_segments, wrap_line, wrap_word
from .layout import (
    Point,
    Rect,
    cursor_position,
    cursor_x_position,
    line_selections,
)
from .view import TextFieldView

__all__ = [
    'Position',
    'TextField',
    'TextView',
    'TextFieldView',
    'WrapCache',
    'wrap_line',
    'wrap_word',
    'split_segments',
    'Point',
    'Rect',
    'cursor_position',
    'cursor_x_position',
    'line_selections',
]
