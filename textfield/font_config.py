"""Font metrics for fixed-pitch fonts.

A fixed-pitch font advances the same distance for every glyph, which makes
it the simplest width oracle that still measures in physical units.
"""

from dataclasses import dataclass
from typing import Dict, Optional


POINTS_PER_INCH = 72

# Line spacing
LINES_PER_INCH = 6  # Standard typewriter line spacing
LINE_HEIGHT_POINTS = POINTS_PER_INCH // LINES_PER_INCH  # 12 points


@dataclass(frozen=True)
class FontMetrics:
    """Metrics of a fixed-pitch font.

    Attributes:
        name: Display name of the font
        pitch: Characters per inch (10 for pica, 12 for elite)
        point_size: Font size in points
    """
    name: str
    pitch: int
    point_size: int

    @property
    def advance(self) -> float:
        """Width of one glyph in points."""
        return POINTS_PER_INCH / self.pitch

    @property
    def line_height(self) -> int:
        """Line height in points (always 12 for 6 lpi)."""
        return LINE_HEIGHT_POINTS

    @classmethod
    def create_10_pitch(cls, name: str) -> 'FontMetrics':
        """Create a 10-pitch (pica) font, set at 12pt."""
        return cls(name=name, pitch=10, point_size=12)

    @classmethod
    def create_12_pitch(cls, name: str) -> 'FontMetrics':
        """Create a 12-pitch (elite) font, set at 10pt."""
        return cls(name=name, pitch=12, point_size=10)


FONT_CONFIGS: Dict[str, FontMetrics] = {
    "Courier": FontMetrics.create_10_pitch("Courier"),
    "Prestige Elite Std": FontMetrics.create_12_pitch("Prestige Elite Std"),
}


def get_font_config(font_name: str) -> Optional[FontMetrics]:
    """Get font metrics by name.

    Args:
        font_name: Name of the font

    Returns:
        FontMetrics if found, None otherwise
    """
    return FONT_CONFIGS.get(font_name)
