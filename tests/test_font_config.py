"""Unit tests for font configuration module."""

import unittest
from textfield.font_config import (
    FontMetrics,
    get_font_config,
    FONT_CONFIGS,
    LINE_HEIGHT_POINTS,
)


class TestFontConfig(unittest.TestCase):
    """Test font configuration functionality."""

    def test_courier_config(self):
        """Test Courier font configuration (10-pitch)."""
        config = get_font_config("Courier")
        self.assertIsNotNone(config)
        self.assertEqual(config.name, "Courier")
        self.assertEqual(config.pitch, 10)
        self.assertEqual(config.point_size, 12)
        self.assertAlmostEqual(config.advance, 7.2)

    def test_prestige_elite_config(self):
        """Test Prestige Elite font configuration (12-pitch)."""
        config = get_font_config("Prestige Elite Std")
        self.assertIsNotNone(config)
        self.assertEqual(config.pitch, 12)
        self.assertEqual(config.point_size, 10)
        self.assertAlmostEqual(config.advance, 6.0)

    def test_unknown_font(self):
        """Test that unknown font returns None."""
        self.assertIsNone(get_font_config("Unknown Font"))

    def test_line_height_constant(self):
        """Test that line height is always 12 points (6 lpi)."""
        self.assertEqual(LINE_HEIGHT_POINTS, 12)
        for font_name in FONT_CONFIGS:
            self.assertEqual(get_font_config(font_name).line_height, 12)

    def test_pitch_constructors(self):
        self.assertEqual(FontMetrics.create_10_pitch("Test10"), FontMetrics("Test10", 10, 12))
        self.assertEqual(FontMetrics.create_12_pitch("Test12"), FontMetrics("Test12", 12, 10))


if __name__ == '__main__':
    unittest.main()
