"""Constants and configuration for the text field layout."""

class LayoutConstants:
    """Central configuration constants for the layout."""

    # Content area
    DEFAULT_LINE_WIDTH = 65  # Width of the content area, in measure units
    DEFAULT_LINE_HEIGHT = 1  # Height of one visual row
    DEFAULT_WRAP_WIDTH = None  # No wrapping unless configured
    DEFAULT_MEASURE = "chars"  # One unit per character

    # Accepted ranges for persisted settings
    MIN_WIDTH = 1
    MAX_WIDTH = 10000
    MIN_LINE_HEIGHT = 1
    MAX_LINE_HEIGHT = 1000

    # Settings storage
    SETTINGS_APP_NAME = "textfield"
    SETTINGS_FILENAME = "settings.json"
    DEFAULT_PROFILE = "default"
