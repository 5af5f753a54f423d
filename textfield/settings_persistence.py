"""Settings persistence for named layout profiles.

This module provides persistent storage for layout settings (measure, wrap
width, line width and height) indexed by profile name. Settings are stored
in an OS-appropriate location and survive application restarts.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import LayoutConstants
from .font_config import FONT_CONFIGS
from .measure import MEASURES

logger = logging.getLogger(__name__)


class SettingsPersistence:
    """Manages persistent storage of layout profiles.

    Settings are stored in a JSON file in the user's config directory,
    indexed by profile name.
    """

    def __init__(self):
        """Initialize settings persistence."""
        self._config_dir = Path(platformdirs.user_config_dir(LayoutConstants.SETTINGS_APP_NAME))
        self._settings_file = self._config_dir / LayoutConstants.SETTINGS_FILENAME
        self._settings_cache: Optional[Dict[str, Dict[str, Any]]] = None

    def _ensure_config_dir(self) -> None:
        """Ensure the config directory exists."""
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create config directory {self._config_dir}: {e}")

    def _load_all_settings(self) -> Dict[str, Dict[str, Any]]:
        """Load all profiles from disk.

        Returns:
            Dictionary mapping profile names to their settings.
            Returns empty dict if file doesn't exist or can't be read.
        """
        if self._settings_cache is not None:
            return self._settings_cache

        if not self._settings_file.exists():
            self._settings_cache = {}
            return self._settings_cache

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            self._settings_cache = {}
            return self._settings_cache

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            data = {}
        self._settings_cache = data
        return self._settings_cache

    def _save_all_settings(self, settings: Dict[str, Dict[str, Any]]) -> bool:
        """Save all profiles to disk atomically.

        Returns:
            True if save was successful, False otherwise.
        """
        self._ensure_config_dir()

        temp_file = self._settings_file.with_suffix('.tmp')
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            temp_file.replace(self._settings_file)
            self._settings_cache = settings
            return True
        except OSError as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                pass
            return False

    def load_settings(self, profile: str = LayoutConstants.DEFAULT_PROFILE) -> Dict[str, Any]:
        """Load the settings of one profile.

        Invalid entries are dropped with a warning.

        Returns:
            Dictionary of settings for the profile. Empty dict if the profile
            does not exist.
        """
        profile_settings = self._load_all_settings().get(profile, {})
        if not isinstance(profile_settings, dict):
            logger.warning(f"Settings for profile {profile!r} are not a dict, ignoring")
            return {}

        valid = {}
        for key, value in profile_settings.items():
            if self.validate_setting(key, value):
                valid[key] = value
            else:
                logger.warning(f"Ignoring invalid setting {key}={value!r} in profile {profile!r}")
        return valid

    def save_settings(self, profile: str, settings: Dict[str, Any]) -> bool:
        """Save the settings of one profile.

        Returns:
            True if save was successful, False otherwise (including when a
            setting is invalid).
        """
        for key, value in settings.items():
            if not self.validate_setting(key, value):
                logger.warning(f"Refusing to save invalid setting {key}={value!r}")
                return False

        all_settings = dict(self._load_all_settings())
        all_settings[profile] = dict(settings)
        return self._save_all_settings(all_settings)

    def validate_setting(self, key: str, value: Any) -> bool:
        """Validate a setting value.

        Args:
            key: Setting key name.
            value: Setting value to validate.

        Returns:
            True if setting is valid, False otherwise.
        """
        if key == 'measure':
            return value in MEASURES

        if key == 'font_name':
            return isinstance(value, str) and value in FONT_CONFIGS

        # None means "do not wrap"
        if key == 'wrap_width' and value is None:
            return True

        if key in ('wrap_width', 'line_width'):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return False
            return LayoutConstants.MIN_WIDTH <= value <= LayoutConstants.MAX_WIDTH

        if key == 'line_height':
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return False
            return LayoutConstants.MIN_LINE_HEIGHT <= value <= LayoutConstants.MAX_LINE_HEIGHT

        # Unknown settings are considered valid (forward compatibility)
        return True

    def clear_cache(self) -> None:
        """Clear the in-memory cache of settings."""
        self._settings_cache = None


# Global instance
_persistence: Optional[SettingsPersistence] = None


def get_persistence() -> SettingsPersistence:
    """Get the global settings persistence instance."""
    global _persistence
    if _persistence is None:
        _persistence = SettingsPersistence()
    return _persistence
