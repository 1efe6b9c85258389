"""User settings for the editor.

Settings live in a JSON file in the platform's config directory and
are optional: a missing, unreadable or malformed file just means the
defaults from EditorConstants apply.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

APP_NAME = "visedit"


@dataclass
class EditorSettings:
    """Resolved settings used to build the editor."""
    max_lines: int = EditorConstants.MAX_LINES
    log_level: Optional[str] = None


def default_settings_path() -> Path:
    """Return the platform-appropriate settings file path."""
    return Path(platformdirs.user_config_dir(APP_NAME)) / "settings.json"


def default_log_path() -> Path:
    """Return the platform-appropriate log file path."""
    return Path(platformdirs.user_log_dir(APP_NAME)) / f"{APP_NAME}.log"


def _read_settings_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load settings from {path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning("Settings file has invalid format (not a dict), ignoring")
        return {}
    return data


def validate_setting(key: str, value: Any) -> bool:
    """Validate a single setting value.

    Args:
        key: Setting key name.
        value: Setting value to validate.

    Returns:
        True if the value is usable for the key.
    """
    if key == 'max_lines':
        # bool is an int subclass; reject it explicitly
        return isinstance(value, int) and not isinstance(value, bool) and value > 0
    if key == 'log_level':
        return isinstance(value, str) and isinstance(logging.getLevelName(value.upper()), int)
    # Unknown settings are ignored for forward compatibility
    return True


def load_settings(path: Optional[Path] = None) -> EditorSettings:
    """Load settings from disk, falling back to defaults per key.

    Args:
        path: Settings file to read. Defaults to the user config location.

    Returns:
        EditorSettings with every invalid entry replaced by its default.
    """
    path = path or default_settings_path()
    data = _read_settings_file(path)
    settings = EditorSettings()

    for key in ('max_lines', 'log_level'):
        if key not in data:
            continue
        value = data[key]
        if not validate_setting(key, value):
            logger.warning(f"Ignoring invalid setting {key}={value!r} in {path}")
            continue
        setattr(settings, key, value.upper() if key == 'log_level' else value)

    return settings
