# SPDX-License-Identifier: MIT
"""Preference reader/writer for the webring browser.

Preferences live in a single JSON object file (preferences.json in the state
directory). Values are read with dot-notation keys and fall back to a default
whenever the file is missing, unreadable, or holds something unexpected.
"""
import json
from pathlib import Path
from typing import Any, Optional

from webring.logger import get_logger
from webring.paths import PathResolver

logger = get_logger(__name__)

SIDEBAR_WIDTH_KEY = "sidebarWidth"


def get_preferences_path() -> Path:
    """Get path to preferences.json, respecting the WEBRING_STATE env var."""
    return PathResolver.preferences_path()


def _read_all(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable preferences file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring preferences file %s: top level is not an object", path)
        return {}
    return data


def get_setting(key: str, default: Any = None) -> Any:
    """Get a preference value by dot-notation key.

    Args:
        key: Dot-notation key like "layout.sidebarWidth"
        default: Default value if key not found

    Returns:
        Preference value or default
    """
    current: Any = _read_all(get_preferences_path())
    for part in key.split("."):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def get_int_setting(key: str, default: Optional[int] = None) -> Optional[int]:
    """Get an integer preference.

    Stored values may be numbers or decimal strings ("500"). Anything that
    doesn't convert returns the default.
    """
    value = get_setting(key)
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        logger.warning("Ignoring non-integer preference %s=%r", key, value)
        return default


def set_setting(key: str, value: Any) -> None:
    """Write a preference value by dot-notation key.

    Creates the state directory and file as needed and keeps the other keys.

    Raises:
        OSError: If the file can't be written.
    """
    path = get_preferences_path()
    data = _read_all(path)
    parts = key.split(".")
    current = data
    for part in parts[:-1]:
        child = current.get(part)
        if not isinstance(child, dict):
            child = {}
            current[part] = child
        current = child
    current[parts[-1]] = value

    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(".tmp")
    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    tmp_path.replace(path)


class PreferenceStore:
    """A single named preference, read once at startup and written on change."""

    def __init__(self, key: str = SIDEBAR_WIDTH_KEY) -> None:
        self.key = key

    def read_int(self) -> Optional[int]:
        """Return the stored value as an int, or None when absent or garbled."""
        return get_int_setting(self.key)

    def write_int(self, value: int) -> None:
        """Persist the value as a decimal string."""
        set_setting(self.key, str(value))
        logger.info("Saved preference %s=%s", self.key, value)
