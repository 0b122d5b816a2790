# SPDX-License-Identifier: MIT
"""Centralized path resolution for the webring browser.

All path resolution should go through this module to ensure consistency.
"""
import os
from pathlib import Path
from typing import Union

DATA_FILENAME = "webring.json"
PREFERENCES_FILENAME = "preferences.json"
LOG_FILENAME = "webring.log"


class PathResolver:
    """Resolves paths and locations for webring components."""

    @staticmethod
    def state_dir() -> Path:
        """Get the state directory for the preference file and the log.

        Resolution order:
        1. WEBRING_STATE env var
        2. XDG_STATE_HOME/webring
        3. ~/.local/state/webring
        """
        state = os.environ.get("WEBRING_STATE")
        if state:
            return Path(state)
        xdg_state = os.environ.get("XDG_STATE_HOME")
        if xdg_state:
            return Path(xdg_state) / "webring"
        return Path.home() / ".local" / "state" / "webring"

    @staticmethod
    def preferences_path() -> Path:
        """Get the path of the JSON preference store."""
        return PathResolver.state_dir() / PREFERENCES_FILENAME

    @staticmethod
    def log_path() -> Path:
        """Get the path of the application log."""
        return PathResolver.state_dir() / LOG_FILENAME

    @staticmethod
    def base_path() -> str:
        """Get the base location of the data file.

        Either an http(s) URL or a local directory. Uses WEBRING_BASE_PATH
        when set, otherwise the current working directory.
        """
        return os.environ.get("WEBRING_BASE_PATH") or os.getcwd()


def is_remote(base: Union[str, Path]) -> bool:
    """Return True when the base location must be fetched over HTTP."""
    return str(base).lower().startswith(("http://", "https://"))


def data_location(base: Union[str, Path]) -> str:
    """Join the base location and the data filename.

    URLs are joined with a single slash; directories with the platform separator.
    """
    if is_remote(base):
        return f"{str(base).rstrip('/')}/{DATA_FILENAME}"
    return str(Path(base) / DATA_FILENAME)
