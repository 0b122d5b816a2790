"""Tests for centralized path resolution."""
import os
from pathlib import Path

from webring.paths import PathResolver, data_location, is_remote


class TestPathResolver:
    """Tests for PathResolver centralized path resolution."""

    def test_state_dir_respects_env_var(self, monkeypatch, tmp_path):
        custom_state = tmp_path / "custom-state"
        monkeypatch.setenv("WEBRING_STATE", str(custom_state))

        assert PathResolver.state_dir() == custom_state

    def test_state_dir_respects_xdg_state_home(self, monkeypatch, tmp_path):
        monkeypatch.delenv("WEBRING_STATE", raising=False)
        monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "xdg"))

        assert PathResolver.state_dir() == tmp_path / "xdg" / "webring"

    def test_state_dir_default(self, monkeypatch):
        monkeypatch.delenv("WEBRING_STATE", raising=False)
        monkeypatch.delenv("XDG_STATE_HOME", raising=False)

        result = PathResolver.state_dir()
        assert isinstance(result, Path)
        assert result == Path.home() / ".local" / "state" / "webring"

    def test_preferences_and_log_live_in_state_dir(self, temp_state_dir):
        assert PathResolver.preferences_path() == temp_state_dir / "preferences.json"
        assert PathResolver.log_path() == temp_state_dir / "webring.log"

    def test_base_path_defaults_to_cwd(self, monkeypatch):
        monkeypatch.delenv("WEBRING_BASE_PATH", raising=False)
        assert PathResolver.base_path() == os.getcwd()

    def test_base_path_env_override(self, monkeypatch):
        monkeypatch.setenv("WEBRING_BASE_PATH", "https://ring.example/")
        assert PathResolver.base_path() == "https://ring.example/"


class TestDataLocation:
    def test_is_remote(self):
        assert is_remote("https://x.org")
        assert is_remote("HTTP://x.org")
        assert not is_remote("/srv/webring")

    def test_url_join_single_slash(self):
        assert data_location("https://x.org/ring/") == "https://x.org/ring/webring.json"
        assert data_location("https://x.org/ring") == "https://x.org/ring/webring.json"

    def test_directory_join(self, tmp_path):
        assert data_location(tmp_path) == str(tmp_path / "webring.json")
