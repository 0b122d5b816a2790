"""
Pytest configuration and fixtures for webring tests.
"""

import json
import sys
from pathlib import Path

# Ensure project root is in sys.path for 'webring' imports without an install
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import pytest

from webring.models import Entry


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "tui: marks TUI tests")


@pytest.fixture
def temp_state_dir(tmp_path: Path, monkeypatch) -> Path:
    """Create and return a temporary state directory.

    Sets WEBRING_STATE and points the package logger at it.
    """
    state_dir = tmp_path / ".local" / "state" / "webring"
    state_dir.mkdir(parents=True)
    monkeypatch.setenv("WEBRING_STATE", str(state_dir))

    from webring.logger import reset_logger, setup_logging
    reset_logger()
    setup_logging()

    return state_dir


@pytest.fixture(autouse=True)
def isolate_state_dir(temp_state_dir: Path):
    """Autouse fixture so no test touches the real preferences.json or log."""
    yield temp_state_dir

    from webring.logger import reset_logger
    reset_logger()


SAMPLE_SITES = [
    {"name": "Bob", "website": "https://b.com", "year": 2023, "program": "COMP"},
    {"name": "Amy", "website": "https://a.com", "year": 2022, "program": "COEN"},
    {"name": "carla", "website": "https://carla.dev", "year": 2021, "program": "SOEN"},
    {"name": "Dan", "website": "https://dan.io", "year": 2023, "program": "COMP"},
    {"name": "Eve", "website": "https://eve.ca", "year": 2019, "program": "ELEC"},
]


@pytest.fixture
def sample_catalog():
    """A small catalog covering four programs and a tied year."""
    return tuple(Entry.from_dict(site) for site in SAMPLE_SITES)


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """A directory holding webring.json with SAMPLE_SITES."""
    directory = tmp_path / "site"
    directory.mkdir()
    (directory / "webring.json").write_text(json.dumps({"sites": SAMPLE_SITES}))
    return directory
