"""
Pytest configuration and fixtures for log analyzer tests.
"""

import sys
from pathlib import Path

# Ensure project root is in sys.path for 'loganalyzer' imports
# This must happen before any imports from loganalyzer
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "tui: marks TUI tests")


@pytest.fixture
def temp_state_dir(tmp_path: Path, monkeypatch) -> Path:
    """Create and return a temporary state directory.

    Sets LOG_ANALYZER_STATE env var, points settings at a file that does
    not exist yet, and resets the debug logger.
    """
    state_dir = tmp_path / ".local" / "state" / "log-analyzer"
    state_dir.mkdir(parents=True)
    monkeypatch.setenv("LOG_ANALYZER_STATE", str(state_dir))
    monkeypatch.setenv("LOG_ANALYZER_SETTINGS", str(tmp_path / "settings.json"))
    monkeypatch.delenv("LOG_ANALYZER_DEBUG", raising=False)

    # Reset the debug logger so it picks up the new path
    from loganalyzer.debug_logger import reset_logger
    reset_logger()

    return state_dir


@pytest.fixture(autouse=True)
def isolate_state_dir(temp_state_dir: Path):
    """Autouse fixture that ensures all tests use an isolated state directory.

    This prevents tests from polluting the real ~/.local/state/log-analyzer/debug.log
    """
    yield temp_state_dir

    from loganalyzer.debug_logger import reset_logger
    reset_logger()


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """Path of the isolated settings.json (not created)."""
    return tmp_path / "settings.json"


@pytest.fixture
def debug_log(temp_state_dir: Path) -> Path:
    """Path of the isolated debug.log."""
    return temp_state_dir / "debug.log"
