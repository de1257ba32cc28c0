"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest

from projgen.adapters.mock import MockRunner


@pytest.fixture(autouse=True)
def _no_settings_env(monkeypatch):
    """Keep a developer's PROJGEN_* environment out of the tests."""
    for var in ("PROJGEN_CONFIG", "PROJGEN_LOG_LEVEL", "PROJGEN_LOG_FILE", "PROJGEN_LOG_FILE_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def mock_runner() -> MockRunner:
    """A runner with no tools on the search path."""
    return MockRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path



@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo the CLI's setup_logging so handlers never outlive capsys."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
