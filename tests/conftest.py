"""Shared fixtures for the renamer test suite."""

import pytest

from renamer.utils import LogLevel, logger


@pytest.fixture(autouse=True)
def reset_logger():
    """The logger keeps module-level state; put it back after every test."""
    yield
    logger.set_log_file(None)
    logger.set_log_level(LogLevel.INFO)


@pytest.fixture
def make_file(tmp_path):
    """Create a file under tmp_path (parents included) and return its path."""
    def _make(name, content="data"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _make
