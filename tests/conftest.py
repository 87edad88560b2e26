# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from logging import Logger
from logging import getLogger

# Third party imports
import pytest

# Local imports
from tests.fixtures.models import Point


# Custom markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - just reset logging"""
    # Reset logging to avoid handler conflicts
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # Reset logging level
    root_logger.setLevel(30)  # WARNING level

    # Clear all logger instances
    Logger.manager.loggerDict.clear()

    yield


@pytest.fixture
def point_map() -> dict[Point, Point]:
    """Single-entry map with structured key and value"""
    return {Point(a=3, b=5): Point(a=7, b=9)}


@pytest.fixture
def options_file(tmp_path):
    """Write an options JSON file and return its path"""

    def _write(text: str):
        path = tmp_path / "options.json"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
