"""Shared fixtures for the advising test suite."""

import logging
from pathlib import Path

import pytest

from advising import CourseCatalog, CatalogLoader, TerminalDisplay
from advising.config import LOGGER_NAME


SAMPLE_FILE = Path(__file__).resolve().parent.parent / "data" / "courses.txt"


@pytest.fixture
def write_source(tmp_path):
    """Write lines to a temporary course file and return its path."""
    def _write(lines, name="courses.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def catalog():
    return CourseCatalog()


@pytest.fixture
def loader(catalog):
    return CatalogLoader(catalog)


@pytest.fixture
def sample_file():
    return SAMPLE_FILE


@pytest.fixture(autouse=True)
def plain_terminal():
    """Run every test without ANSI codes, and restore them afterwards."""
    previous = TerminalDisplay.color
    TerminalDisplay.set_color(False)
    yield
    TerminalDisplay.set_color(previous)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by cli.main() so they never outlive capsys."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
