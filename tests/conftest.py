"""Root pytest configuration for all tests."""

import logging
from pathlib import Path

import pytest

from src.passages.date_normalizer import DateNormalizer
from tests.helpers.notes_tree import FROZEN_NOW


@pytest.fixture
def frozen_normalizer() -> DateNormalizer:
    """Lenient DateNormalizer whose clock is fixed at FROZEN_NOW."""
    return DateNormalizer(clock=lambda: FROZEN_NOW)


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    """Empty notes folder inside the test's temporary directory."""
    path = tmp_path / "notes"
    path.mkdir()
    return path


@pytest.fixture(autouse=True)
def restore_app_logger():
    """Undo handler changes made by the CLI's logging setup."""
    app_logger = logging.getLogger("src")
    handlers = list(app_logger.handlers)
    level = app_logger.level
    yield
    for handler in app_logger.handlers:
        if handler not in handlers:
            handler.close()
    app_logger.handlers[:] = handlers
    app_logger.setLevel(level)
