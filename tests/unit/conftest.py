"""Shared fixtures for unit tests."""

import logging
from typing import Iterator

import pytest


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    """Undo any root handler or level change made by ``configure_logger``."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
