"""Unit test configuration - engine fixtures and logging isolation"""

import logging

import pytest

from src.search_engine import SearchServer


@pytest.fixture
def server():
    """Empty SearchServer with a few English stop words"""
    return SearchServer(stop_words="in the and with")


@pytest.fixture
def restore_root_logging():
    """
    Save and restore root logger handlers around tests that call setup_logging().

    setup_logging() clears root handlers, which would otherwise leak file
    handlers into the rest of the session.
    """
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level

    yield

    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)
