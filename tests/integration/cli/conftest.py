"""Shared fixtures for CLI integration tests"""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_docstore_logger():
    """Undo the handler and level each CLI invocation installs on the docstore logger.

    CliRunner swaps sys.stderr for a temporary stream, so a handler left behind
    would write to a closed file in later tests.
    """
    logger = logging.getLogger("docstore")
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
