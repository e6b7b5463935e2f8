import sys

import pytest
from loguru import logger


@pytest.fixture
def caplog(caplog):
    """Route loguru records into pytest's caplog."""
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def reset_loguru():
    """The CLI replaces loguru's sinks; restore the default after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)
