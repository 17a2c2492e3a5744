import io
import logging
from datetime import datetime

import pytest

from tests.fakes import FakeClock


@pytest.fixture
def fixed_clock():
    """Clock frozen at 2010-09-21 05:13:59."""
    return FakeClock(datetime(2010, 9, 21, 5, 13, 59))


@pytest.fixture
def capture_logs():
    """Fixture to capture log output during tests."""
    log_stream = io.StringIO()
    handler = logging.StreamHandler(log_stream)
    logger = logging.getLogger("buildlabeller")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield log_stream  # Yield the stream to the test function

    # Cleanup after the test
    logger.removeHandler(handler)
    log_stream.close()
