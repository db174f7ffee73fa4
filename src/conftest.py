"""Fixtures shared by all test packages."""

from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import LogCapture


@pytest.fixture
def log_output() -> Iterator[LogCapture]:
    """Capture the structlog events emitted during a test.

    Each entry is the event dict, with ``event`` and ``log_level`` keys.
    """
    capture = LogCapture()
    structlog.configure(processors=[capture])
    yield capture
    structlog.reset_defaults()
