"""Pytest configuration and fixtures."""

from collections.abc import Iterator
from typing import Any

import pytest
from structlog.testing import capture_logs


@pytest.fixture
def log_events() -> Iterator[list[dict[str, Any]]]:
    """Capture structlog events emitted during a test.

    Usage:
        def test_logs(log_events):
            do_something()
            assert log_events[0]["event"] == "decimal_div_by_zero"
    """
    with capture_logs() as events:
        yield events
