"""
================================================================================
Unit Test Fixtures
================================================================================

Browser-free fixtures: a fake driver, a fake clock and a Loguru capture sink.

================================================================================
"""

from typing import Generator, List

import pytest
from loguru import logger

from testsuites.support.fakes import FakeClock, FakeDriver


@pytest.fixture
def driver() -> FakeDriver:
    return FakeDriver(title="Dashboard - Sample", current_url="https://example.com/home")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def log_messages() -> Generator[List[str], None, None]:
    """Collect Loguru messages emitted during the test."""
    messages: List[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
