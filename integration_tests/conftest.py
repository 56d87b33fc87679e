"""Pytest configuration for end-to-end session tests."""

from datetime import datetime

import pytest


class SteppingClock:
    """Clock that can be advanced a day at a time, like a real week of use."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def next_day(self, hour: int = 8) -> None:
        self.now = datetime.fromordinal(self.now.toordinal() + 1).replace(hour=hour)


@pytest.fixture
def stepping_clock():
    """Starts on Sunday morning, the first day of the week."""
    return SteppingClock(datetime(2026, 10, 18, 8, 0))


def pytest_collection_modifyitems(items):
    """Mark everything collected here as an integration test."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
