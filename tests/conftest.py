"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest

from daily_fitness.config import TrackerConfig
from daily_fitness.services.selection import SelectionController
from daily_fitness.services.tracker import DailyTracker
from daily_fitness.services.workout_store import WorkoutStore

# Wednesday; its week runs Sun Oct 18 - Sat Oct 24
NOW = datetime(2026, 10, 21, 9, 30)


class FakeClock:
    """Settable stand-in for datetime.now."""

    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return WorkoutStore()


@pytest.fixture
def selection(store, clock):
    return SelectionController(store, clock)


@pytest.fixture
def tracker(clock):
    """Tracker session pinned to the fake clock."""
    return DailyTracker(TrackerConfig(), clock=clock)
