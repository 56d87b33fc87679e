"""Tests for weekly goal progress."""

from datetime import datetime

import pytest

from daily_fitness.models.workout import Activity
from daily_fitness.services.progress import ProgressCalculator, WeeklyGoal, clamp_goal

WEDNESDAY = datetime(2026, 10, 21, 12, 0)


class TestClampGoal:
    """Tests for clamp_goal."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (5, 5),
            (0, 1),
            (-3, 1),
            (9, 7),
            ("4", 4),
            ("4 days", 4),
            (" 12", 7),
            ("abc", 1),
            ("", 1),
            (None, 1),
            (3.9, 3),
            (float("nan"), 1),
            (float("inf"), 7),
            (float("-inf"), 1),
        ],
    )
    def test_clamp(self, value, expected):
        assert clamp_goal(value) == expected

    def test_weekly_goal_set(self):
        """Test invalid input resets the goal to the minimum."""
        goal = WeeklyGoal()
        assert goal.value == 5
        assert goal.set("abc") == 1
        assert goal.value == 1
        assert goal.set(10) == 7


class TestProgressCalculator:
    """Tests for ProgressCalculator."""

    def test_counts_distinct_days(self, store):
        """Test several workouts on one day count once."""
        monday = datetime(2026, 10, 19, 8, 0)
        store.upsert(Activity.CYCLE, monday)
        store.upsert(Activity.LIFT, monday)
        store.upsert(Activity.SWIM, datetime(2026, 10, 20, 18, 0))

        assert ProgressCalculator(store).days_worked_out(WEDNESDAY) == 2

    def test_mon_tue_wed_against_five(self, store):
        """Test three workout days against a goal of five."""
        for day in (19, 20, 21):
            store.upsert(Activity.WALK, datetime(2026, 10, day, 7, 0))

        progress = ProgressCalculator(store).weekly_progress(WEDNESDAY, 5)

        assert progress.count == 3
        assert progress.goal == 5
        assert progress.ratio == pytest.approx(0.6)
        assert not progress.goal_met

    def test_ignores_other_weeks(self, store):
        """Test days before Sunday or from next Sunday on are excluded."""
        store.upsert(Activity.WALK, datetime(2026, 10, 17, 23, 59))  # Saturday before
        store.upsert(Activity.WALK, datetime(2026, 10, 18, 0, 0))  # Sunday
        store.upsert(Activity.WALK, datetime(2026, 10, 24, 23, 59))  # Saturday
        store.upsert(Activity.WALK, datetime(2026, 10, 25, 0, 0))  # next Sunday

        assert ProgressCalculator(store).days_worked_out(WEDNESDAY) == 2

    def test_future_days_in_week_count(self, store):
        store.upsert(Activity.BALL, datetime(2026, 10, 23))
        assert ProgressCalculator(store).days_worked_out(WEDNESDAY) == 1

    def test_ratio_capped(self, store):
        for day in range(18, 25):
            store.upsert(Activity.WALK, datetime(2026, 10, day))

        progress = ProgressCalculator(store).weekly_progress(WEDNESDAY, 3)
        assert progress.count == 7
        assert progress.ratio == 1.0
        assert progress.goal_met

    def test_monotonic_in_days(self, store):
        """Test adding a new workout day in the week never lowers the count."""
        calculator = ProgressCalculator(store)
        counts = []
        for day in (21, 19, 21, 24, 18):
            store.upsert(Activity.STRETCH, datetime(2026, 10, day))
            counts.append(calculator.days_worked_out(WEDNESDAY))
        assert counts == [1, 2, 2, 3, 4]

    def test_to_dict(self, store):
        data = ProgressCalculator(store).weekly_progress(WEDNESDAY, 4).to_dict()
        assert data == {
            "count": 0,
            "goal": 4,
            "ratio": 0.0,
            "week_start": "2026-10-18T00:00:00",
            "week_end": "2026-10-25T00:00:00",
        }
