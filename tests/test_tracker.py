"""Tests for the tracker session view model."""

from datetime import datetime

from daily_fitness.config import TrackerConfig
from daily_fitness.models.workout import Activity, LiftType
from daily_fitness.services.edit_mode import EditMode
from daily_fitness.services.navigator import Direction
from daily_fitness.services.tracker import DailyTracker

MONDAY = datetime(2026, 10, 19)
TUESDAY = datetime(2026, 10, 20)


class TestVisibleDays:
    """Tests for DailyTracker.visible_days."""

    def test_labels_and_active_day(self, tracker):
        days = tracker.visible_days()

        assert [d.day_label for d in days] == ["Mon", "Tue", "Wed", "Thu", "Fri"]
        assert days[0].date_label == "Oct 19"
        assert [d.is_active for d in days] == [False, False, True, False, False]

    def test_active_day_follows_staging(self, tracker):
        tracker.begin_edit(MONDAY)
        assert [d.is_active for d in tracker.visible_days()] == [True, False, False, False, False]

    def test_icons_and_overflow(self, tracker):
        """Test a busy day shows four icons and an overflow count."""
        tracker.set_lift_type(LiftType.PUSH)
        tracker.toggle(Activity.LIFT)
        for activity in Activity:
            if activity != Activity.LIFT:
                tracker.toggle(activity)

        today = tracker.visible_days()[2]
        assert today.workout_icons == ["💪", "🧘", "🚴", "🏊"]
        assert today.overflow_count == 2

    def test_empty_day(self, tracker):
        day = tracker.visible_days()[0]
        assert day.workout_icons == []
        assert day.overflow_count == 0

    def test_window_moves_independently_of_edit(self, tracker):
        tracker.begin_edit(MONDAY)
        tracker.step(Direction.FORWARD)
        tracker.step(Direction.FORWARD)

        assert tracker.editing_day == MONDAY
        assert not any(d.is_active for d in tracker.visible_days())


class TestProgress:
    """Tests for goal handling in the session."""

    def test_scenario_three_of_five(self, tracker):
        for day in (MONDAY, TUESDAY):
            tracker.begin_edit(day)
            tracker.toggle(Activity.CYCLE)
            tracker.commit()
        tracker.toggle(Activity.SWIM)

        progress = tracker.weekly_progress()
        assert (progress.count, progress.goal, progress.ratio) == (3, 5, 0.6)

    def test_set_goal_clamps(self, tracker):
        assert tracker.set_goal("abc") == 1
        assert tracker.weekly_progress().goal == 1
        assert tracker.set_goal(8) == 7

    def test_configured_goal(self, clock):
        tracker = DailyTracker(TrackerConfig(weekly_goal=3), clock=clock)
        assert tracker.weekly_progress().goal == 3


class TestHistory:
    """Tests for DailyTracker.history."""

    def test_grouped_newest_first(self, tracker):
        tracker.begin_edit(MONDAY)
        tracker.toggle(Activity.WALK)
        tracker.toggle(Activity.SWIM)
        tracker.commit()
        tracker.toggle(Activity.BALL)

        history = tracker.history()

        assert [h.date.date() for h in history] == [
            datetime(2026, 10, 21).date(),
            MONDAY.date(),
        ]
        assert {w.activity for w in history[1].workouts} == {Activity.WALK, Activity.SWIM}
        assert history[1].heading == "Mon Oct 19 2026"

    def test_excludes_future_days(self, tracker):
        tracker.begin_edit(datetime(2026, 10, 23))
        tracker.toggle(Activity.WALK)
        tracker.commit()
        assert tracker.history() == []

    def test_set_field_through_history(self, tracker):
        tracker.toggle(Activity.CYCLE)
        workout = tracker.history()[0].workouts[0]
        tracker.set_field(workout.id, "duration", "40 min")
        assert tracker.history()[0].workouts[0].duration == "40 min"


class TestJumpToToday:
    """Tests for DailyTracker.jump_to_today."""

    def test_resets_window_and_edit(self, tracker, clock):
        tracker.begin_edit(MONDAY)
        tracker.step("forward")
        clock.now = datetime(2026, 10, 26, 8, 0)

        tracker.jump_to_today()

        assert tracker.mode == EditMode.LIVE
        assert tracker.visible_days()[2].date.date() == datetime(2026, 10, 26).date()
        assert tracker.visible_days()[2].is_active
        # Progress now measures the new week
        assert tracker.weekly_progress().count == 0

    def test_abandoned_edit_keeps_written_toggles(self, tracker):
        """Test abandoning staging does not undo toggles already applied."""
        tracker.begin_edit(MONDAY)
        tracker.toggle(Activity.WALK)
        tracker.jump_to_today()

        assert [w.activity for w in tracker.store.workouts_on(MONDAY)] == [Activity.WALK]
        assert tracker.selected_activities == set()


class TestSnapshot:
    """Tests for DailyTracker.snapshot."""

    def test_snapshot(self, tracker):
        tracker.set_lift_type("Legs")
        tracker.toggle("Lift")
        tracker.toggle("Cycle")
        data = tracker.snapshot()

        assert data["mode"] == "live"
        assert data["editing_day"] is None
        assert data["selected_activities"] == ["Cycle", "Lift"]
        assert data["selected_lift_type"] == "Legs"
        assert data["progress"]["count"] == 1
        assert len(data["days"]) == 5
        assert len(data["history"][0]["workouts"]) == 2

    def test_snapshot_staged(self, tracker):
        tracker.begin_edit(MONDAY)
        data = tracker.snapshot()
        assert data["mode"] == "staged"
        assert data["editing_day"] == "2026-10-19"
