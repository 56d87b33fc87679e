"""Daily fitness tracker session.

Wires the workout store, selection, edit mode, weekly progress and the
visible date window together, and exposes the read-only view that outer
surfaces render along with the only operations they may call.
"""

from dataclasses import dataclass, field
from datetime import datetime

from ..config import TrackerConfig
from ..models.workout import Activity, LiftType, Workout, WorkoutField
from ..utils.calendar import date_label, day_heading, day_label, end_of_day, same_day
from .edit_mode import EditMode, EditModeController
from .navigator import DateWindowNavigator, Direction
from .progress import ProgressCalculator, WeeklyGoal, WeeklyProgress
from .selection import Clock, SelectionController
from .workout_store import WorkoutStore


@dataclass
class DaySummary:
    """One day in the visible window."""

    date: datetime
    day_label: str
    date_label: str
    workout_icons: list[str] = field(default_factory=list)
    overflow_count: int = 0
    is_active: bool = False

    def to_dict(self) -> dict:
        return {
            "date": self.date.date().isoformat(),
            "day_label": self.day_label,
            "date_label": self.date_label,
            "workout_icons": self.workout_icons,
            "overflow_count": self.overflow_count,
            "is_active": self.is_active,
        }


@dataclass
class HistoryDay:
    """Workouts logged on one day, for the history view."""

    date: datetime
    workouts: list[Workout]

    @property
    def heading(self) -> str:
        return day_heading(self.date)

    def to_dict(self) -> dict:
        return {
            "date": self.date.date().isoformat(),
            "heading": self.heading,
            "workouts": [w.to_dict() for w in self.workouts],
        }


class DailyTracker:
    """A single user's workout tracking session."""

    def __init__(
        self,
        config: TrackerConfig | None = None,
        clock: Clock = datetime.now,
        store: WorkoutStore | None = None,
    ):
        self.config = config or TrackerConfig()
        self.clock = clock
        self.store = store or WorkoutStore()
        self.selection = SelectionController(self.store, clock)
        self.edit_mode = EditModeController(self.selection)
        self.progress = ProgressCalculator(self.store)
        self.goal = WeeklyGoal(self.config.weekly_goal)
        self.current_date = clock()
        self.navigator = DateWindowNavigator(
            self.current_date,
            size=self.config.window_size,
            lead_days=self.config.window_lead_days,
        )

    # View model

    @property
    def selected_activities(self) -> set[Activity]:
        return set(self.selection.selected_activities)

    @property
    def selected_lift_type(self) -> str:
        return self.selection.selected_lift_type

    @property
    def mode(self) -> EditMode:
        return self.edit_mode.mode

    @property
    def editing_day(self) -> datetime | None:
        """The staged day, or None while editing today."""
        return self.edit_mode.staged_day

    def is_active_day(self, day: datetime) -> bool:
        """Whether ``day`` is the one currently highlighted for editing."""
        if self.edit_mode.is_staged:
            return same_day(self.edit_mode.staged_day, day)
        return same_day(self.current_date, day)

    def visible_days(self) -> list[DaySummary]:
        """Summaries of the days in the visible window."""
        limit = self.config.icons_per_day
        summaries = []
        for day in self.navigator.visible_days():
            workouts = self.store.workouts_on(day)
            summaries.append(
                DaySummary(
                    date=day,
                    day_label=day_label(day),
                    date_label=date_label(day),
                    workout_icons=[w.icon for w in workouts[:limit]],
                    overflow_count=max(0, len(workouts) - limit),
                    is_active=self.is_active_day(day),
                )
            )
        return summaries

    def weekly_progress(self) -> WeeklyProgress:
        return self.progress.weekly_progress(self.current_date, self.goal.value)

    def history(self) -> list[HistoryDay]:
        """Workouts up to the end of today, grouped by day, newest day first."""
        cutoff = end_of_day(self.clock())
        recent = sorted(
            (w for w in self.store.all() if w.date <= cutoff),
            key=lambda w: w.date,
            reverse=True,
        )

        groups: list[HistoryDay] = []
        for workout in recent:
            if groups and same_day(groups[-1].date, workout.date):
                groups[-1].workouts.append(workout)
            else:
                groups.append(HistoryDay(date=workout.date, workouts=[workout]))
        return groups

    def snapshot(self) -> dict:
        """JSON-ready view of the whole session."""
        return {
            "mode": self.mode.value,
            "editing_day": (
                self.editing_day.date().isoformat() if self.editing_day else None
            ),
            "selected_activities": [
                a.value for a in Activity if a in self.selection.selected_activities
            ],
            "selected_lift_type": self.selected_lift_type,
            "progress": self.weekly_progress().to_dict(),
            "days": [d.to_dict() for d in self.visible_days()],
            "history": [h.to_dict() for h in self.history()],
        }

    # Mutations

    def toggle(self, activity: "Activity | str") -> bool:
        return self.selection.toggle(activity)

    def set_lift_type(self, lift_type: "LiftType | str | None") -> None:
        self.selection.set_lift_type(lift_type)

    def begin_edit(self, day: datetime) -> None:
        self.edit_mode.begin_edit(day)

    def commit(self) -> bool:
        return self.edit_mode.commit()

    def reset_to_today(self) -> None:
        self.edit_mode.reset_to_today()

    def jump_to_today(self) -> None:
        """Re-center the window on today and return to live editing."""
        self.current_date = self.clock()
        self.navigator.jump_to_today(self.current_date)
        self.edit_mode.reset_to_today()

    def step(self, direction: "Direction | str") -> datetime:
        return self.navigator.step(direction)

    def set_field(self, workout_id: str, field: "WorkoutField | str", value: str) -> None:
        self.store.set_field(workout_id, field, value)

    def set_goal(self, value) -> int:
        return self.goal.set(value)
