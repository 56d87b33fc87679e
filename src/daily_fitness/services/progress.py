"""Weekly goal progress."""

import logging
import math
import re
from dataclasses import dataclass
from datetime import datetime

from ..utils.calendar import end_of_week, start_of_week
from .workout_store import WorkoutStore

logger = logging.getLogger(__name__)

MIN_GOAL = 1
MAX_GOAL = 7
DEFAULT_GOAL = 5

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def clamp_goal(value) -> int:
    """Coerce any goal input into the range 1-7.

    Strings use their leading integer ("4 days" -> 4). Anything that yields
    no integer, or yields zero, falls back to the minimum. Infinities clamp
    to the nearest bound.
    """
    if isinstance(value, bool) or value is None:
        number = 0
    elif isinstance(value, (int, float)):
        if math.isnan(value):
            number = 0
        elif math.isinf(value):
            number = MAX_GOAL if value > 0 else MIN_GOAL
        else:
            number = int(value)
    else:
        match = _LEADING_INT.match(str(value))
        number = int(match.group(1)) if match else 0

    if number == 0:
        return MIN_GOAL
    return max(MIN_GOAL, min(MAX_GOAL, number))


class WeeklyGoal:
    """Target number of workout days per week."""

    def __init__(self, value=DEFAULT_GOAL):
        self.value = clamp_goal(value)

    def set(self, value) -> int:
        """Update the goal, clamping invalid input. Returns the stored value."""
        self.value = clamp_goal(value)
        logger.debug("Weekly goal set to %d (input %r)", self.value, value)
        return self.value


@dataclass
class WeeklyProgress:
    """Workout days this week measured against the goal."""

    count: int
    goal: int
    week_start: datetime
    week_end: datetime

    @property
    def ratio(self) -> float:
        """Fraction of the goal reached, capped at 1.0."""
        return min(1.0, self.count / self.goal)

    @property
    def goal_met(self) -> bool:
        return self.count >= self.goal

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "goal": self.goal,
            "ratio": self.ratio,
            "week_start": self.week_start.isoformat(),
            "week_end": self.week_end.isoformat(),
        }


class ProgressCalculator:
    """Counts distinct workout days within a calendar week."""

    def __init__(self, store: WorkoutStore):
        self.store = store

    def days_worked_out(self, reference: datetime) -> int:
        """Number of distinct days with a workout in the week of ``reference``."""
        start = start_of_week(reference)
        end = end_of_week(reference)
        days = {w.date.date() for w in self.store.all() if start <= w.date < end}
        return len(days)

    def weekly_progress(self, reference: datetime, goal: int) -> WeeklyProgress:
        """Measure the week containing ``reference`` against a goal."""
        goal = clamp_goal(goal)
        return WeeklyProgress(
            count=self.days_worked_out(reference),
            goal=goal,
            week_start=start_of_week(reference),
            week_end=end_of_week(reference),
        )
