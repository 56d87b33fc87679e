"""Activity selection for the day being edited."""

from datetime import datetime
from typing import Callable

from ..models.workout import Activity, LiftType
from .workout_store import WorkoutStore

Clock = Callable[[], datetime]


class SelectionController:
    """Tracks which activities are checked for the target day.

    The selection is never edited directly: toggles go to the store, and the
    store's change notification re-derives ``selected_activities`` and
    ``selected_lift_type``. With no explicit target day the target is "now"
    according to the clock.
    """

    def __init__(self, store: WorkoutStore, clock: Clock = datetime.now):
        self.store = store
        self.clock = clock
        self._target_day: datetime | None = None
        self.selected_activities: set[Activity] = set()
        self.selected_lift_type: str = ""
        store.subscribe(self.recompute)
        self.recompute()

    @property
    def target_day(self) -> datetime | None:
        """Explicit target day, or None when following today."""
        return self._target_day

    @target_day.setter
    def target_day(self, day: datetime | None) -> None:
        self._target_day = day
        self.recompute()

    def resolved_day(self) -> datetime:
        """Get the concrete instant the selection applies to."""
        return self._target_day if self._target_day is not None else self.clock()

    def recompute(self) -> None:
        """Re-derive the selection from the store's records for the target day."""
        workouts = self.store.workouts_on(self.resolved_day())
        self.selected_activities = {w.activity for w in workouts}
        lift = next((w for w in workouts if w.activity == Activity.LIFT), None)
        self.selected_lift_type = lift.lift_type.value if lift and lift.lift_type else ""

    def toggle(self, activity: "Activity | str") -> bool:
        """Check or uncheck an activity for the target day.

        Lift and the other activities are independent of each other; only
        the (activity, day) slot itself is replaced.

        Returns:
            True if the activity is now selected
        """
        activity = Activity.parse(activity)
        day = self.resolved_day()

        if activity in self.selected_activities:
            if activity == Activity.LIFT:
                self.selected_lift_type = ""
            self.store.remove(activity, day)
            return False

        lift_type = None
        if activity == Activity.LIFT:
            lift_type = LiftType.parse(self.selected_lift_type)
        self.store.upsert(activity, day, lift_type)
        return True

    def set_lift_type(self, lift_type: "LiftType | str | None") -> None:
        """Choose the lift subtype.

        An existing Lift workout on the target day is updated in place, so
        its duration and notes survive. Without one, the choice is kept for
        the next Lift toggle.
        """
        parsed = LiftType.parse(lift_type)
        self.selected_lift_type = parsed.value if parsed else ""
        self.store.set_lift_type(self.resolved_day(), parsed)
