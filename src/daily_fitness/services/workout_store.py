"""In-memory workout store.

The store is the only owner of ``Workout`` records. Everything it hands out
is a copy, and every content change is announced to subscribers
synchronously, before the mutating call returns.
"""

import logging
from datetime import datetime
from typing import Callable, Iterable
from uuid import uuid4

from ..models.workout import Activity, LiftType, Workout, WorkoutField
from ..utils.calendar import same_day

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class WorkoutStore:
    """Collection of workouts keyed by (activity, calendar day)."""

    def __init__(self):
        self._workouts: list[Workout] = []
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback run after every change.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def upsert(
        self,
        activity: Activity,
        day: datetime,
        lift_type: LiftType | None = None,
    ) -> str:
        """Insert a fresh workout, replacing any on the same activity and day.

        The replaced record's duration and notes are not carried over.

        Returns:
            The new workout's ID
        """
        self._workouts = [
            w for w in self._workouts if not self._matches(w, activity, day)
        ]
        workout = self._new_workout(activity, day, lift_type)
        self._workouts.append(workout)
        logger.debug("Upserted %s on %s (id=%s)", workout.label, day.date(), workout.id)
        self._notify()
        return workout.id

    def remove(self, activity: Activity, day: datetime) -> None:
        """Remove the workout for an activity on a day, if there is one."""
        remaining = [w for w in self._workouts if not self._matches(w, activity, day)]
        if len(remaining) == len(self._workouts):
            return
        self._workouts = remaining
        logger.debug("Removed %s on %s", activity.value, day.date())
        self._notify()

    def replace_day(
        self,
        day: datetime,
        activities: Iterable[Activity],
        lift_type: LiftType | None = None,
    ) -> list[str]:
        """Replace everything on a day with fresh records for ``activities``.

        Returns:
            IDs of the inserted workouts
        """
        self._workouts = [w for w in self._workouts if not same_day(w.date, day)]
        inserted = []
        # dict.fromkeys keeps order and drops duplicates
        for activity in dict.fromkeys(activities):
            workout = self._new_workout(activity, day, lift_type)
            self._workouts.append(workout)
            inserted.append(workout.id)
        logger.debug("Replaced %s with %d workout(s)", day.date(), len(inserted))
        self._notify()
        return inserted

    def set_field(self, workout_id: str, field: "WorkoutField | str", value: str) -> None:
        """Update the duration or notes of a workout.

        Unknown IDs are ignored; the record may have been replaced by an
        upsert in the meantime.

        Raises:
            ValueError: If ``field`` is not duration or notes
        """
        field = WorkoutField(field)
        workout = self._find(workout_id)
        if workout is None:
            logger.debug("Ignoring %s update for missing workout %s", field.value, workout_id)
            return
        setattr(workout, field.value, value)
        self._notify()

    def set_lift_type(self, day: datetime, lift_type: LiftType | None) -> bool:
        """Change the subtype of the Lift workout on a day in place.

        Returns:
            True if a Lift workout existed and was updated
        """
        for workout in self._workouts:
            if self._matches(workout, Activity.LIFT, day):
                workout.lift_type = lift_type
                logger.debug("Lift on %s set to %s", day.date(), lift_type)
                self._notify()
                return True
        return False

    def workouts_on(self, day: datetime) -> list[Workout]:
        """Get copies of all workouts on a calendar day."""
        return [w.copy() for w in self._workouts if same_day(w.date, day)]

    def get(self, workout_id: str) -> Workout | None:
        """Get a copy of a workout by ID."""
        workout = self._find(workout_id)
        return workout.copy() if workout else None

    def all(self) -> list[Workout]:
        """Get copies of every workout."""
        return [w.copy() for w in self._workouts]

    def __len__(self) -> int:
        return len(self._workouts)

    def _find(self, workout_id: str) -> Workout | None:
        for workout in self._workouts:
            if workout.id == workout_id:
                return workout
        return None

    @staticmethod
    def _matches(workout: Workout, activity: Activity, day: datetime) -> bool:
        return workout.activity == activity and same_day(workout.date, day)

    @staticmethod
    def _new_workout(
        activity: Activity, day: datetime, lift_type: LiftType | None
    ) -> Workout:
        return Workout(
            id=uuid4().hex[:12],
            activity=activity,
            date=day,
            lift_type=lift_type if activity == Activity.LIFT else None,
        )

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()
