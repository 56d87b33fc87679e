"""Workout data models."""

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum


class Activity(str, Enum):
    """Trackable activity types."""

    STRETCH = "Stretch"
    CYCLE = "Cycle"
    SWIM = "Swim"
    LIFT = "Lift"
    WALK = "Walk"
    BALL = "Ball"

    @classmethod
    def parse(cls, value: "str | Activity") -> "Activity":
        """Parse an activity name, case-insensitively."""
        if isinstance(value, cls):
            return value
        for activity in cls:
            if activity.value.lower() == str(value).strip().lower():
                return activity
        choices = ", ".join(a.value for a in cls)
        raise ValueError(f"Unknown activity {value!r}. Expected one of: {choices}")


class LiftType(str, Enum):
    """Lift session subtypes."""

    PUSH = "Push"
    PULL = "Pull"
    LEGS = "Legs"
    FULL_BODY = "Full body"

    @classmethod
    def parse(cls, value: "str | LiftType | None") -> "LiftType | None":
        """Parse a lift type name. Empty string or None means unset."""
        if value is None or isinstance(value, cls):
            return value
        text = str(value).strip().lower().replace("-", " ").replace("_", " ")
        if not text:
            return None
        for lift_type in cls:
            if lift_type.value.lower() == text:
                return lift_type
        choices = ", ".join(t.value for t in cls)
        raise ValueError(f"Unknown lift type {value!r}. Expected one of: {choices}")


class WorkoutField(str, Enum):
    """Free-text workout fields editable after creation."""

    DURATION = "duration"
    NOTES = "notes"


ACTIVITY_ICONS = {
    Activity.STRETCH: "🧘",
    Activity.CYCLE: "🚴",
    Activity.SWIM: "🏊",
    Activity.LIFT: "🏋️",
    Activity.WALK: "🚶",
    Activity.BALL: "🏀",
}

LIFT_TYPE_ICONS = {
    LiftType.PUSH: "💪",
    LiftType.PULL: "🎒",
    LiftType.LEGS: "🦵",
    LiftType.FULL_BODY: "🏋️",
}


@dataclass
class Workout:
    """A single activity logged for one calendar day.

    Only the calendar day of ``date`` is significant; the time-of-day is
    whatever the record was created with.
    """

    id: str
    activity: Activity
    date: datetime
    lift_type: LiftType | None = None
    duration: str = ""
    notes: str = ""

    @property
    def icon(self) -> str:
        """Icon for this workout, using the lift subtype when set."""
        if self.activity == Activity.LIFT and self.lift_type:
            return LIFT_TYPE_ICONS[self.lift_type]
        return ACTIVITY_ICONS[self.activity]

    @property
    def label(self) -> str:
        """Human-readable label, e.g. ``Lift (Push)``."""
        if self.lift_type:
            return f"{self.activity.value} ({self.lift_type.value})"
        return self.activity.value

    def copy(self) -> "Workout":
        """Return a detached copy of this record."""
        return replace(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "activity": self.activity.value,
            "date": self.date.isoformat(),
            "lift_type": self.lift_type.value if self.lift_type else None,
            "duration": self.duration,
            "notes": self.notes,
            "icon": self.icon,
            "label": self.label,
        }
