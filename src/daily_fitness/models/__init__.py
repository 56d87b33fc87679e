"""Data models for daily-fitness."""

from .workout import ACTIVITY_ICONS, LIFT_TYPE_ICONS, Activity, LiftType, Workout, WorkoutField

__all__ = [
    "ACTIVITY_ICONS",
    "Activity",
    "LIFT_TYPE_ICONS",
    "LiftType",
    "Workout",
    "WorkoutField",
]
