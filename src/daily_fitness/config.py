"""Tracker settings."""

from dataclasses import dataclass, fields

from .services.navigator import WINDOW_LEAD_DAYS, WINDOW_SIZE
from .services.progress import DEFAULT_GOAL

ICONS_PER_DAY = 4  # Remaining workouts are shown as "+N"


@dataclass
class TrackerConfig:
    """Settings for one tracker session."""

    weekly_goal: int = DEFAULT_GOAL
    window_size: int = WINDOW_SIZE
    window_lead_days: int = WINDOW_LEAD_DAYS
    icons_per_day: int = ICONS_PER_DAY

    @classmethod
    def from_options(cls, **options) -> "TrackerConfig":
        """Build from CLI options, ignoring ones left unset."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in options.items() if k in names and v is not None})
