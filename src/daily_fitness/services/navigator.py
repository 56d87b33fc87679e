"""Sliding window of visible days."""

from datetime import datetime
from enum import Enum

from ..utils.calendar import add_days

WINDOW_SIZE = 5
WINDOW_LEAD_DAYS = 2  # Days shown before today after a jump


class Direction(str, Enum):
    """Window step direction."""

    FORWARD = "forward"
    BACKWARD = "backward"

    @classmethod
    def parse(cls, value: "str | Direction") -> "Direction":
        if isinstance(value, cls):
            return value
        aliases = {
            "forward": cls.FORWARD,
            "right": cls.FORWARD,
            "next": cls.FORWARD,
            "backward": cls.BACKWARD,
            "left": cls.BACKWARD,
            "prev": cls.BACKWARD,
        }
        direction = aliases.get(str(value).strip().lower())
        if direction is None:
            raise ValueError(f"Unknown direction {value!r}. Expected forward or backward")
        return direction


class DateWindowNavigator:
    """Keeps track of the first of a fixed number of consecutive visible days.

    The window moves independently of which day is being edited.
    """

    def __init__(
        self,
        today: datetime,
        size: int = WINDOW_SIZE,
        lead_days: int = WINDOW_LEAD_DAYS,
    ):
        self.size = size
        self.lead_days = lead_days
        self.anchor = add_days(today, -lead_days)

    def step(self, direction: "Direction | str") -> datetime:
        """Move the window one day. Returns the new anchor."""
        offset = 1 if Direction.parse(direction) == Direction.FORWARD else -1
        self.anchor = add_days(self.anchor, offset)
        return self.anchor

    def visible_days(self) -> list[datetime]:
        return [add_days(self.anchor, i) for i in range(self.size)]

    def jump_to_today(self, today: datetime) -> datetime:
        """Re-center the window so ``today`` sits after the lead days."""
        self.anchor = add_days(today, -self.lead_days)
        return self.anchor
