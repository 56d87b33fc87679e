"""Live/staged editing state machine."""

import logging
from datetime import datetime
from enum import Enum

from ..models.workout import Activity, LiftType
from .selection import SelectionController

logger = logging.getLogger(__name__)


class EditMode(str, Enum):
    """Which day toggles apply to."""

    LIVE = "live"  # Always today
    STAGED = "staged"  # An explicitly chosen day, until commit or reset


class EditModeController:
    """Switches the selection between today and an explicitly chosen day.

    In live mode there is nothing pending: every toggle is applied to today
    as it happens. Staged mode points the selection at another day; commit
    makes the current selection the exact set of workouts for that day.
    """

    def __init__(self, selection: SelectionController):
        self.selection = selection
        self.mode = EditMode.LIVE
        self.staged_day: datetime | None = None

    @property
    def is_staged(self) -> bool:
        return self.mode == EditMode.STAGED

    def begin_edit(self, day: datetime) -> None:
        """Start editing a specific day (past, present or future)."""
        self.mode = EditMode.STAGED
        self.staged_day = day
        self.selection.target_day = day
        logger.debug("Editing %s", day.date())

    def commit(self) -> bool:
        """Write the selection as the full set of workouts for the staged day.

        Every workout on that day is rebuilt, so durations and notes are
        reset. Returns to live mode afterwards.

        Returns:
            False if there was nothing staged
        """
        if not self.is_staged:
            return False

        day = self.staged_day
        activities = [a for a in Activity if a in self.selection.selected_activities]
        lift_type = LiftType.parse(self.selection.selected_lift_type)
        self.selection.store.replace_day(day, activities, lift_type)
        logger.debug("Committed %d activities for %s", len(activities), day.date())
        self._go_live()
        return True

    def reset_to_today(self) -> None:
        """Abandon staging and go back to editing today."""
        if self.is_staged:
            logger.debug("Abandoned edit of %s", self.staged_day.date())
        self._go_live()

    def _go_live(self) -> None:
        self.mode = EditMode.LIVE
        self.staged_day = None
        self.selection.target_day = None
