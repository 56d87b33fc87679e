"""One-shot week overview command."""

from datetime import datetime

import click

from ..config import TrackerConfig
from ..models.workout import Activity, LiftType
from ..services.tracker import DailyTracker
from ..utils.calendar import parse_day
from .base import echo_error, show_tracker


def parse_log_entry(entry: str) -> tuple[Activity, datetime, LiftType | None]:
    """Parse ``ACTIVITY@YYYY-MM-DD`` or ``Lift:SUBTYPE@YYYY-MM-DD``.

    Raises:
        ValueError: If any part is malformed
    """
    if "@" not in entry:
        raise ValueError(f"Expected ACTIVITY@YYYY-MM-DD, got {entry!r}")
    name, day = entry.rsplit("@", 1)
    lift_type = None
    if ":" in name:
        name, subtype = name.split(":", 1)
        lift_type = LiftType.parse(subtype)
    activity = Activity.parse(name)
    if lift_type and activity != Activity.LIFT:
        raise ValueError(f"Only Lift takes a subtype, got {entry!r}")
    return activity, parse_day(day), lift_type


@click.command()
@click.option(
    "--date",
    "-d",
    "date_str",
    default=None,
    help="Day to treat as today (YYYY-MM-DD, default: today)",
)
@click.option(
    "--log",
    "-l",
    "entries",
    multiple=True,
    help="Workout to log, e.g. Cycle@2026-10-19 or Lift:Push@2026-10-20",
)
@click.option("--goal", "-g", default=None, help="Weekly goal in days (1-7)")
@click.pass_context
def week(ctx: click.Context, date_str: str | None, entries: tuple[str, ...], goal: str | None):
    """Show the five-day window and weekly progress.

    Builds a throwaway session from the logged workouts and prints it.

    Example:

        daily-fitness week --date 2026-10-21 -l Cycle@2026-10-19 -l Lift:Push@2026-10-20
    """
    try:
        today = parse_day(date_str) if date_str else datetime.now()
        logged = [parse_log_entry(e) for e in entries]
    except ValueError as e:
        echo_error(str(e))
        ctx.exit(1)

    tracker = DailyTracker(TrackerConfig(), clock=lambda: today)
    if goal is not None:
        tracker.set_goal(goal)

    for activity, day, lift_type in logged:
        tracker.begin_edit(day)
        if lift_type:
            tracker.set_lift_type(lift_type)
        if activity not in tracker.selected_activities:
            tracker.toggle(activity)
    tracker.reset_to_today()

    show_tracker(tracker)
