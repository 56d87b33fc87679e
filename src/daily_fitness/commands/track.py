"""Interactive tracking session."""

import click
import questionary
from questionary import Style

from ..config import TrackerConfig
from ..models.workout import ACTIVITY_ICONS, LIFT_TYPE_ICONS, Activity, LiftType, WorkoutField
from ..services.navigator import Direction
from ..services.tracker import DailyTracker
from ..utils.calendar import date_label, day_label
from .base import echo_info, echo_success, echo_warning, show_tracker

custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)

QUIT = "quit"


class TrackSession:
    """Menu loop driving one tracker with questionary prompts."""

    def __init__(self, tracker: DailyTracker):
        self.tracker = tracker

    def run(self) -> None:
        while True:
            show_tracker(self.tracker)
            click.echo()
            action = questionary.select(
                self._menu_title(),
                choices=self._menu_choices(),
                style=custom_style,
            ).ask()
            if action is None or action == QUIT:
                break
            getattr(self, f"do_{action}")()

    def _menu_title(self) -> str:
        tracker = self.tracker
        selected = ", ".join(a.value for a in Activity if a in tracker.selected_activities)
        if tracker.editing_day:
            day = tracker.editing_day
            where = f"Editing {day_label(day)} {date_label(day)}"
        else:
            where = "Today"
        return f"{where}: {selected or 'nothing logged'}"

    def _menu_choices(self) -> list:
        choices = [
            questionary.Choice("Toggle activity", "toggle"),
            questionary.Choice("Set lift type", "lift_type"),
            questionary.Choice("Edit another day", "edit"),
        ]
        if self.tracker.editing_day:
            choices.append(questionary.Choice("Update workouts for this day", "commit"))
        choices += [
            questionary.Choice("Previous day", "back"),
            questionary.Choice("Next day", "forward"),
            questionary.Choice("Today", "today"),
            questionary.Choice("Edit duration/notes", "details"),
            questionary.Choice("Set weekly goal", "goal"),
            questionary.Choice("Quit", QUIT),
        ]
        return choices

    def do_toggle(self) -> None:
        tracker = self.tracker
        choices = [
            questionary.Choice(
                f"{ACTIVITY_ICONS[a]} {a.value}" + (" [x]" if a in tracker.selected_activities else ""),
                a,
            )
            for a in Activity
        ]
        activity = questionary.select("Activity", choices=choices, style=custom_style).ask()
        if activity is None:
            return
        if tracker.toggle(activity):
            echo_success(f"{activity.value} logged")
        else:
            echo_info(f"{activity.value} removed")

    def do_lift_type(self) -> None:
        choices = [questionary.Choice("(none)", "")] + [
            questionary.Choice(f"{LIFT_TYPE_ICONS[t]} {t.value}", t) for t in LiftType
        ]
        lift_type = questionary.select("Lift type", choices=choices, style=custom_style).ask()
        if lift_type is None:
            return
        self.tracker.set_lift_type(lift_type)
        if Activity.LIFT not in self.tracker.selected_activities:
            echo_info("Lift type will be used the next time Lift is logged")

    def do_edit(self) -> None:
        days = self.tracker.navigator.visible_days()
        choices = [
            questionary.Choice(f"{day_label(d)} {date_label(d)}", d) for d in days
        ]
        day = questionary.select("Day to edit", choices=choices, style=custom_style).ask()
        if day is not None:
            self.tracker.begin_edit(day)

    def do_commit(self) -> None:
        day = self.tracker.editing_day
        if self.tracker.commit():
            echo_success(f"Workouts updated for {day_label(day)} {date_label(day)}")

    def do_back(self) -> None:
        self.tracker.step(Direction.BACKWARD)

    def do_forward(self) -> None:
        self.tracker.step(Direction.FORWARD)

    def do_today(self) -> None:
        self.tracker.jump_to_today()

    def do_details(self) -> None:
        workouts = [w for group in self.tracker.history() for w in group.workouts]
        if not workouts:
            echo_warning("No workouts logged yet.")
            return
        choices = [
            questionary.Choice(f"{day_label(w.date)} {date_label(w.date)}  {w.icon} {w.label}", w)
            for w in workouts
        ]
        workout = questionary.select("Workout", choices=choices, style=custom_style).ask()
        if workout is None:
            return
        duration = questionary.text("Duration", default=workout.duration, style=custom_style).ask()
        notes = questionary.text("Notes", default=workout.notes, style=custom_style).ask()
        if duration is not None:
            self.tracker.set_field(workout.id, WorkoutField.DURATION, duration)
        if notes is not None:
            self.tracker.set_field(workout.id, WorkoutField.NOTES, notes)

    def do_goal(self) -> None:
        value = questionary.text(
            "Goal (days/week, 1-7)",
            default=str(self.tracker.goal.value),
            style=custom_style,
        ).ask()
        if value is not None:
            goal = self.tracker.set_goal(value)
            echo_success(f"Weekly goal: {goal} days")


@click.command()
@click.option("--goal", "-g", type=int, default=None, help="Weekly goal in days (1-7, default: 5)")
def track(goal: int | None):
    """Log workouts interactively.

    Toggle activities for today, edit other days in the five-day window,
    and fill in duration and notes. Nothing is saved when you quit.
    """
    tracker = DailyTracker(TrackerConfig.from_options(weekly_goal=goal))
    TrackSession(tracker).run()
