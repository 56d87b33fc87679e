"""Shared CLI utilities."""

import click

from ..services.tracker import DailyTracker


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = []

    header_line = ""
    for i, h in enumerate(headers):
        header_line += h.ljust(widths[i] + padding)
    lines.append(header_line.rstrip())

    sep_line = ""
    for w in widths:
        sep_line += "-" * w + " " * padding
    lines.append(sep_line.rstrip())

    for row in rows:
        row_line = ""
        for i, cell in enumerate(row):
            row_line += str(cell).ljust(widths[i] + padding)
        lines.append(row_line.rstrip())

    return "\n".join(lines)


def render_window(tracker: DailyTracker) -> str:
    """Table of the visible days, with the active day marked."""
    rows = []
    for day in tracker.visible_days():
        workouts = " ".join(day.workout_icons) or "-"
        if day.overflow_count:
            workouts += f" +{day.overflow_count}"
        marker = ">" if day.is_active else ""
        rows.append([marker, day.day_label, day.date_label, workouts])
    return format_table(["", "Day", "Date", "Workouts"], rows)


def render_progress(tracker: DailyTracker) -> str:
    """One-line weekly progress summary with a text bar."""
    progress = tracker.weekly_progress()
    filled = round(progress.ratio * 20)
    bar = "#" * filled + "." * (20 - filled)
    return f"{progress.count} / {progress.goal} days worked out  [{bar}]"


def render_history(tracker: DailyTracker) -> str:
    """Recent workouts grouped by day, newest first."""
    lines = []
    for group in tracker.history():
        lines.append(click.style(group.heading, bold=True))
        for workout in group.workouts:
            details = ", ".join(
                part
                for part in (workout.duration, workout.notes)
                if part
            )
            line = f"  {workout.icon} {workout.label}"
            if details:
                line += f"  ({details})"
            lines.append(line)
    return "\n".join(lines)


def show_tracker(tracker: DailyTracker) -> None:
    """Print the window, progress and history."""
    click.echo()
    click.echo(render_window(tracker))
    click.echo()
    click.echo(render_progress(tracker))
    history = render_history(tracker)
    if history:
        click.echo()
        click.echo(click.style("Recent Workouts", bold=True))
        click.echo(history)
