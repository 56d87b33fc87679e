"""CLI entry point for daily-fitness."""

import logging

import click

from . import __version__
from .commands import serve, track, week


@click.group()
@click.version_option(version=__version__, prog_name="daily-fitness")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """daily-fitness: Track daily workouts against a weekly goal.

    Log activities for today or any day in a rolling five-day window,
    and see how many days you have worked out this week.

    Example usage:

        # Log workouts interactively
        daily-fitness track --goal 4

        # Preview a week from the command line
        daily-fitness week -l Cycle@2026-10-19 -l Lift:Push@2026-10-20

        # Serve the JSON API
        daily-fitness serve --port 8000
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register commands
main.add_command(serve)
main.add_command(track)
main.add_command(week)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
