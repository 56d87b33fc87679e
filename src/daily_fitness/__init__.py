"""daily-fitness: track daily workouts against a weekly goal."""

__version__ = "0.1.0"
