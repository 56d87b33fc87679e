"""CLI commands for daily-fitness."""

from .serve import serve
from .track import track
from .week import week

__all__ = [
    "serve",
    "track",
    "week",
]
