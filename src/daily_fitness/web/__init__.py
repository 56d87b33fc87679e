"""Web interface for daily-fitness."""

from .app import create_app

__all__ = ["create_app"]
