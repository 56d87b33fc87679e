"""FastAPI application for the daily-fitness tracker."""

from fastapi import FastAPI

from .. import __version__
from ..config import TrackerConfig
from ..services.tracker import DailyTracker
from .routers import tracker


def create_app(config: TrackerConfig | None = None, tracker_session: DailyTracker | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The app owns a single tracker session for its lifetime; nothing is
    persisted between restarts.
    """
    app = FastAPI(
        title="daily-fitness",
        description="Daily workout tracker with a weekly goal",
        version=__version__,
    )

    app.state.tracker = tracker_session or DailyTracker(config or TrackerConfig())

    app.include_router(tracker.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
