"""Web server command."""

import click

from ..config import TrackerConfig
from .base import echo_warning


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.option("--goal", "-g", type=int, default=None, help="Weekly goal in days (1-7, default: 5)")
def serve(host: str, port: int, reload: bool, goal: int | None):
    """Start the web API.

    Serves the tracker as a JSON API. Workouts live in memory and are
    gone when the server stops.

    Examples:

        # Start on default port (8000)
        daily-fitness serve

        # Start on custom port with a 4-day goal
        daily-fitness serve --port 3000 --goal 4

        # Development mode with auto-reload
        daily-fitness serve --reload
    """
    import uvicorn

    from ..web import create_app

    click.echo()
    click.echo(click.style("Starting daily-fitness web server...", fg="green"))
    click.echo()
    click.echo(f"  Local:   http://{host}:{port}")
    if host == "0.0.0.0":
        import socket
        hostname = socket.gethostname()
        try:
            local_ip = socket.gethostbyname(hostname)
            click.echo(f"  Network: http://{local_ip}:{port}")
        except socket.gaierror:
            pass
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    if reload:
        if goal is not None:
            echo_warning("--goal is ignored with --reload; the default goal is used.")
        # The reloader imports the factory by name, so options can't be passed through
        uvicorn.run("daily_fitness.web:create_app", host=host, port=port, reload=True, factory=True)
        return

    app = create_app(TrackerConfig.from_options(weekly_goal=goal))
    uvicorn.run(app, host=host, port=port)
