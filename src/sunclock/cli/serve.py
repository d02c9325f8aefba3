"""CLI command to start the sunclock API server."""

import logging
import click
import uvicorn

from ..api.rest import create_app
from ..model.settings import SolarSettings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--host",
    default="127.0.0.1",
    help="Host to bind to (default: 127.0.0.1)",
)
@click.option(
    "--port",
    default=8080,
    type=int,
    help="Port to bind to (default: 8080)",
)
@click.option(
    "--zenith",
    default=None,
    type=float,
    help="Default zenith angle when a request omits it (default: 90.8333)",
)
@click.option(
    "--golden-minutes",
    default=None,
    type=float,
    help="Default golden hour half-width in minutes (default: 30)",
)
def main(host, port, zenith, golden_minutes):
    """Start the sunclock API server.

    Examples:
        # Start with default settings
        sunclock-serve

        # Civil twilight instead of sunrise/sunset
        sunclock-serve --zenith 96
    """
    overrides = {"zenith": zenith, "golden_hour_minutes": golden_minutes}
    settings = SolarSettings(**{k: v for k, v in overrides.items() if v is not None})
    app = create_app(settings)

    click.echo(f"Starting API server on http://{host}:{port}")
    click.echo(f"   • Sun times:    http://{host}:{port}/api/sun?latitude=..&longitude=..")
    click.echo(f"   • Golden hour:  http://{host}:{port}/api/golden_hour?latitude=..&longitude=..")
    click.echo(f"   • Health Check: http://{host}:{port}/health")
    logger.info(f"Default zenith {settings.zenith}, golden hour +/-{settings.golden_hour_minutes} min")

    try:
        uvicorn.run(app, host=host, port=port, log_level="info")
    except KeyboardInterrupt:
        click.echo("\nShutting down...")


if __name__ == "__main__":
    main()
