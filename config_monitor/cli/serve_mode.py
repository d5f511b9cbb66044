"""Serve mode: run the FastAPI monitor endpoint with uvicorn."""

import sys

import typer
import uvicorn

from config_monitor.config import BUS_ID, MONITOR_ENDPOINT_PATH, MONITOR_PORT
from config_monitor.monitor.server import create_app

from .shared import console, logger


def serve(
    port: int = typer.Option(MONITOR_PORT, "--port", "-p", help="Port for the monitor server"),
    host: str = typer.Option("0.0.0.0", "--host", "-h", help="Bind host"),
) -> None:
    """Start the webhook listener that broadcasts refresh events for changed config files."""
    log = logger.bind(command="serve", port=port, bus_id=BUS_ID)
    log.info("serve.start")

    app = create_app()

    console.print(f"[green]Starting config monitor on http://{host}:{port}[/green]")
    console.print(f"[dim]Endpoints: POST {MONITOR_ENDPOINT_PATH}/monitor, GET /health[/dim]")
    try:
        uvicorn.run(
            app,
            host=host,
            port=port,
            log_level="info",
            timeout_graceful_shutdown=15,
        )
    except KeyboardInterrupt:
        console.print("\n[dim]Shutting down...[/dim]")
        sys.exit(0)
