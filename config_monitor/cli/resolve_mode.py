"""Resolve mode: show which service identifiers a set of changed paths would refresh."""

import typer
from rich.table import Table

from config_monitor.config import BUS_ID
from config_monitor.monitor.broadcast import LoggingBroadcastSink, make_publisher
from config_monitor.monitor.models import PathNotification
from config_monitor.monitor.processor import process_notification

from .shared import console, logger


def resolve(
    paths: list[str] = typer.Argument(..., help="Changed file paths, e.g. /member/nbbang-auth-prod.yml"),
    publish: bool = typer.Option(
        False,
        "--publish",
        help="Send refresh events to the logging sink instead of a dry run",
    ),
) -> None:
    """Resolve changed paths to service identifiers and print them."""
    log = logger.bind(command="resolve", paths=paths, publish=publish)
    log.info("resolve.start")

    if publish:
        publisher = make_publisher(LoggingBroadcastSink(), BUS_ID)
    else:
        def publisher(service: str) -> None:
            log.debug("resolve.dry_run", service=service)

    services = process_notification(PathNotification(paths=paths), publisher)
    if not services:
        console.print("[yellow]No services affected.[/yellow]")
        log.info("resolve.no_services")
        return

    table = Table(title="Services to refresh")
    table.add_column("#", justify="right")
    table.add_column("Identifier", style="cyan")
    for i, service in enumerate(services, 1):
        table.add_row(str(i), service)
    console.print(table)
    log.info("resolve.ok", count=len(services))
