"""CLI commands: one module per mode (serve, resolve)."""

from typer import Typer

from config_monitor.cli import resolve_mode, serve_mode

app = Typer(help="Config monitor: refresh services when their config files change")


def register_commands() -> None:
    """Register all CLI commands on the global app."""
    app.command()(serve_mode.serve)
    app.command()(resolve_mode.resolve)


register_commands()
