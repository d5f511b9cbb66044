"""Shared CLI helpers: console and logger."""

from rich.console import Console

from config_monitor.utils.logger import get_logger

console = Console()
logger = get_logger("config_monitor.cli")
