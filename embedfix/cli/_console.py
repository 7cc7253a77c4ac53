"""Shared Rich console instance and helpers."""

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console()


def status_icon(ok: bool) -> str:
    """Return a colored checkmark or cross for status output."""
    if ok:
        return "[green]✓[/green]"
    return "[red]✗[/red]"


def configure_logging(level: str = "INFO") -> None:
    """Route all log records, discord.py included, through Rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )
