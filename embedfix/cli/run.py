"""Run command."""

import logging
import sys

import rich_click as click

from ..auth import MissingTokenError, get_bot_token
from ..config import get_bot_config
from ._console import configure_logging, console

log = logging.getLogger(__name__)


@click.command()
@click.option("--log-level", default=None, help="Log level (default: logging.level from config)")
def run(log_level: str | None):
    """Connect to Discord and start rewriting status links."""
    from ..bot import run_bot

    cfg = get_bot_config()
    configure_logging(log_level or cfg.logging.level)

    try:
        token = get_bot_token(cfg.bot.token_env)
    except MissingTokenError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    log.info("Starting embedfix")
    run_bot(token, reply_to_hello=cfg.bot.reply_to_hello)
