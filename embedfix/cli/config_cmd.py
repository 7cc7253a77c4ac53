"""Config commands."""

import json

import rich_click as click
from pydantic import ValidationError
from rich.syntax import Syntax

from ..config import get_bot_config, get_config_path, load_config, save_config
from ..models.config import BotConfig
from ._console import console


@click.group()
def config():
    """Manage configuration."""
    pass


@config.command("show")
def config_show():
    """Show the effective configuration."""
    cfg = get_bot_config()
    syntax = Syntax(cfg.model_dump_json(indent=2), "json", theme="monokai")
    console.print(syntax)


@config.command("path")
def config_path():
    """Show configuration file path."""
    console.print(str(get_config_path()))


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str):
    """Set a configuration value (e.g., bot.reply_to_hello false)."""
    cfg = load_config()

    *sections, leaf = key.split(".")
    target = cfg
    for section in sections:
        target = target.setdefault(section, {})

    # JSON literals first, plain string otherwise
    try:
        parsed_value = json.loads(value)
    except json.JSONDecodeError:
        parsed_value = value
    target[leaf] = parsed_value

    try:
        BotConfig.model_validate(cfg)
    except ValidationError as e:
        raise click.BadParameter(str(e), param_hint="VALUE") from e

    save_config(cfg)
    console.print(f"Set {key} = {parsed_value}")
