"""Configuration management for embedfix."""

import copy
import json
import os
from pathlib import Path
from typing import Any

from .models.config import BotConfig

# Application name for XDG paths
APP_NAME = "embedfix"

# Default configuration
DEFAULT_CONFIG: dict[str, Any] = {
    "bot": {
        "token_env": "DISCORD_BOT_TOKEN",
        "reply_to_hello": True,
    },
    "logging": {
        "level": "INFO",
    },
}


def get_xdg_config_home() -> Path:
    """Get XDG config home directory."""
    return Path(os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config")))


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_xdg_config_home() / APP_NAME / "config.json"


def load_config() -> dict[str, Any]:
    """Load configuration, merging with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = get_config_path()

    if config_path.exists():
        with open(config_path) as f:
            user_config = json.load(f)
            config = deep_merge(config, user_config)

    return config


def save_config(config: dict[str, Any]) -> None:
    """Save configuration to file."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        json.dump(config, f, indent=2)


def deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def get_bot_config() -> BotConfig:
    """Load configuration and validate it."""
    return BotConfig.model_validate(load_config())
