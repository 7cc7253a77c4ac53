"""Environment-file parsing and bot credential lookup."""

import os
from pathlib import Path

DEFAULT_TOKEN_ENV = "DISCORD_BOT_TOKEN"


class MissingTokenError(ValueError):
    """Raised when the bot token cannot be found."""


def default_env_files() -> list[Path]:
    """Return the ``.env`` files consulted, highest priority first."""
    return [Path.cwd() / ".env", Path.home() / ".env"]


def load_env_file(path: Path | None = None) -> dict[str, str]:
    """Parse a .env file, returning a dict of key-value pairs.

    Skips blank lines and comments.  Handles ``export KEY=value`` and
    quoted values.  If *path* is ``None`` the default files are merged,
    with ``./.env`` winning over ``~/.env``.
    """
    if path is None:
        env: dict[str, str] = {}
        for candidate in reversed(default_env_files()):
            env.update(load_env_file(candidate))
        return env

    env = {}
    if not path.is_file():
        return env

    with open(path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            if line.startswith("export "):
                line = line[7:]
            key, value = line.split("=", 1)
            value = value.strip().strip("\"'")
            env[key.strip()] = value

    return env


def get_bot_token(env_name: str = DEFAULT_TOKEN_ENV) -> str:
    """Return the bot token from the environment or a ``.env`` file.

    Raises ``MissingTokenError`` when the token cannot be found.
    """
    value = os.environ.get(env_name)
    if not value:
        value = load_env_file().get(env_name)
    if not value:
        raise MissingTokenError(f"No token provided. Set {env_name} in your environment or .env file.")
    return value
