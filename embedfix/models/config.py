"""Pydantic models for embedfix configuration."""

from __future__ import annotations

from pydantic import BaseModel


class BotSettings(BaseModel):
    """Discord bot behaviour."""

    token_env: str = "DISCORD_BOT_TOKEN"
    reply_to_hello: bool = True


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"


class BotConfig(BaseModel):
    """Top-level embedfix configuration."""

    bot: BotSettings = BotSettings()
    logging: LoggingConfig = LoggingConfig()
