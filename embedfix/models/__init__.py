"""Pydantic models for the embedfix application."""

from __future__ import annotations

from .config import (
    BotConfig,
    BotSettings,
    LoggingConfig,
)
from .links import (
    MIRROR_DOMAINS,
    StatusLink,
)
from .media import (
    AttachmentPreview,
    EmbedPreview,
)
from .message import (
    InboundMessage,
    ReplyAction,
    ReplyDecision,
)

__all__ = [
    "MIRROR_DOMAINS",
    "AttachmentPreview",
    "BotConfig",
    "BotSettings",
    "EmbedPreview",
    "InboundMessage",
    "LoggingConfig",
    "ReplyAction",
    "ReplyDecision",
    "StatusLink",
]
