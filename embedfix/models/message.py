"""Pydantic models for inbound chat messages and reply decisions."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from .media import AttachmentPreview, EmbedPreview

ReplyAction = Literal["ignored", "greeting", "no_link", "preview_ok", "unchanged", "rewrite"]


class InboundMessage(BaseModel):
    """A received chat message, detached from the chat SDK."""

    message_id: str = ""
    author_id: str
    author_is_bot: bool = False
    channel_id: str
    content: str = ""
    embeds: list[EmbedPreview] = []
    attachments: list[AttachmentPreview] = []


class ReplyDecision(BaseModel):
    """What the handler decided to do with a message."""

    action: ReplyAction
    reply: str | None = None

    @property
    def should_send(self) -> bool:
        return self.reply is not None
