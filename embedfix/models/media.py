"""Pydantic models for previews already attached to a message."""

from __future__ import annotations

from pydantic import BaseModel


class EmbedPreview(BaseModel):
    """A rich-preview element generated by the chat platform."""

    url: str | None = None
    image_url: str | None = None
    thumbnail_url: str | None = None
    type: str = "rich"
    title: str | None = None
    description: str | None = None


class AttachmentPreview(BaseModel):
    """A file attached to a message."""

    filename: str = ""
    url: str = ""
    size: int = 0
