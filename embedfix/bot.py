"""Discord client wiring: event conversion, reply delivery and session lifetime."""

from __future__ import annotations

import logging

import discord

from .handler import handle_message
from .models.media import AttachmentPreview, EmbedPreview
from .models.message import InboundMessage

log = logging.getLogger(__name__)


def _embed_from_discord(embed: discord.Embed) -> EmbedPreview:
    return EmbedPreview(
        url=embed.url or None,
        image_url=embed.image.url or None,
        thumbnail_url=embed.thumbnail.url or None,
        type=embed.type or "rich",
        title=embed.title or None,
        description=embed.description or None,
    )


def _attachment_from_discord(attachment: discord.Attachment) -> AttachmentPreview:
    return AttachmentPreview(
        filename=attachment.filename or "",
        url=attachment.url or "",
        size=attachment.size or 0,
    )


def message_from_discord(message: discord.Message) -> InboundMessage:
    """Copy the fields the handler needs out of a discord.py message."""
    return InboundMessage(
        message_id=str(message.id),
        author_id=str(message.author.id),
        author_is_bot=bool(message.author.bot),
        channel_id=str(message.channel.id),
        content=message.content or "",
        embeds=[_embed_from_discord(embed) for embed in message.embeds],
        attachments=[_attachment_from_discord(attachment) for attachment in message.attachments],
    )


def build_intents() -> discord.Intents:
    intents = discord.Intents.default()
    intents.guild_messages = True
    intents.message_content = True
    return intents


class EmbedFixClient(discord.Client):
    """Discord client that replies with mirror links for unpreviewed status links."""

    def __init__(self, *, reply_to_hello: bool = True, **kwargs) -> None:
        kwargs.setdefault("intents", build_intents())
        super().__init__(**kwargs)
        self.reply_to_hello = reply_to_hello

    async def on_ready(self) -> None:
        log.info("Logged in as %s; the bot is now running. Press CTRL-C to exit.", self.user)

    async def send_to_channel(self, channel_id: str, text: str) -> None:
        channel = self.get_channel(int(channel_id))
        if channel is None:
            channel = await self.fetch_channel(int(channel_id))
        await channel.send(text)

    async def on_message(self, message: discord.Message) -> None:
        bot_user_id = str(self.user.id) if self.user else None
        await handle_message(
            message_from_discord(message),
            self.send_to_channel,
            bot_user_id=bot_user_id,
            reply_to_hello=self.reply_to_hello,
        )


def run_bot(token: str, *, reply_to_hello: bool = True) -> None:
    """Connect and block until interrupted.

    discord.py handles SIGINT/SIGTERM and closes the session on the way out.
    Its loggers propagate to whatever handler the caller installed.
    """
    client = EmbedFixClient(reply_to_hello=reply_to_hello)
    client.run(token, log_handler=None)
