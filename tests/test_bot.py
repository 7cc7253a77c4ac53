"""Tests for converting discord.py messages and wiring the client."""

import asyncio
from types import SimpleNamespace

import discord

from embedfix.bot import EmbedFixClient, build_intents, message_from_discord


def _discord_message(content: str, embeds=None, attachments=None):
    return SimpleNamespace(
        id=555,
        author=SimpleNamespace(id=42, bot=False),
        channel=SimpleNamespace(id=1000),
        content=content,
        embeds=embeds or [],
        attachments=attachments or [],
    )


def test_message_from_discord_copies_previews():
    embed = discord.Embed(title="Post", description="text", url="https://twitter.com/u/status/1")
    embed.set_image(url="https://pbs.twimg.com/media/a.jpg")
    embed.set_thumbnail(url="https://pbs.twimg.com/tweet_video_thumb/b.jpg")
    attachment = SimpleNamespace(filename="clip.mp4", url="https://video.twimg.com/a.mp4", size=2048)

    message = message_from_discord(_discord_message("hi", [embed], [attachment]))

    assert message.message_id == "555"
    assert message.author_id == "42"
    assert message.channel_id == "1000"
    assert message.content == "hi"
    (converted,) = message.embeds
    assert converted.url == "https://twitter.com/u/status/1"
    assert converted.image_url == "https://pbs.twimg.com/media/a.jpg"
    assert converted.thumbnail_url == "https://pbs.twimg.com/tweet_video_thumb/b.jpg"
    assert converted.title == "Post"
    (copied,) = message.attachments
    assert copied.filename == "clip.mp4"
    assert copied.size == 2048


def test_message_from_discord_embed_without_media():
    message = message_from_discord(_discord_message("", [discord.Embed()]))

    (converted,) = message.embeds
    assert converted.url is None
    assert converted.image_url is None
    assert converted.thumbnail_url is None


def test_build_intents_reads_message_content():
    intents = build_intents()
    assert intents.message_content
    assert intents.guild_messages


def test_on_message_sends_rewrite_to_channel(monkeypatch):
    client = EmbedFixClient()
    sent: list[str] = []

    async def _send(text):
        sent.append(text)

    monkeypatch.setattr(client, "get_channel", lambda channel_id: SimpleNamespace(id=channel_id, send=_send))

    asyncio.run(client.on_message(_discord_message("Look at https://x.com/user/status/789012")))

    assert sent == ["Look at https://fixupx.com/user/status/789012"]
