"""Decide whether a message already carries a working Twitter/X media preview."""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import urlparse

from .models.media import AttachmentPreview, EmbedPreview

# First-party media CDN hosts. A preview served from one of these shows real media.
TWITTER_MEDIA_HOSTS = (
    "pbs.twimg.com",
    "video.twimg.com",
    "ton.twimg.com",
)

# Thumbnail path markers for the generic video poster frame.
_VIDEO_PLACEHOLDER_MARKERS = (
    "tweet_video_thumb",
    "ext_tw_video_thumb",
    "amplify_video_thumb",
)


def _hostname_for(url: str) -> str:
    try:
        return urlparse(url).hostname or ""
    except ValueError:
        return ""


def _is_video_placeholder(url: str) -> bool:
    try:
        path = urlparse(url).path or ""
    except ValueError:
        return False
    return any(marker in path for marker in _VIDEO_PLACEHOLDER_MARKERS)


def is_twitter_media_url(url: str | None, *, thumbnail: bool = False) -> bool:
    """Return True if url is served from a Twitter/X media host.

    Thumbnails pointing at a video placeholder never count. Unparseable URLs
    are simply not media URLs. Static assets on ``abs.twimg.com`` do not
    match either, but they do not stop the caller from looking further.
    """
    if not url:
        return False
    if thumbnail and _is_video_placeholder(url):
        return False
    hostname = _hostname_for(url)
    if not hostname:
        return False
    return hostname.endswith(TWITTER_MEDIA_HOSTS)


def is_working_embed(embed: EmbedPreview) -> bool:
    """Check an embed's primary, image and thumbnail URLs in that order."""
    if is_twitter_media_url(embed.url):
        return True
    if is_twitter_media_url(embed.image_url):
        return True
    return is_twitter_media_url(embed.thumbnail_url, thumbnail=True)


def is_working_attachment(attachment: AttachmentPreview) -> bool:
    return is_twitter_media_url(attachment.url)


def has_working_preview(
    embeds: Iterable[EmbedPreview] = (),
    attachments: Iterable[AttachmentPreview] = (),
) -> bool:
    """Return True as soon as any embed or attachment shows Twitter/X media.

    Embeds are scanned before attachments, each in message order.
    """
    if any(is_working_embed(embed) for embed in embeds):
        return True
    return any(is_working_attachment(attachment) for attachment in attachments)
