"""Per-message decision logic: greet, skip, or reply with mirror links."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from .link_utils import contains_status_link, rewrite_status_links
from .models.message import InboundMessage, ReplyDecision
from .previews import has_working_preview

log = logging.getLogger(__name__)

GREETING_TRIGGER = "hello"
GREETING_REPLY = "world!"

SendFunc = Callable[[str, str], Awaitable[object]]


def decide_reply(
    message: InboundMessage,
    *,
    bot_user_id: str | None = None,
    reply_to_hello: bool = True,
) -> ReplyDecision:
    """Work out what to post in response to a message, without sending anything."""
    if bot_user_id is not None and message.author_id == bot_user_id:
        return ReplyDecision(action="ignored")

    if reply_to_hello and message.content == GREETING_TRIGGER:
        return ReplyDecision(action="greeting", reply=GREETING_REPLY)

    if not contains_status_link(message.content):
        return ReplyDecision(action="no_link")

    if has_working_preview(message.embeds, message.attachments):
        return ReplyDecision(action="preview_ok")

    rewritten = rewrite_status_links(message.content)
    if rewritten == message.content:
        return ReplyDecision(action="unchanged")
    return ReplyDecision(action="rewrite", reply=rewritten)


async def handle_message(
    message: InboundMessage,
    send: SendFunc,
    *,
    bot_user_id: str | None = None,
    reply_to_hello: bool = True,
) -> ReplyDecision:
    """Decide on a reply and deliver it with ``send(channel_id, text)``.

    Delivery failures are logged and never raised, so one bad send does not
    affect later messages.
    """
    decision = decide_reply(message, bot_user_id=bot_user_id, reply_to_hello=reply_to_hello)
    if not decision.should_send:
        if decision.action == "preview_ok":
            log.debug("Message %s already has a working preview", message.message_id)
        return decision

    try:
        await send(message.channel_id, decision.reply or "")
    except Exception:
        log.exception("Error sending %s reply to channel %s", decision.action, message.channel_id)
    else:
        log.info("Sent %s reply for message %s in channel %s", decision.action, message.message_id, message.channel_id)
    return decision
