"""
Decide whether an unaddressed message still belongs to a Rooivalk conversation.

A message qualifies when it replies to one of the bot's messages, or when it is
posted in a thread whose starter message was itself a reply to the bot. Every
lookup here is best effort: a deleted, inaccessible or cross-server message
means "no relationship", never an error.
"""

from __future__ import annotations

import logging
from typing import Any

import discord

logger = logging.getLogger(__name__)


async def resolve_reference(channel: Any, reference: Any) -> Any | None:
    """
    Return the message ``reference`` points at.

    Uses the gateway cache when discord.py has it, otherwise fetches from
    ``channel``. Errors propagate; callers decide how to degrade.
    """

    if reference is None or not getattr(reference, "message_id", None):
        return None
    cached = getattr(reference, "cached_message", None)
    if cached is not None:
        return cached
    return await channel.fetch_message(reference.message_id)


async def fetch_parent(message: Any) -> Any | None:
    """Return the message ``message`` replies to, or ``None``."""

    try:
        return await resolve_reference(message.channel, message.reference)
    except Exception as exc:
        logger.warning("Could not fetch parent of message %s: %s", message.id, exc)
        return None


async def is_reply_to_assistant(message: Any, assistant_id: int) -> bool:
    """True when ``message`` is a reply to a message authored by ``assistant_id``."""

    if getattr(message, "reference", None) is None:
        return False

    parent = await fetch_parent(message)
    return parent is not None and parent.author.id == assistant_id


async def _starter_message(thread: discord.Thread) -> Any | None:
    starter = thread.starter_message
    if starter is not None:
        return starter
    # A thread created from a message shares that message's id.
    return await thread.parent.fetch_message(thread.id)


async def is_assistant_thread(message: Any, assistant_id: int) -> bool:
    """
    True when ``message`` sits in a thread started from a reply to the bot.

    Takes one extra hop compared to :func:`is_reply_to_assistant`: thread ->
    starter message -> the message the starter replied to.
    """

    thread = message.channel
    if not isinstance(thread, discord.Thread):
        return False

    try:
        starter = await _starter_message(thread)
        if starter is None:
            return False
        replied_to = await resolve_reference(thread.parent, starter.reference)
    except Exception as exc:
        logger.warning("Error checking ownership of thread %s: %s", thread.id, exc)
        return False

    return replied_to is not None and replied_to.author.id == assistant_id


__all__ = [
    "resolve_reference",
    "fetch_parent",
    "is_reply_to_assistant",
    "is_assistant_thread",
]
