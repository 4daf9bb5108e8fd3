"""
Handle reactions with the trigger emoji.

On one of the bot's own messages the reaction asks for a fresh answer: the
original question is answered again and the old reply removed. On anyone
else's message it asks the bot to explain that message.
"""

from __future__ import annotations

import logging

import discord

from rooivalk import response
from rooivalk.config import core
from rooivalk.constants import EXPLAIN_PROMPT
from rooivalk.response.ownership import fetch_parent

logger = logging.getLogger(__name__)


def emoji_name(emoji) -> str | None:
    if isinstance(emoji, str):
        return emoji
    return getattr(emoji, "name", None)


async def handle(
    client: discord.Client, reaction: discord.Reaction, user: discord.User
) -> None:
    message = reaction.message
    guild = getattr(message, "guild", None)

    if guild is None or guild.id != core.DISCORD_GUILD_ID:
        return

    if getattr(user, "bot", False):
        return

    if emoji_name(reaction.emoji) != core.TRIGGER_EMOJI:
        return

    identity = getattr(client, "identity", None)
    if identity is None:
        logger.warning("Ignoring reaction on message %s received before ready", message.id)
        return

    if message.author.id == identity.user_id:
        original = await fetch_parent(message)
        if original is None:
            logger.error("Original message for reprocessing not found (message %s)", message.id)
            return

        logger.info("Reprocessing message %s on request of %s", original.id, user.id)
        await response.handle(original, identity)
        await message.delete()
        return

    logger.info("Explaining message %s on request of %s", message.id, user.id)
    await response.handle(
        message,
        identity,
        prompt=EXPLAIN_PROMPT.format(content=message.content),
    )
