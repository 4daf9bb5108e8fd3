import logging

import discord

from rooivalk import response
from rooivalk.config import core
from rooivalk.response.ownership import is_assistant_thread, is_reply_to_assistant

logger = logging.getLogger(__name__)


async def is_addressed(message: discord.Message, identity) -> bool:
    """Mentioned directly, replying to the bot, or inside a bot-owned thread."""

    if identity.is_mentioned_in(message.content):
        return True
    if await is_reply_to_assistant(message, identity.user_id):
        return True
    return await is_assistant_thread(message, identity.user_id)


async def handle(client: discord.Client, message: discord.Message):
    """Handle incoming Discord messages."""

    if message.author.bot:
        return

    # DMs and other servers are out of scope.
    if message.guild is None or message.guild.id != core.DISCORD_GUILD_ID:
        return

    identity = getattr(client, "identity", None)
    if identity is None:
        logger.warning("Ignoring message %s received before ready", message.id)
        return

    if not await is_addressed(message, identity):
        return

    logger.info(
        "Responding to message %s in channel %s",
        message.id,
        getattr(message.channel, "id", "unknown"),
    )
    await response.handle(message, identity)
