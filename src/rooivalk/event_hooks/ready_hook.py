import logging

import discord

from rooivalk import scheduler
from rooivalk.config import core
from rooivalk.identity import AssistantIdentity
from rooivalk.response import announce

logger = logging.getLogger(__name__)


async def handle(client: discord.Client):
    """Fix the bot identity, greet the startup channel and schedule the MOTD."""

    logger.info(f"Logged in as {client.user.name} (ID: {client.user.id})")

    # on_ready fires again after every reconnect; only the first one greets.
    if getattr(client, "identity", None) is not None:
        return

    client.identity = AssistantIdentity.from_user(client.user)

    await announce.send_greeting(client)

    try:
        await scheduler.start(core.MOTD_CRON, lambda: announce.send_motd(client))
    except ValueError as e:
        logger.error("MOTD schedule not started: %s", e)
