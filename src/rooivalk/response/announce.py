"""
Messages Rooivalk posts on its own: the startup greeting and the scheduled
message of the day. Both go to the configured startup channel.
"""

from __future__ import annotations

import logging
from typing import Any

from rooivalk.catalogue import ResponseType, get_response
from rooivalk.clients import llm, yr
from rooivalk.config import content as content_store
from rooivalk.config import core
from rooivalk.formatter import build_reply
from rooivalk.persona import Persona

logger = logging.getLogger(__name__)


async def get_startup_channel(client: Any) -> Any | None:
    """Resolve the startup channel; ``None`` if unset, missing or not text-based."""

    channel_id = core.DISCORD_STARTUP_CHANNEL_ID
    if not channel_id:
        logger.error("Startup channel ID not set")
        return None

    channel = client.get_channel(channel_id)
    if channel is None:
        channel = await client.fetch_channel(channel_id)

    if not callable(getattr(channel, "send", None)):
        logger.error("Startup channel %s is not text-based", channel_id)
        return None
    return channel


async def send_greeting(client: Any) -> None:
    """Post a random greeting; failures are logged and ignored."""

    try:
        channel = await get_startup_channel(client)
        if channel is None:
            return
        catalogue = content_store.get().catalogue
        await channel.send(get_response(ResponseType.GREETING, catalogue))
    except Exception:
        logger.exception("Error sending ready message")


async def send_to_startup_channel(
    client: Any,
    prompt: str,
    persona: Persona = Persona.DEFAULT,
) -> str | None:
    """
    Answer ``prompt`` and post the result to the startup channel.

    Returns the model output that was posted, or ``None`` when nothing was.
    A model failure is reported in the channel with a canned error line.
    """

    content = content_store.get()
    try:
        channel = await get_startup_channel(client)
    except Exception:
        logger.exception("Could not resolve the startup channel")
        return None
    if channel is None:
        return None

    try:
        response_text = await llm.create_response(persona, prompt, content=content)
    except Exception:
        logger.exception("Error generating message for the startup channel")
        await channel.send(get_response(ResponseType.ERROR, content.catalogue))
        return None

    if not response_text:
        await channel.send(get_response(ResponseType.ERROR, content.catalogue))
        return None

    reply = build_reply(response_text, catalogue=content.catalogue)
    await channel.send(**reply.to_message_kwargs())
    return response_text


async def build_motd_prompt() -> str:
    """MOTD instructions, followed by today's weather when it is available."""

    prompt = content_store.get().motd
    try:
        forecasts = await yr.get_all_forecasts()
    except Exception as exc:
        logger.warning("Weather lookup failed; sending MOTD without it: %s", exc)
        return prompt

    if not forecasts:
        return prompt
    return f"{prompt}\n\n### Weather for today:\n{yr.format_forecasts(forecasts)}"


async def send_motd(client: Any) -> str | None:
    """Scheduled job: post the message of the day."""

    logger.info("Sending message of the day")
    return await send_to_startup_channel(client, await build_motd_prompt())


__all__ = [
    "get_startup_channel",
    "send_greeting",
    "send_to_startup_channel",
    "build_motd_prompt",
    "send_motd",
]
