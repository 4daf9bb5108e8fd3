from __future__ import annotations

import logging

import discord
from discord import app_commands
from discord.ext import commands

from rooivalk.catalogue import ResponseType, get_response
from rooivalk.clients import llm
from rooivalk.config import content as content_store
from rooivalk.formatter import build_reply
from rooivalk.persona import Persona

from .. import register_cog

logger = logging.getLogger(__name__)


async def run_learn(interaction: discord.Interaction, prompt: str) -> None:
    """
    Answer ``prompt`` with the learn persona in the deferred response.

    Any failure, or an empty answer, leaves a canned error line instead.
    """

    await interaction.response.defer()
    content = content_store.get()

    try:
        response_text = await llm.create_response(Persona.LEARN, prompt, content=content)
    except Exception:
        logger.exception("Error handling /learn")
        response_text = None

    if not response_text:
        await interaction.edit_original_response(
            content=get_response(ResponseType.ERROR, content.catalogue)
        )
        return

    reply = build_reply(response_text, catalogue=content.catalogue)
    await interaction.edit_original_response(**reply.to_edit_kwargs())


@register_cog
class Learn(commands.Cog):
    """Ask the learning persona a question."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @app_commands.command(name="learn", description="Learn with @rooivalk!")
    @app_commands.describe(prompt="What do you want to learn about?")
    async def learn(self, interaction: discord.Interaction, prompt: str) -> None:
        await run_learn(interaction, prompt)
