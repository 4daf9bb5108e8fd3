from __future__ import annotations

import logging

import discord
from discord import app_commands
from discord.ext import commands

from rooivalk.catalogue import ResponseType, get_response
from rooivalk.clients import oai
from rooivalk.config import content as content_store
from rooivalk.constants import IMAGE_ATTACHMENT_NAME
from rooivalk.formatter import FileAttachment

from .. import register_cog

logger = logging.getLogger(__name__)

EMBED_TITLE = "Image by @rooivalk"


def image_embed(prompt: str) -> discord.Embed:
    embed = discord.Embed(title=EMBED_TITLE, description=prompt)
    embed.set_image(url=f"attachment://{IMAGE_ATTACHMENT_NAME}")
    return embed


async def run_image(interaction: discord.Interaction, prompt: str) -> None:
    """Generate one image for ``prompt`` and attach it to the deferred response."""

    await interaction.response.defer()
    catalogue = content_store.get().catalogue

    try:
        image = await oai.create_image(prompt)
    except Exception:
        logger.exception("Error handling /image")
        image = None

    if not image:
        await interaction.edit_original_response(
            content=get_response(ResponseType.ERROR, catalogue)
        )
        return

    attachment = FileAttachment(name=IMAGE_ATTACHMENT_NAME, data=image)
    await interaction.edit_original_response(
        attachments=[attachment.to_discord()],
        embed=image_embed(prompt),
    )


@register_cog
class Image(commands.Cog):
    """Generate an image from a prompt."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @app_commands.command(name="image", description="Generate an image with @rooivalk!")
    @app_commands.describe(prompt="Describe the image you want")
    async def image(self, interaction: discord.Interaction, prompt: str) -> None:
        await run_image(interaction, prompt)
