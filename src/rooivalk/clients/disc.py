"""Discord bot bootstrap utilities."""

from __future__ import annotations

import asyncio
import logging

import discord
from discord.ext import commands as discord_commands

from rooivalk import commands as rv_commands
from rooivalk import config, scheduler
from rooivalk.config import core
from rooivalk.config.content import reload_content
from rooivalk.config.watcher import start_config_watcher, stop_config_watcher
from rooivalk.event_hooks import message_hook, reaction_hook, ready_hook

logger = logging.getLogger(__name__)

# --- Intents --------------------------------------------------------------- #
intents = discord.Intents.default()
intents.message_content = True


class RooivalkBot(discord_commands.Bot):
    """Primary Discord bot implementation with slash command support."""

    def __init__(self) -> None:
        super().__init__(
            command_prefix=discord_commands.when_mentioned,
            intents=intents,
            application_id=core.DISCORD_APP_ID,
        )
        self.identity = None
        self._config_observer = None

    async def setup_hook(self) -> None:
        """Register slash commands for the guild and start watching config."""

        guild = discord.Object(id=core.DISCORD_GUILD_ID)
        await rv_commands.setup(self, guild)

        try:
            synced = await self.tree.sync(guild=guild)
            logger.info("Synced %d application command(s) to guild %s", len(synced), guild.id)
        except Exception:
            logger.exception("Failed to sync application commands")

        self._config_observer = start_config_watcher(
            asyncio.get_running_loop(),
            core.CONFIG_DIR,
            lambda filename: reload_content(config.content, core.CONFIG_DIR, filename),
        )

    async def close(self) -> None:
        await scheduler.stop()
        stop_config_watcher(self._config_observer)
        self._config_observer = None
        await super().close()


bot = RooivalkBot()


@bot.event
async def on_ready() -> None:
    await ready_hook.handle(bot)


@bot.event
async def on_message(message: discord.Message) -> None:
    await message_hook.handle(bot, message)


@bot.event
async def on_reaction_add(reaction: discord.Reaction, user: discord.User) -> None:
    await reaction_hook.handle(bot, reaction, user)


def run() -> None:
    """Start the Discord bot using configuration from the environment."""

    try:
        bot.run(core.DISCORD_TOKEN, log_handler=None)
    except discord.LoginFailure as exc:
        logger.error("Login failed: %s", exc)
    except Exception as exc:
        logger.exception("Unexpected error while running client: %s", exc)
