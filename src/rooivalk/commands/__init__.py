"""
Auto-discovery & registry for slash command cogs.

Any module inside ``commands/handlers`` that defines::

    from rooivalk.commands import register_cog

    @register_cog
    class MyCog(commands.Cog): ...

is picked up automatically at import-time. Invoking :func:`setup` attaches
every registered cog to the bot, scoped to a guild when one is given.
"""

from __future__ import annotations

import logging
from importlib import import_module
from pathlib import Path
from pkgutil import iter_modules
from typing import List, Optional, Type

import discord
from discord.ext import commands as commands_ext

logger = logging.getLogger(__name__)

_COG_CLASSES: List[Type[commands_ext.Cog]] = []


def register_cog(cls: Optional[Type[commands_ext.Cog]] = None):
    """Decorator registering a Cog class for later attachment to the bot."""

    def _register(cog_cls: Type[commands_ext.Cog]):
        if not issubclass(cog_cls, commands_ext.Cog):
            raise TypeError("register_cog expects a discord.ext.commands.Cog subclass")

        if cog_cls not in _COG_CLASSES:
            _COG_CLASSES.append(cog_cls)
        return cog_cls

    if cls is None:
        return _register
    return _register(cls)


async def setup(
    bot: commands_ext.Bot, guild: Optional[discord.abc.Snowflake] = None
) -> None:
    """
    Attach registered cogs to ``bot``.

    With ``guild`` set, the cogs' app commands are registered for that guild
    only, so a later ``tree.sync(guild=...)`` publishes them immediately.
    Must be invoked during ``commands.Bot.setup_hook``.
    """

    for cog_cls in _COG_CLASSES:
        if bot.get_cog(cog_cls.__name__):
            continue
        if guild is None:
            await bot.add_cog(cog_cls(bot))
        else:
            await bot.add_cog(cog_cls(bot), guild=guild)

    if _COG_CLASSES:
        logger.info("Registered %d command cog(s)", len(_COG_CLASSES))
    else:
        logger.warning("No command cogs discovered; command tree is empty")


_pkg_path = Path(__file__).resolve().parent / "handlers"
for _, modname, _ in iter_modules([str(_pkg_path)]):
    if modname.startswith("_"):
        continue
    import_module(f"{__name__}.handlers.{modname}")


__all__ = [
    "register_cog",
    "setup",
]
