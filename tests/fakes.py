"""Lightweight stand-ins for discord.py objects."""

from contextlib import asynccontextmanager
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import discord

BOT_ID = 999
GUILD_ID = 7


def make_identity(user_id: int = BOT_ID):
    from rooivalk.identity import AssistantIdentity

    return AssistantIdentity.from_user(SimpleNamespace(id=user_id, display_name="Rooivalk"))


class FakeChannel(SimpleNamespace):
    """Text channel with a message store, ``typing()`` and ``history()``."""

    def __init__(self, channel_id: int = 1, messages=None, history_items=None, **kwargs):
        super().__init__(id=channel_id, **kwargs)
        self.messages = {m.id: m for m in (messages or [])}
        self.history_items = list(history_items or [])
        self.fetch_message = AsyncMock(side_effect=self._fetch)
        self.send = AsyncMock()

    async def _fetch(self, message_id):
        try:
            return self.messages[message_id]
        except KeyError:
            raise discord.NotFound(MagicMock(status=404), "Unknown Message") from None

    @asynccontextmanager
    async def _typing(self):
        yield

    def typing(self):
        return self._typing()

    async def history(self, limit=None, before=None):
        # newest first, like discord.py
        for item in list(reversed(self.history_items))[:limit]:
            yield item


def make_message(
    message_id: int,
    content: str = "",
    *,
    author_id: int = 10,
    bot: bool = False,
    channel=None,
    reference_id: int | None = None,
    mentions=(),
    attachments=(),
    guild_id: int | None = GUILD_ID,
):
    reference = SimpleNamespace(message_id=reference_id, cached_message=None) if reference_id else None
    return SimpleNamespace(
        id=message_id,
        content=content,
        author=SimpleNamespace(id=author_id, bot=bot),
        channel=channel if channel is not None else FakeChannel(),
        guild=SimpleNamespace(id=guild_id) if guild_id is not None else None,
        reference=reference,
        mentions=[SimpleNamespace(id=uid) for uid in mentions],
        attachments=[SimpleNamespace(url=url) for url in attachments],
        reply=AsyncMock(),
        delete=AsyncMock(),
    )
