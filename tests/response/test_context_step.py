from unittest.mock import MagicMock

import discord
import pytest

from fakes import BOT_ID, FakeChannel, make_identity, make_message
from rooivalk.config.content import BotContent
from rooivalk.persona import Persona
from rooivalk.response.engine import PipelineContext
from rooivalk.response.steps.context import ContextStep


def _context(message, prompt=None):
    return PipelineContext(
        discord_message=message,
        identity=make_identity(),
        content=BotContent(),
        prompt=prompt,
    )


@pytest.mark.asyncio
async def test_plain_mention_becomes_stripped_prompt():
    message = make_message(1, "hi <@999>", channel=FakeChannel(channel_id=1))

    context = await ContextStep().run(_context(message))

    assert context.prompt == "hi"
    assert context.persona is Persona.DEFAULT


@pytest.mark.asyncio
async def test_learn_channel_selects_learn_persona():
    message = make_message(1, "<@999> teach me", channel=FakeChannel(channel_id=600))

    context = await ContextStep().run(_context(message))

    assert context.persona is Persona.LEARN


@pytest.mark.asyncio
async def test_reply_chain_builds_conversation_prompt():
    channel = FakeChannel()
    channel.messages[1] = make_message(1, "what is 2+2?", channel=channel)
    channel.messages[2] = make_message(2, "4", author_id=BOT_ID, channel=channel, reference_id=1)
    message = make_message(3, "<@999> and 3+3?", channel=channel, reference_id=2)

    context = await ContextStep().run(_context(message))

    assert context.prompt == "User: what is 2+2?\nRooivalk: 4\nUser: and 3+3?"
    assert len(context.chain) == 3


@pytest.mark.asyncio
async def test_preset_prompt_is_kept():
    channel = FakeChannel(channel_id=600)
    channel.messages[1] = make_message(1, "parent", channel=channel)
    message = make_message(2, "child", channel=channel, reference_id=1)

    context = await ContextStep().run(_context(message, prompt="explain this"))

    assert context.prompt == "explain this"
    assert context.chain == []
    assert context.persona is Persona.LEARN


@pytest.mark.asyncio
async def test_thread_without_reference_uses_history():
    earlier = make_message(1, "bot answer", author_id=BOT_ID)

    async def history(limit=None, before=None):
        yield earlier

    thread = MagicMock(spec=discord.Thread)
    thread.id = 42
    thread.history = history
    message = make_message(2, "more please", channel=thread)

    context = await ContextStep().run(_context(message))

    assert context.prompt == "Rooivalk: bot answer\nUser: more please"
