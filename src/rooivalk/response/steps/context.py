"""
Pipeline step for prompt and persona selection.
"""
from __future__ import annotations

import logging

import discord

from rooivalk.config import core
from rooivalk.persona import persona_for_channel
from rooivalk.response.engine import PipelineContext, PipelineStep
from rooivalk.response.history import build_chain, build_thread_chain
from rooivalk.response.prompt import build_prompt, strip_mention

logger = logging.getLogger(__name__)


class ContextStep(PipelineStep):
    """
    Chooses the persona from the channel and builds the prompt.

    Reply chains win over thread history; a message with no earlier
    conversation falls back to its own content minus the bot mention.
    """

    async def run(self, context: PipelineContext) -> PipelineContext:
        message = context.discord_message
        identity = context.identity

        context.persona = persona_for_channel(
            getattr(message.channel, "id", None), core.DISCORD_LEARN_CHANNEL_ID
        )

        if context.prompt is not None:
            return context

        if getattr(message, "reference", None) is not None:
            context.chain = await build_chain(message, identity.user_id)
        elif isinstance(message.channel, discord.Thread):
            context.chain = await build_thread_chain(message, identity.user_id)

        prompt = None
        if len(context.chain) > 1:
            prompt = build_prompt(context.chain, identity.mention, identity.label)
        if prompt is None:
            prompt = strip_mention(message.content, identity.mention)

        logger.info(
            "Prompt for message %s built from %d chain message(s) (persona=%s)",
            message.id,
            len(context.chain),
            context.persona.value,
        )
        context.prompt = prompt
        return context
