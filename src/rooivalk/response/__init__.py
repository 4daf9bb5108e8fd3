"""Entry-point helpers for generating replies."""

from __future__ import annotations

import logging
from contextlib import AsyncExitStack

import discord

from rooivalk.catalogue import ResponseType, get_response
from rooivalk.config import content as content_store
from rooivalk.identity import AssistantIdentity
from rooivalk.response.engine import PipelineContext, ResponsePipeline
from rooivalk.response.steps.context import ContextStep
from rooivalk.response.steps.formatting import FormattingStep
from rooivalk.response.steps.generation import GenerationStep

logger = logging.getLogger(__name__)


def build_pipeline() -> ResponsePipeline:
    return ResponsePipeline([
        ContextStep(),
        GenerationStep(),
        FormattingStep(),
    ])


async def _start_typing(stack: AsyncExitStack, channel) -> None:
    """Show the typing indicator; a channel that refuses it is not an error."""

    try:
        await stack.enter_async_context(channel.typing())
    except Exception as exc:
        logger.warning(
            "Could not show typing indicator in channel %s: %s",
            getattr(channel, "id", "unknown"),
            exc,
        )


def error_reply(error_message: str, exc: BaseException | None = None) -> str:
    """Canned error line, with the raw exception in a code block when given."""

    if exc is None:
        return error_message
    return f"{error_message}\n\n```{exc}```"


async def handle(
    message: discord.Message,
    identity: AssistantIdentity,
    *,
    prompt: str | None = None,
) -> None:
    """
    Generate and send a reply to ``message``.

    ``prompt`` overrides the prompt normally derived from the message and its
    reply chain. Generation failures become a canned error reply; failures to
    deliver the reply propagate to the caller.
    """

    content = content_store.get()
    context = PipelineContext(
        discord_message=message,
        identity=identity,
        content=content,
        prompt=prompt,
    )

    try:
        async with AsyncExitStack() as stack:
            await _start_typing(stack, message.channel)
            context = await build_pipeline().run(context)
    except Exception as exc:
        logger.exception("Failed to generate a reply for message %s", message.id)
        await message.reply(
            error_reply(get_response(ResponseType.ERROR, content.catalogue), exc)
        )
        return

    if context.reply is None:
        await message.reply(get_response(ResponseType.ERROR, content.catalogue))
        return

    await message.reply(**context.reply.to_message_kwargs())


__all__ = ["handle", "build_pipeline", "error_reply"]
