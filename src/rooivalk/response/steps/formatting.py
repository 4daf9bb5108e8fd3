"""
Pipeline step for turning model output into a Discord payload.
"""
from __future__ import annotations

from rooivalk.formatter import build_reply
from rooivalk.response.engine import PipelineContext, PipelineStep


def mention_targets(message, assistant_id: int) -> list[int]:
    """Users mentioned in ``message``, excluding the bot itself."""

    mentions = getattr(message, "mentions", None) or []
    return [user.id for user in mentions if user.id != assistant_id]


class FormattingStep(PipelineStep):
    """
    Formats non-empty model output; leaves ``reply`` unset otherwise.
    """

    async def run(self, context: PipelineContext) -> PipelineContext:
        if not context.response_text:
            return context

        context.reply = build_reply(
            context.response_text,
            mention_targets(context.discord_message, context.identity.user_id),
            catalogue=context.content.catalogue,
        )
        return context
