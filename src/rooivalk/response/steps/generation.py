"""
Pipeline step for response generation.
"""
from __future__ import annotations

import logging

from rooivalk.clients import llm
from rooivalk.response.engine import PipelineContext, PipelineStep

logger = logging.getLogger(__name__)


class GenerationStep(PipelineStep):
    """
    Sends the prompt to the configured language model.
    """

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.response_text = await llm.create_response(
            context.persona,
            context.prompt or "",
            content=context.content,
        )
        if not context.response_text:
            logger.warning(
                "Model returned no output for message %s",
                getattr(context.discord_message, "id", None),
            )
        return context
