"""
Core engine for the reply pipeline.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, TYPE_CHECKING

from rooivalk.persona import Persona

if TYPE_CHECKING:
    from rooivalk.config.content import BotContent
    from rooivalk.formatter import OutboundReply
    from rooivalk.identity import AssistantIdentity
    from rooivalk.response.history import ChainEntry

logger = logging.getLogger(__name__)


@dataclass
class PipelineContext:
    """
    Holds the state of one reply being produced.
    """
    # The Discord message being answered.
    discord_message: Any

    # Bot identity fixed at login (mention pattern, user id).
    identity: AssistantIdentity

    # Content snapshot taken when the event arrived; a hot reload mid-event
    # does not affect this reply.
    content: BotContent

    # Prompt sent to the model. Pre-set for synthesized prompts (reaction
    # "explain this"); otherwise filled by ContextStep.
    prompt: str | None = None

    persona: Persona = Persona.DEFAULT

    # Reconstructed conversation (oldest first, current message last).
    chain: list[ChainEntry] = field(default_factory=list)

    # Raw model output; None or empty when the model returned nothing.
    response_text: str | None = None

    # Formatted payload, only set when there was output to format.
    reply: OutboundReply | None = None


class PipelineStep(ABC):
    """
    Abstract base class for a single step in the pipeline.
    """

    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        """
        Execute the step logic.

        Args:
            context: The current pipeline context.

        Returns:
            The updated pipeline context.
        """
        pass


class ResponsePipeline:
    """
    Orchestrates the execution of pipeline steps.
    """

    def __init__(self, steps: list[PipelineStep]):
        self.steps = steps

    async def run(self, context: PipelineContext) -> PipelineContext:
        """
        Run all steps in order and return the final context.
        """
        current_context = context

        for i, step in enumerate(self.steps):
            step_name = step.__class__.__name__
            logger.debug("Running pipeline step %d: %s", i + 1, step_name)

            try:
                current_context = await step.run(current_context)
            except Exception as e:
                logger.error("Pipeline step %s failed: %s", step_name, e)
                raise

        return current_context
