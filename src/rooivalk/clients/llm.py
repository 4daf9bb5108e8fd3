"""Backend-neutral entry point for persona-driven model calls."""

from __future__ import annotations

import datetime
import logging

from rooivalk.clients import oai, ollama
from rooivalk.clients.errors import LLMError
from rooivalk.config import content as content_store
from rooivalk.config import local_llm
from rooivalk.config.content import BotContent
from rooivalk.persona import Persona, instructions_for

logger = logging.getLogger(__name__)


def render_instructions(template: str, today: datetime.date | None = None) -> str:
    """Expand the ``{{CURRENT_DATE}}`` placeholder."""

    today = today or datetime.date.today()
    return template.replace("{{CURRENT_DATE}}", today.isoformat())


async def create_response(
    persona: Persona,
    prompt: str,
    content: BotContent | None = None,
) -> str | None:
    """
    Ask the configured backend to answer ``prompt`` as ``persona``.

    Uses the local Ollama server when ``USE_LOCAL`` is set, OpenAI otherwise.
    Returns ``None`` for empty output; backend failures propagate.
    """

    content = content or content_store.get()
    instructions = render_instructions(instructions_for(persona, content.instructions))

    logger.debug(
        "LLM request persona=%s prompt_len=%d instructions_len=%d",
        persona.value,
        len(prompt),
        len(instructions),
    )

    if local_llm.USE_LOCAL:
        return await ollama.respond(instructions, prompt)
    return await oai.respond(instructions, prompt)


__all__ = ["create_response", "render_instructions", "LLMError"]
