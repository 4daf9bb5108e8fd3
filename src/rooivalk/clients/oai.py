"""Helpers for interacting with OpenAI API"""
import base64
from openai import AsyncOpenAI, OpenAIError
from rooivalk.clients.errors import LLMError
from rooivalk.config import core

import logging
logger = logging.getLogger(__name__)

# One global async-capable client
aoai = AsyncOpenAI(api_key=core.OPENAI_API_KEY)

# Built-in tools exposed to the text model
TOOLS = [
    {
        "type": "web_search_preview",
        "search_context_size": "low",
    },
]


# ==============================================
# Text utilities
# ==============================================

async def respond(
    instructions: str,
    prompt: str,
    model: str | None = None,
) -> str | None:
    """
    Send ``prompt`` to the Responses API with ``instructions`` as the system
    context and return the output text (``None`` when the model said nothing).

    SDK errors are re-raised as :class:`LLMError` carrying the API message.
    """
    try:
        resp = await aoai.responses.create(
            model=model or core.OPENAI_MODEL,
            tools=TOOLS,
            instructions=instructions,
            input=prompt,
        )
    except OpenAIError as exc:
        logger.error("OpenAI request failed: %s", exc)
        raise LLMError(str(exc)) from exc

    text = (resp.output_text or "").strip()
    return text or None

# ==============================================
# Image utilities
# ==============================================

async def create_image(prompt: str, model: str | None = None) -> bytes | None:
    """Generate one JPEG for ``prompt`` and return its raw bytes."""
    try:
        result = await aoai.images.generate(
            model=model or core.OPENAI_IMAGE_MODEL,
            prompt=prompt,
            n=1,
            output_format="jpeg",
        )
    except OpenAIError as exc:
        logger.error("OpenAI image request failed: %s", exc)
        raise LLMError(str(exc)) from exc

    data = result.data or []
    b64 = data[0].b64_json if data else None
    if not b64:
        logger.warning("Image generation returned no data for prompt %r", prompt[:50])
        return None
    return base64.b64decode(b64)
