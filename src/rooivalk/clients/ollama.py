"""Helpers for interacting with a local Ollama server"""

import logging

from ollama import AsyncClient, RequestError, ResponseError

from rooivalk.clients.errors import LLMError
from rooivalk.config import local_llm

logger = logging.getLogger(__name__)

client = AsyncClient(host=local_llm.LOCAL_SERVER_URL)

async def respond(
        instructions: str,
        prompt: str,
        model: str | None = None,
    ) -> str | None:
    """
    Send a prompt to the local Ollama server and return its reply.

    The persona instructions travel as the system message:

    .. code-block:: python
        [
            {"role": "system", "content": "<instructions>"},
            {"role": "user", "content": "<prompt>"}
        ]

    Server and connection errors are re-raised as :class:`LLMError`.
    """
    try:
        resp = await client.chat(
            model=model or local_llm.LOCAL_MODEL_ID,
            messages=[
                {"role": "system", "content": instructions},
                {"role": "user", "content": prompt},
            ],
        )
    except (ResponseError, RequestError, ConnectionError) as exc:
        logger.error("Ollama request failed: %s", exc)
        raise LLMError(str(exc)) from exc

    text = (resp.message.content or "").strip()
    return text or None
