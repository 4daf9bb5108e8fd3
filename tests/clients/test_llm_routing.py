import datetime
from types import MappingProxyType
from unittest.mock import AsyncMock

import pytest

from rooivalk.clients import llm
from rooivalk.config.content import BotContent
from rooivalk.persona import Persona

CONTENT = BotContent(
    instructions=MappingProxyType(
        {Persona.DEFAULT: "default on {{CURRENT_DATE}}", Persona.LEARN: "learn"}
    )
)


def test_render_instructions_expands_date():
    rendered = llm.render_instructions("Today is {{CURRENT_DATE}}.", datetime.date(2024, 5, 1))
    assert rendered == "Today is 2024-05-01."


@pytest.mark.asyncio
async def test_openai_backend_by_default(monkeypatch):
    oai_respond = AsyncMock(return_value="hi")
    ollama_respond = AsyncMock()
    monkeypatch.setattr(llm.local_llm, "USE_LOCAL", False)
    monkeypatch.setattr(llm.oai, "respond", oai_respond)
    monkeypatch.setattr(llm.ollama, "respond", ollama_respond)

    assert await llm.create_response(Persona.LEARN, "q", content=CONTENT) == "hi"

    oai_respond.assert_awaited_once_with("learn", "q")
    ollama_respond.assert_not_awaited()


@pytest.mark.asyncio
async def test_local_backend_when_enabled(monkeypatch):
    ollama_respond = AsyncMock(return_value="local")
    monkeypatch.setattr(llm.local_llm, "USE_LOCAL", True)
    monkeypatch.setattr(llm.ollama, "respond", ollama_respond)

    assert await llm.create_response(Persona.DEFAULT, "q", content=CONTENT) == "local"

    instructions = ollama_respond.await_args.args[0]
    assert instructions.startswith("default on ")
    assert "{{CURRENT_DATE}}" not in instructions


@pytest.mark.asyncio
async def test_openai_errors_become_llm_error(monkeypatch):
    import openai

    create = AsyncMock(side_effect=openai.OpenAIError("quota"))
    monkeypatch.setattr(llm.oai.aoai.responses, "create", create)

    with pytest.raises(llm.LLMError):
        await llm.oai.respond("instructions", "prompt")


@pytest.mark.asyncio
async def test_ollama_errors_become_llm_error(monkeypatch):
    import ollama

    chat = AsyncMock(side_effect=ollama.ResponseError("model 'llama3.1' not found", 404))
    monkeypatch.setattr(llm.ollama.client, "chat", chat)

    with pytest.raises(llm.LLMError, match="not found"):
        await llm.ollama.respond("instructions", "prompt")


@pytest.mark.asyncio
async def test_unreachable_ollama_server_becomes_llm_error(monkeypatch):
    chat = AsyncMock(side_effect=ConnectionError("Failed to connect to Ollama"))
    monkeypatch.setattr(llm.ollama.client, "chat", chat)

    with pytest.raises(llm.LLMError):
        await llm.ollama.respond("instructions", "prompt")
