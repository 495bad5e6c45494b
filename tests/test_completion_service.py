from __future__ import annotations

import asyncio
import json

import httpx

from magicpet_ai.config import Settings
from magicpet_ai.content import ADVICE_TEMPLATES, WORDS_BY_DIFFICULTY
from magicpet_ai.learning import (
    ChatCompletionClient,
    CompletionService,
    RemoteProvider,
    StaticProvider,
    build_provider,
)


def _chat_reply(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def _remote(handler) -> RemoteProvider:
    client = ChatCompletionClient(
        "sk-test",
        model="gpt-3.5-turbo",
        base_url="https://llm.example/v1/",
        transport=httpx.MockTransport(handler),
    )
    return RemoteProvider(client)


def test_provider_selected_from_key_once() -> None:
    assert isinstance(build_provider(Settings(_env_file=None, openai_api_key=None)), StaticProvider)
    assert isinstance(build_provider(Settings(_env_file=None, openai_api_key="YOUR_OPENAI_API_KEY")), StaticProvider)
    assert isinstance(build_provider(Settings(_env_file=None, openai_api_key="sk-real")), RemoteProvider)


def test_unconfigured_service_returns_template_advice() -> None:
    service = CompletionService(config=Settings(_env_file=None, openai_api_key=""))

    result = asyncio.run(service.get_learning_advice("apple"))

    assert result.success is True
    assert result.advice in {template.replace("{word}", "apple") for template in ADVICE_TEMPLATES}


def test_remote_advice_sends_chat_completion_request() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json=_chat_reply("Great! A dog says woof."))

    service = CompletionService(provider=_remote(handler))

    async def _run():
        try:
            return await service.get_learning_advice("dog", "beginner")
        finally:
            await service.aclose()

    result = asyncio.run(_run())

    assert result.success is True
    assert result.advice == "Great! A dog says woof."
    request = captured[0]
    assert str(request.url) == "https://llm.example/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer sk-test"
    body = json.loads(request.content)
    assert body["model"] == "gpt-3.5-turbo"
    assert body["max_tokens"] == 100
    assert body["temperature"] == 0.7
    assert body["messages"][0]["role"] == "system"
    assert "children" in body["messages"][0]["content"]
    assert '"dog"' in body["messages"][1]["content"]
    assert "under 50 words" in body["messages"][1]["content"]


def test_remote_next_word_is_trimmed_and_lowercased() -> None:
    captured: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(json.loads(request.content))
        return httpx.Response(200, json=_chat_reply("  Butterfly \n"))

    result = asyncio.run(_remote(handler).next_word(["cat", "dog"], "medium"))

    assert result.word == "butterfly"
    prompt = captured[0]["messages"][1]["content"]
    assert "one medium English word" in prompt
    assert "Already learned: cat, dog." in prompt
    assert captured[0]["max_tokens"] == 10
    assert captured[0]["temperature"] == 0.8


def test_remote_failures_fall_back_to_static_content() -> None:
    def server_error(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "boom"})

    def malformed(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"choices": []})

    def unreachable(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("no route", request=request)

    for handler in (server_error, malformed, unreachable):
        provider = _remote(handler)
        advice = asyncio.run(provider.advice("star", "beginner"))
        word = asyncio.run(provider.next_word([], "hard"))

        assert advice.success is True
        assert "star" in advice.advice
        assert word.success is True
        assert word.word in WORDS_BY_DIFFICULTY["hard"]


def test_blank_model_word_falls_back() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_chat_reply("   "))

    result = asyncio.run(_remote(handler).next_word([], "unknown-tier"))

    assert result.word in WORDS_BY_DIFFICULTY["easy"]


def test_service_delegates_pronunciation_scoring() -> None:
    service = CompletionService(provider=StaticProvider())

    assert service.evaluate_pronunciation("Fish", "fish", 0.75).score == 75
