"""Remote and static sources for advice and next-word suggestions."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from magicpet_ai.config import Settings
from magicpet_ai.content import default_advice, default_next_word
from magicpet_ai.models import AdviceResult, WordSuggestion

from .completion import ChatCompletionClient, CompletionError

ADVICE_SYSTEM_PROMPT = (
    "You are a helpful English learning assistant for children. Provide simple, encouraging feedback."
)
NEXT_WORD_SYSTEM_PROMPT = (
    "You are an English vocabulary teacher for children. Suggest age-appropriate words."
)


class ContentProvider(Protocol):
    """Produces learning content for the completion service."""

    async def advice(self, word: str, user_level: str) -> AdviceResult:
        """Return encouragement for a freshly learned word."""

    async def next_word(self, learned_words: Sequence[str], difficulty: str) -> WordSuggestion:
        """Suggest the next word to learn."""

    async def aclose(self) -> None:
        """Release any held resources."""


class StaticProvider:
    """Serves the fixed templates and word lists."""

    async def advice(self, word: str, user_level: str) -> AdviceResult:
        return default_advice(word)

    async def next_word(self, learned_words: Sequence[str], difficulty: str) -> WordSuggestion:
        return default_next_word(difficulty)

    async def aclose(self) -> None:
        return None


class RemoteProvider:
    """Asks a chat-completion model, substituting static content on any failure."""

    def __init__(
        self,
        client: ChatCompletionClient,
        *,
        fallback: StaticProvider | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._client = client
        self._fallback = fallback or StaticProvider()
        self._logger = logger or logging.getLogger("magicpet_ai.learning")

    async def advice(self, word: str, user_level: str) -> AdviceResult:
        messages = [
            {"role": "system", "content": ADVICE_SYSTEM_PROMPT},
            {
                "role": "user",
                "content": (
                    f'The child just learned the word "{word}". Give a short, encouraging message '
                    "and a simple example sentence. Keep it under 50 words."
                ),
            },
        ]
        try:
            text = await self._client.complete(messages, max_tokens=100, temperature=0.7)
        except CompletionError as exc:
            self._logger.warning("advice_fallback", extra={"word": word, "user_level": user_level, "error": str(exc)})
            return await self._fallback.advice(word, user_level)
        return AdviceResult(success=True, advice=text)

    async def next_word(self, learned_words: Sequence[str], difficulty: str) -> WordSuggestion:
        messages = [
            {"role": "system", "content": NEXT_WORD_SYSTEM_PROMPT},
            {
                "role": "user",
                "content": (
                    f"Suggest one {difficulty} English word for a child to learn. "
                    f"Already learned: {', '.join(learned_words)}. Only return the word, nothing else."
                ),
            },
        ]
        try:
            word = (await self._client.complete(messages, max_tokens=10, temperature=0.8)).strip().lower()
            if not word:
                raise CompletionError("model returned an empty word")
        except CompletionError as exc:
            self._logger.warning("next_word_fallback", extra={"difficulty": difficulty, "error": str(exc)})
            return await self._fallback.next_word(learned_words, difficulty)
        return WordSuggestion(success=True, word=word)

    async def aclose(self) -> None:
        await self._client.aclose()


def build_provider(config: Settings) -> ContentProvider:
    """Pick the provider once, from whether a usable completion key is configured."""
    if not config.completion_configured:
        return StaticProvider()
    client = ChatCompletionClient(
        config.openai_api_key or "",
        model=config.openai_model,
        base_url=config.openai_base_url,
        timeout=config.request_timeout_seconds,
    )
    return RemoteProvider(client)
