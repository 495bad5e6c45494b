"""Completion service combining AI content with local scoring."""

from __future__ import annotations

from collections.abc import Sequence

from magicpet_ai.config import Settings, settings
from magicpet_ai.models import AdviceResult, PronunciationEvaluation, WordSuggestion

from .providers import ContentProvider, build_provider
from .scoring import evaluate_pronunciation


class CompletionService:
    """Advice and word suggestions that never raise, plus pronunciation scoring."""

    def __init__(self, provider: ContentProvider | None = None, config: Settings | None = None) -> None:
        self._provider = provider or build_provider(config or settings)

    @property
    def provider(self) -> ContentProvider:
        return self._provider

    async def get_learning_advice(self, word: str, user_level: str = "beginner") -> AdviceResult:
        return await self._provider.advice(word, user_level)

    async def get_next_word(
        self,
        learned_words: Sequence[str] = (),
        difficulty: str = "easy",
    ) -> WordSuggestion:
        return await self._provider.next_word(list(learned_words), difficulty)

    def evaluate_pronunciation(
        self,
        recognized_text: str,
        target_word: str,
        confidence: float,
    ) -> PronunciationEvaluation:
        return evaluate_pronunciation(recognized_text, target_word, confidence)

    async def aclose(self) -> None:
        await self._provider.aclose()
