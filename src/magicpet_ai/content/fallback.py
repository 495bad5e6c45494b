"""Fixed encouragement templates and vocabulary lists by difficulty tier."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from types import MappingProxyType

from magicpet_ai.models import AdviceResult, WordSuggestion

Chooser = Callable[[Sequence[str]], str]

DEFAULT_DIFFICULTY = "easy"

ADVICE_TEMPLATES: tuple[str, ...] = (
    'Great job learning "{word}"! 🎉',
    'You\'re doing amazing with "{word}"! Keep it up! 💪',
    'Wonderful! "{word}" is now in your vocabulary! 🌟',
    'Fantastic! You\'ve mastered "{word}"! 🎊',
)

WORDS_BY_DIFFICULTY = MappingProxyType(
    {
        "easy": ("cat", "dog", "ball", "sun", "tree", "book", "apple", "star", "fish", "bird"),
        "medium": ("elephant", "butterfly", "rainbow", "ocean", "mountain", "garden", "flower", "rabbit"),
        "hard": ("adventure", "wonderful", "beautiful", "fantastic", "magnificent", "incredible"),
    }
)


def words_for(difficulty: str | None) -> tuple[str, ...]:
    """Return the vocabulary list for a tier, falling back to the easy list."""
    return WORDS_BY_DIFFICULTY.get(difficulty or DEFAULT_DIFFICULTY, WORDS_BY_DIFFICULTY[DEFAULT_DIFFICULTY])


def default_advice(word: str, *, choose: Chooser | None = None) -> AdviceResult:
    template = (choose or random.choice)(ADVICE_TEMPLATES)
    # str.replace keeps braces inside ``word`` verbatim.
    return AdviceResult(success=True, advice=template.replace("{word}", word))


def default_next_word(difficulty: str | None = DEFAULT_DIFFICULTY, *, choose: Chooser | None = None) -> WordSuggestion:
    return WordSuggestion(success=True, word=(choose or random.choice)(words_for(difficulty)))
