"""Static learning content used when no AI backend is available."""

from .fallback import ADVICE_TEMPLATES, WORDS_BY_DIFFICULTY, default_advice, default_next_word, words_for

__all__ = [
    "ADVICE_TEMPLATES",
    "WORDS_BY_DIFFICULTY",
    "default_advice",
    "default_next_word",
    "words_for",
]
