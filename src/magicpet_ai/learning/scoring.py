"""Local pronunciation scoring from recognizer output."""

from __future__ import annotations

import math

from magicpet_ai.models import PronunciationEvaluation

PERFECT_THRESHOLD = 90
GOOD_THRESHOLD = 70
MISMATCH_SCORE = 30

PERFECT_FEEDBACK = "🌟 Perfect! Great pronunciation!"
GOOD_FEEDBACK = "👍 Good job! Keep practicing!"
NICE_TRY_FEEDBACK = "💪 Nice try! Let's practice more!"


def _percent(confidence: float) -> int:
    # Half-up rounding; ``round`` would send 68.5 to 68.
    return int(math.floor(confidence * 100 + 0.5))


def evaluate_pronunciation(recognized_text: str, target_word: str, confidence: float) -> PronunciationEvaluation:
    """Score a recognized utterance against the word the child was asked to say.

    A case and whitespace insensitive match scores the recognizer confidence as a
    percentage and picks one of three feedback bands (90 and 70 are inclusive
    lower bounds). Any mismatch gets a fixed score of 30 and names both words.
    """
    if recognized_text.strip().lower() != target_word.strip().lower():
        return PronunciationEvaluation(
            score=MISMATCH_SCORE,
            feedback=f'🎯 Try again! You said "{recognized_text}", but the word is "{target_word}".',
            is_correct=False,
        )

    score = _percent(confidence)
    if score >= PERFECT_THRESHOLD:
        feedback = PERFECT_FEEDBACK
    elif score >= GOOD_THRESHOLD:
        feedback = GOOD_FEEDBACK
    else:
        feedback = NICE_TRY_FEEDBACK
    return PronunciationEvaluation(score=score, feedback=feedback, is_correct=True)
