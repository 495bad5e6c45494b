from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class RecognitionResult:
    text: str
    confidence: float

    def as_dict(self) -> dict[str, Any]:
        return {"success": True, "text": self.text, "confidence": self.confidence}


@dataclass(slots=True, frozen=True)
class PronunciationEvaluation:
    score: int
    feedback: str
    is_correct: bool

    def as_dict(self) -> dict[str, Any]:
        return {"score": self.score, "feedback": self.feedback, "isCorrect": self.is_correct}


@dataclass(slots=True, frozen=True)
class AdviceResult:
    success: bool
    advice: str

    def as_dict(self) -> dict[str, Any]:
        return {"success": self.success, "advice": self.advice}


@dataclass(slots=True, frozen=True)
class WordSuggestion:
    success: bool
    word: str

    def as_dict(self) -> dict[str, Any]:
        return {"success": self.success, "word": self.word}


@dataclass(slots=True, frozen=True)
class SpeechOutcome:
    success: bool

    def as_dict(self) -> dict[str, Any]:
        return {"success": self.success}


@dataclass(slots=True, frozen=True)
class TranscriptionResponse:
    text: str
    language: str
    duration: float
    confidence: float

    def as_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "language": self.language,
            "duration": self.duration,
            "confidence": self.confidence,
        }


@dataclass(slots=True, frozen=True)
class VoiceInfo:
    id: str
    name: str
    lang: str


@dataclass(slots=True, frozen=True)
class Utterance:
    text: str
    lang: str
    rate: float
    pitch: float
    voice_id: str | None = None
