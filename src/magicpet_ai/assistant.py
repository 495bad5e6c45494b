"""Client-facing service object bundling capture, learning content and speech output."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .config import Settings, settings
from .learning import CompletionService
from .models import AdviceResult, PronunciationEvaluation, RecognitionResult, SpeechOutcome, WordSuggestion
from .voice import SpeechCaptureAdapter, SpeechOutputAdapter
from .voice.interfaces import RecognitionEngine, SpeechSynthesizer

_logger = logging.getLogger("magicpet_ai.assistant")


class MagicPetAssistant:
    """One instance per host application, passed to whatever needs it."""

    def __init__(
        self,
        *,
        capture: SpeechCaptureAdapter,
        completion: CompletionService,
        output: SpeechOutputAdapter,
    ) -> None:
        self.capture = capture
        self.completion = completion
        self.output = output

    async def start_listening(self) -> RecognitionResult:
        return await self.capture.start_listening()

    def stop_listening(self) -> None:
        self.capture.stop_listening()

    def is_speech_supported(self) -> bool:
        return self.capture.is_supported()

    async def get_learning_advice(self, word: str, level: str = "beginner") -> AdviceResult:
        return await self.completion.get_learning_advice(word, level)

    async def get_next_word(self, learned_words: Sequence[str] = (), difficulty: str = "easy") -> WordSuggestion:
        return await self.completion.get_next_word(learned_words, difficulty)

    def evaluate_pronunciation(self, recognized: str, target: str, confidence: float) -> PronunciationEvaluation:
        return self.completion.evaluate_pronunciation(recognized, target, confidence)

    async def speak_word(self, text: str, lang: str = "en-US") -> SpeechOutcome:
        return await self.output.speak(text, lang)

    def stop_speaking(self) -> None:
        self.output.stop()

    async def aclose(self) -> None:
        await self.completion.aclose()


def build_recognition_engine(config: Settings) -> RecognitionEngine | None:
    """Return the microphone engine, or ``None`` when this machine cannot capture speech."""
    try:
        from .voice.stt_speechrecognition import SpeechRecognitionEngine

        return SpeechRecognitionEngine(
            language=config.recognition_language,
            phrase_time_limit=config.phrase_time_limit_seconds,
        )
    except RuntimeError as exc:
        _logger.warning("speech_capture_unavailable", extra={"error": str(exc)})
        return None


def build_synthesizer() -> SpeechSynthesizer | None:
    try:
        from .voice.tts_pyttsx3 import Pyttsx3Synthesizer

        return Pyttsx3Synthesizer()
    except RuntimeError as exc:
        _logger.warning("speech_output_unavailable", extra={"error": str(exc)})
        return None


def build_assistant(
    config: Settings | None = None,
    *,
    recognition_engine: RecognitionEngine | None = None,
    synthesizer: SpeechSynthesizer | None = None,
    with_capture: bool = True,
) -> MagicPetAssistant:
    """Wire the default backends; pass engines explicitly to override them."""
    config = config or settings
    engine = recognition_engine
    if engine is None and with_capture:
        engine = build_recognition_engine(config)
    voice = synthesizer if synthesizer is not None else build_synthesizer()
    return MagicPetAssistant(
        capture=SpeechCaptureAdapter(engine, timeout_seconds=config.listen_timeout_seconds),
        completion=CompletionService(config=config),
        output=SpeechOutputAdapter(voice),
    )
