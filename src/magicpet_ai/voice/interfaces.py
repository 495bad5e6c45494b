"""Contracts for native speech recognition and synthesis engines."""

from typing import Protocol

from magicpet_ai.models import Utterance, VoiceInfo


class RecognitionListener(Protocol):
    """Receives the outcome of one native capture session."""

    def on_result(self, text: str, confidence: float) -> None:
        """Called with the best transcript of the session."""

    def on_error(self, code: str) -> None:
        """Called with a native error code such as ``no-speech`` or ``network``."""

    def on_end(self) -> None:
        """Called when the session closes, after any result or error."""


class RecognitionEngine(Protocol):
    """Single-session speech recognizer that reports through callbacks."""

    def start(self, listener: RecognitionListener) -> None:
        """Begin capturing; callbacks may fire from another thread."""

    def stop(self) -> None:
        """Stop the current session."""


class SpeechSynthesizer(Protocol):
    """Speaks utterances through a local voice engine."""

    def get_voices(self) -> list[VoiceInfo]:
        """Return the voices currently loaded by the engine."""

    def speak(self, utterance: Utterance) -> None:
        """Speak and block until playback completes."""

    def cancel(self) -> None:
        """Cancel any in-progress utterance."""
