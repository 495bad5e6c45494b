"""Speech output engine powered by ``pyttsx3``."""

from __future__ import annotations

from magicpet_ai.models import Utterance, VoiceInfo

from .interfaces import SpeechSynthesizer
from .output import SynthesisError


def voice_language(voice: object) -> str:
    """Normalize a pyttsx3 voice's first language tag, e.g. ``b'\\x05en-us'`` -> ``en-us``."""
    languages = getattr(voice, "languages", None) or []
    if not languages:
        return ""
    tag = languages[0]
    if isinstance(tag, bytes):
        tag = tag.decode("utf-8", errors="ignore")
    return "".join(ch for ch in str(tag) if ch.isprintable()).strip().replace("_", "-")


class Pyttsx3Synthesizer(SpeechSynthesizer):
    """Local playback through a pyttsx3 engine instance."""

    def __init__(self, *, driver_name: str | None = None) -> None:
        try:
            import pyttsx3
        except ImportError as exc:  # pragma: no cover - import guard
            raise RuntimeError(
                "Speech output backend unavailable. Install extras with: pip install 'magicpet-ai[voice]'"
            ) from exc

        try:
            self._engine = pyttsx3.init(driver_name)
        except (ImportError, OSError, RuntimeError) as exc:
            raise RuntimeError("No local speech output engine could be started.") from exc
        self._base_rate = int(self._engine.getProperty("rate") or 200)

    def get_voices(self) -> list[VoiceInfo]:
        return [
            VoiceInfo(id=voice.id, name=voice.name or voice.id, lang=voice_language(voice))
            for voice in self._engine.getProperty("voices") or []
        ]

    def speak(self, utterance: Utterance) -> None:
        # pyttsx3 drivers expose no pitch control, so only the rate is applied.
        self._engine.setProperty("rate", round(self._base_rate * utterance.rate))
        if utterance.voice_id:
            self._engine.setProperty("voice", utterance.voice_id)
        try:
            self._engine.say(utterance.text)
            self._engine.runAndWait()
        except RuntimeError as exc:
            raise SynthesisError(f"speech output failed: {exc}") from exc

    def cancel(self) -> None:
        self._engine.stop()
