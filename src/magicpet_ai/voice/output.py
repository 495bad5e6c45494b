"""Text-to-speech for pronouncing words to young learners."""

from __future__ import annotations

import asyncio

from magicpet_ai.models import SpeechOutcome, Utterance, VoiceInfo

from .interfaces import SpeechSynthesizer

# Slightly slow and slightly high for young listeners.
SPEECH_RATE = 0.9
SPEECH_PITCH = 1.1


class SynthesisError(RuntimeError):
    """Raised when an utterance cannot be spoken."""


class SpeechOutputAdapter:
    """Speaks one utterance at a time with an English voice when one exists."""

    def __init__(self, synthesizer: SpeechSynthesizer | None) -> None:
        self._synthesizer = synthesizer
        self._voices: list[VoiceInfo] = []
        if synthesizer is not None:
            self._voices = list(synthesizer.get_voices())

    @property
    def voices(self) -> list[VoiceInfo]:
        return list(self._voices)

    def select_voice(self) -> VoiceInfo | None:
        """First voice tagged ``en*``; reloads the voice list while it is empty."""
        if not self._voices and self._synthesizer is not None:
            self._voices = list(self._synthesizer.get_voices())
        return next((voice for voice in self._voices if voice.lang.lower().startswith("en")), None)

    async def speak(self, text: str, lang: str = "en-US") -> SpeechOutcome:
        """Speak ``text`` and report success once playback has finished."""
        if self._synthesizer is None:
            raise SynthesisError("speech synthesis is not available")

        voice = self.select_voice()
        utterance = Utterance(
            text=text,
            lang=lang,
            rate=SPEECH_RATE,
            pitch=SPEECH_PITCH,
            voice_id=voice.id if voice else None,
        )
        await asyncio.to_thread(self._synthesizer.speak, utterance)
        return SpeechOutcome(success=True)

    def stop(self) -> None:
        if self._synthesizer is not None:
            self._synthesizer.cancel()
