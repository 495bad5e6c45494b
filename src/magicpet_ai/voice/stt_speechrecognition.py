"""Speech capture engine powered by ``speech_recognition``."""

from __future__ import annotations

import threading
from typing import Any, Callable

from .interfaces import RecognitionEngine, RecognitionListener


def best_alternative(response: Any) -> tuple[str, float]:
    """Extract transcript and confidence from a raw Google recognizer response."""
    if not isinstance(response, dict):
        return "", 0.0
    alternatives = response.get("alternative") or []
    if not alternatives:
        return "", 0.0
    first = alternatives[0]
    return str(first.get("transcript", "")).strip(), float(first.get("confidence", 0.0))


class SpeechRecognitionEngine(RecognitionEngine):
    """Listens on the default microphone for one phrase and recognizes it."""

    def __init__(
        self,
        *,
        language: str = "en-US",
        phrase_time_limit: float = 5.0,
        sample_rate: int = 16_000,
        chunk_size: int = 1024,
        adjust_noise_seconds: float = 0.2,
    ) -> None:
        try:
            import speech_recognition as sr
        except ImportError as exc:  # pragma: no cover - import guard
            raise RuntimeError(
                "Speech capture backend unavailable. Install extras with: pip install 'magicpet-ai[voice]'"
            ) from exc
        self._sr = sr
        self._recognizer = sr.Recognizer()
        try:
            self._microphone = sr.Microphone(sample_rate=sample_rate, chunk_size=chunk_size)
        except (AttributeError, OSError) as exc:
            raise RuntimeError("No microphone input is available for speech capture.") from exc
        self._language = language
        self._phrase_time_limit = phrase_time_limit
        self._adjust_noise_seconds = max(0.0, adjust_noise_seconds)
        self._lock = threading.Lock()
        self._listener: RecognitionListener | None = None
        self._stopper: Callable[..., None] | None = None
        self._session = 0
        self._settled = True
        self.session_thread: threading.Thread | None = None

    def start(self, listener: RecognitionListener) -> None:
        """Open the microphone on a session thread; never blocks the caller."""
        with self._lock:
            self._session += 1
            session = self._session
            self._listener = listener
            self._settled = False
        self.session_thread = threading.Thread(
            target=self._run_session,
            args=(session,),
            name="magicpet-capture",
            daemon=True,
        )
        self.session_thread.start()

    def stop(self) -> None:
        self._halt()
        listener = self._claim(self._session)
        if listener is not None:
            listener.on_end()

    def _run_session(self, session: int) -> None:
        try:
            if self._adjust_noise_seconds > 0:
                with self._microphone as source:
                    self._recognizer.adjust_for_ambient_noise(source, duration=self._adjust_noise_seconds)
            if not self._is_open(session):
                return
            stopper = self._recognizer.listen_in_background(
                self._microphone,
                lambda recognizer, audio: self._on_audio(session, recognizer, audio),
                phrase_time_limit=self._phrase_time_limit,
            )
        except OSError:
            listener = self._claim(session)
            if listener is not None:
                listener.on_error("audio-capture")
                listener.on_end()
            return

        with self._lock:
            keep = self._session == session and not self._settled
            if keep:
                self._stopper = stopper
        if not keep:
            # The phrase arrived or the session was stopped before the stopper existed.
            stopper(wait_for_stop=False)

    def _on_audio(self, session: int, recognizer, audio) -> None:
        listener = self._claim(session)
        if listener is None:
            return
        self._halt()
        try:
            response = recognizer.recognize_google(audio, language=self._language, show_all=True)
        except self._sr.UnknownValueError:
            response = None
        except self._sr.RequestError:
            listener.on_error("network")
            listener.on_end()
            return

        text, confidence = best_alternative(response)
        if text:
            listener.on_result(text, confidence)
        else:
            listener.on_error("no-speech")
        listener.on_end()

    def _is_open(self, session: int) -> bool:
        with self._lock:
            return self._session == session and not self._settled

    def _claim(self, session: int) -> RecognitionListener | None:
        with self._lock:
            if self._session != session or self._settled:
                return None
            self._settled = True
            return self._listener

    def _halt(self) -> None:
        with self._lock:
            stopper, self._stopper = self._stopper, None
        if stopper is not None:
            # Runs on the capture thread too, so it must not join itself.
            stopper(wait_for_stop=False)
