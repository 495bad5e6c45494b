"""Single-shot speech capture over a callback-based recognition engine."""

from __future__ import annotations

import asyncio
import logging

from magicpet_ai.models import RecognitionResult

from .interfaces import RecognitionEngine


class RecognitionError(RuntimeError):
    """Capture session failed; ``code`` carries the native error code."""

    def __init__(self, code: str, message: str | None = None) -> None:
        super().__init__(message or code)
        self.code = code


class _SessionListener:
    """Settles one future from engine callbacks, whichever thread they fire on."""

    def __init__(self, loop: asyncio.AbstractEventLoop, future: asyncio.Future[RecognitionResult]) -> None:
        self._loop = loop
        self._future = future

    def on_result(self, text: str, confidence: float) -> None:
        self._post(self._resolve, RecognitionResult(text=text, confidence=float(confidence)))

    def on_error(self, code: str) -> None:
        self._post(self._reject, RecognitionError(code))

    def on_end(self) -> None:
        self._post(self._reject, RecognitionError("no-speech", "recognition ended without a result"))

    def _post(self, callback, value) -> None:
        if self._loop.is_closed():
            return
        self._loop.call_soon_threadsafe(callback, value)

    def _resolve(self, result: RecognitionResult) -> None:
        if not self._future.done():
            self._future.set_result(result)

    def _reject(self, error: RecognitionError) -> None:
        if not self._future.done():
            self._future.set_exception(error)


class SpeechCaptureAdapter:
    """Runs at most one capture session at a time and returns its single result."""

    def __init__(
        self,
        engine: RecognitionEngine | None,
        *,
        timeout_seconds: float | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._engine = engine
        self._timeout_seconds = timeout_seconds
        self._logger = logger or logging.getLogger("magicpet_ai.voice.capture")
        # The pending future of the active session; only its owner may clear it.
        self._session: asyncio.Future[RecognitionResult] | None = None

    @property
    def is_listening(self) -> bool:
        return self._session is not None

    def is_supported(self) -> bool:
        return self._engine is not None

    async def start_listening(self) -> RecognitionResult:
        """Capture one utterance.

        Raises ``RecognitionError`` when no engine is available, a session is
        already active, the engine reports an error, the session ends without a
        result (``no-speech``) or the optional timeout elapses (``timeout``).
        """
        if self._engine is None:
            raise RecognitionError("not-available", "speech recognition is not available")
        if self._session is not None:
            raise RecognitionError("already-listening", "a capture session is already active")

        loop = asyncio.get_running_loop()
        future: asyncio.Future[RecognitionResult] = loop.create_future()
        self._session = future
        try:
            self._engine.start(_SessionListener(loop, future))
        except Exception as exc:
            self._release(future)
            raise RecognitionError("start-failed", str(exc)) from exc
        self._logger.info("recognition_started")

        try:
            if self._timeout_seconds is None:
                result = await future
            else:
                result = await asyncio.wait_for(future, timeout=self._timeout_seconds)
        except asyncio.TimeoutError as exc:
            if self._session is future:
                self._engine.stop()
            raise RecognitionError("timeout", "no speech captured before the timeout") from exc
        except RecognitionError as exc:
            self._logger.warning("recognition_failed", extra={"code": exc.code})
            raise
        finally:
            self._release(future)

        self._logger.info("recognition_result", extra={"text": result.text, "confidence": result.confidence})
        return result

    def stop_listening(self) -> None:
        if self._engine is not None and self._session is not None:
            self._session = None
            self._engine.stop()

    def _release(self, future: asyncio.Future[RecognitionResult]) -> None:
        if self._session is future:
            self._session = None
