"""Request handling for the speech-to-text proxy.

The proxy accepts raw audio, forwards it to Minimax with server-held
credentials and returns a normalized transcription. Failures are split by
origin so clients can tell misuse (405), misconfiguration (500) and upstream
or recognition problems (upstream status or 500) apart.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from magicpet_ai.config import Settings
from magicpet_ai.models import TranscriptionResponse

from .minimax import MinimaxSpeechClient

DEFAULT_CONFIDENCE = 0.95
CONFIG_ERROR_MESSAGE = "Minimax API key or Group ID not configured"


class ProxyError(Exception):
    status_code = 500

    def __init__(self, error: str, *, status_code: int | None = None, message: str | None = None) -> None:
        super().__init__(error)
        self.error = error
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def payload(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.error}
        if self.message is not None:
            body["message"] = self.message
        return body


class MethodNotAllowed(ProxyError):
    status_code = 405


class ConfigurationError(ProxyError):
    pass


class UpstreamError(ProxyError):
    """Upstream answered with a non-success HTTP status; that status is passed through."""


class RecognitionFailed(ProxyError):
    pass


class InternalServerError(ProxyError):
    pass


def _base_resp(body: dict[str, Any]) -> dict[str, Any]:
    base_resp = body.get("base_resp")
    return base_resp if isinstance(base_resp, dict) else {}


def upstream_error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = {"error": response.reason_phrase}
    if not isinstance(body, dict):
        body = {}
    return _base_resp(body).get("status_msg") or body.get("error") or "Minimax API error"


def normalize_result(result: Any) -> TranscriptionResponse:
    """Map a Minimax success payload onto the proxy's response shape."""
    if not isinstance(result, dict):
        raise RecognitionFailed("Recognition failed")
    base_resp = _base_resp(result)
    text = result.get("text")
    if base_resp.get("status_code") != 0 or not text:
        raise RecognitionFailed(base_resp.get("status_msg") or "Recognition failed")
    confidence = result.get("confidence")
    return TranscriptionResponse(
        text=text,
        language=result.get("language") or "en",
        duration=result.get("audio_length") or 0,
        confidence=DEFAULT_CONFIDENCE if confidence is None else confidence,
    )


class TranscriptionProxy:
    def __init__(
        self,
        config: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._logger = logger or logging.getLogger("magicpet_ai.transcription")

    async def handle(self, method: str, body: bytes, *, language: str | None = None) -> TranscriptionResponse:
        if method.upper() != "POST":
            raise MethodNotAllowed("Method not allowed")
        try:
            return await self._forward(body, language)
        except ProxyError:
            raise
        except Exception as exc:
            self._logger.exception("transcription_proxy_error")
            raise InternalServerError("Internal server error", message=str(exc)) from exc

    async def _forward(self, body: bytes, language: str | None) -> TranscriptionResponse:
        api_key = self._config.minimax_api_key
        group_id = self._config.minimax_group_id
        if not api_key or not group_id:
            raise ConfigurationError(CONFIG_ERROR_MESSAGE)

        client = MinimaxSpeechClient(
            api_key,
            group_id,
            base_url=self._config.minimax_base_url,
            model=self._config.minimax_model,
            timeout=self._config.request_timeout_seconds,
            transport=self._transport,
        )
        response = await client.transcribe(body, language=language)
        if not response.is_success:
            message = upstream_error_message(response)
            self._logger.error(
                "transcription_upstream_error",
                extra={"status_code": response.status_code, "error": message},
            )
            raise UpstreamError(message, status_code=response.status_code)

        transcription = normalize_result(response.json())
        self._logger.info(
            "transcription_succeeded",
            extra={"language": transcription.language, "duration": transcription.duration, "bytes": len(body)},
        )
        return transcription
