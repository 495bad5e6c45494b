"""Async client for the Minimax speech-to-text API."""

from __future__ import annotations

import httpx

AUDIO_FILENAME = "audio.webm"
AUDIO_CONTENT_TYPE = "audio/webm"


def normalize_language(language: str | None) -> str | None:
    """Minimax only accepts ``en`` and ``zh``; anything else becomes ``zh``."""
    if not language:
        return None
    return "en" if language == "en" else "zh"


class MinimaxSpeechClient:
    def __init__(
        self,
        api_key: str,
        group_id: str,
        *,
        base_url: str = "https://api.minimax.chat/v1",
        model: str = "speech-01",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._group_id = group_id
        self.endpoint = f"{base_url.rstrip('/')}/speech_to_text"
        self.model = model
        self._timeout = timeout
        self._transport = transport

    async def transcribe(self, audio: bytes, *, language: str | None = None) -> httpx.Response:
        """Upload ``audio`` as a multipart form and return the raw upstream response."""
        data = {"model": self.model}
        normalized = normalize_language(language)
        if normalized:
            data["language"] = normalized

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            return await client.post(
                self.endpoint,
                params={"GroupId": self._group_id},
                headers={"Authorization": f"Bearer {self._api_key}"},
                files={"file": (AUDIO_FILENAME, audio, AUDIO_CONTENT_TYPE)},
                data=data,
            )
