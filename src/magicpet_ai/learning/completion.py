"""Thin async client for OpenAI-compatible chat-completion endpoints."""

from __future__ import annotations

from typing import Any

import httpx


class CompletionError(RuntimeError):
    """Raised when a chat completion cannot be obtained or parsed."""


class ChatCompletionClient:
    def __init__(
        self,
        api_key: str,
        *,
        model: str,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.model = model
        self.endpoint = f"{base_url.rstrip('/')}/chat/completions"
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def complete(
        self,
        messages: list[dict[str, str]],
        *,
        max_tokens: int,
        temperature: float,
    ) -> str:
        """Return the first choice's message content."""
        payload: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        try:
            response = await self._client.post(self.endpoint, headers=self._headers, json=payload)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise CompletionError(f"chat completion request failed: {exc}") from exc

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise CompletionError(f"Unexpected completion response: {response.text}") from exc
        if not isinstance(content, str):
            raise CompletionError(f"Unexpected completion content: {content!r}")
        return content

    async def aclose(self) -> None:
        await self._client.aclose()
