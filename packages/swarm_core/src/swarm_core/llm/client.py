"""Chat-completion client for OpenAI-compatible endpoints (Groq)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from swarm_core.errors import ModelError, ModelMalformedError, ModelUnavailableError

if TYPE_CHECKING:
    from swarm_core.config import Settings

logger = logging.getLogger(__name__)


class ModelClient:
    """Minimal async client for a single chat-completion call."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient | None = None) -> None:
        self._settings = settings
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=settings.model_timeout)

    @property
    def is_configured(self) -> bool:
        """Whether a credential is available for completion calls."""
        return self._settings.model_configured

    async def aclose(self) -> None:
        """Close the underlying HTTP client when this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def complete(
        self,
        system_prompt: str,
        user_content: str,
        *,
        max_tokens: int,
        temperature: float,
    ) -> str:
        """Return the completion text for a system prompt and user message."""
        api_key = self._settings.groq_api_key
        if not api_key:
            msg = "No model credential configured"
            raise ModelUnavailableError(msg)

        payload = {
            "model": self._settings.groq_model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_content},
            ],
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        try:
            response = await self._client.post(
                self._settings.groq_api_url,
                json=payload,
                headers={"Authorization": f"Bearer {api_key}"},
                timeout=self._settings.model_timeout,
            )
        except httpx.HTTPError as exc:
            msg = f"Model request failed: {exc}"
            raise ModelError(msg) from exc

        if response.is_error:
            logger.warning("Model API error %s: %s", response.status_code, response.text[:500])
            msg = f"Model API error: {response.status_code}"
            raise ModelError(msg)

        try:
            data = response.json()
        except ValueError as exc:
            msg = "Model response is not valid JSON"
            raise ModelMalformedError(msg) from exc
        return _extract_content(data)


def _extract_content(data: Any) -> str:
    """Pull choices[0].message.content out of a completion payload."""
    choices = data.get("choices") if isinstance(data, dict) else None
    if not isinstance(choices, list) or not choices:
        msg = "Model response has no choices"
        raise ModelMalformedError(msg)
    message = choices[0].get("message") if isinstance(choices[0], dict) else None
    if not isinstance(message, dict):
        msg = "Model response choice has no message"
        raise ModelMalformedError(msg)
    content = message.get("content")
    if content is None:
        return ""
    if not isinstance(content, str):
        msg = "Model response content is not text"
        raise ModelMalformedError(msg)
    return content
