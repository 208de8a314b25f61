"""Mistral provider: hosted chat-completions API."""

import logging
from typing import Any

import httpx

from translate_ai.prompt import Prompt
from translate_ai.providers.base import ModelProvider, ModelResponse

logger = logging.getLogger(__name__)


class MistralProvider(ModelProvider):
    """Sends prompts to the Mistral chat-completions endpoint."""

    def __init__(
        self,
        api_key: str = "",
        endpoint: str = "",
        model: str = "mistral-large-latest",
        temperature: float = 0.0,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        # Import here to allow non-mistral configs to skip validation
        if not api_key:
            from translate_ai.config import (
                MISTRAL_API_KEY,
                MISTRAL_ENDPOINT,
                MISTRAL_MODEL,
                MISTRAL_TEMPERATURE,
                MISTRAL_TIMEOUT_SECONDS,
            )

            api_key = MISTRAL_API_KEY
            endpoint = endpoint or MISTRAL_ENDPOINT
            model = MISTRAL_MODEL
            temperature = MISTRAL_TEMPERATURE
            timeout = MISTRAL_TIMEOUT_SECONDS

        if not api_key:
            raise ValueError("MISTRAL_API_KEY is required for the mistral provider")

        self.endpoint: str = (endpoint or "https://api.mistral.ai").rstrip("/")
        self.model: str = model
        self.temperature: float = temperature
        self._client: httpx.AsyncClient = client or httpx.AsyncClient(timeout=timeout)
        self._headers: dict[str, str] = {
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
        }

    async def invoke(self, prompt: Prompt) -> ModelResponse:
        payload = {
            "model": self.model,
            "temperature": self.temperature,
            "messages": prompt.to_messages(),
        }

        try:
            response = await self._client.post(
                f"{self.endpoint}/v1/chat/completions",
                json=payload,
                headers=self._headers,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Mistral API error: %s %s",
                exc.response.status_code,
                exc.response.reason_phrase,
            )
            raise
        except Exception:
            logger.exception("Mistral request failed")
            raise

        return ModelResponse(content=self._extract_content(data))

    @staticmethod
    def _extract_content(data: dict[str, Any]) -> str | None:
        """Pull the first choice's message content out of a completion body.

        Content may be a plain string or a list of typed chunks; only text
        chunks are kept.
        """
        choices = data.get("choices") or []
        if not choices:
            return None
        content = (choices[0].get("message") or {}).get("content")
        if isinstance(content, list):
            content = "".join(
                chunk.get("text", "")
                for chunk in content
                if isinstance(chunk, dict) and chunk.get("type") == "text"
            )
        return content

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
