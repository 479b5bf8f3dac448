"""Google Gemini client using the native ``generateContent`` endpoint.

Rate-limit responses (429) and transport errors are retried with capped
exponential backoff; every other failure is surfaced immediately.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from sora.core.config import Settings
from sora.core.errors import GenerationFailed
from sora.core.logging import truncate
from sora.llm.types import GenerationRequest

logger = logging.getLogger(__name__)

BASE_DELAY_MS = 1000
MAX_DELAY_MS = 5000


def backoff_delay(attempt: int) -> float:
    """Seconds to wait before ``attempt`` (0-indexed)."""
    return min(BASE_DELAY_MS * 2**attempt, MAX_DELAY_MS) / 1000


def extract_text(data: dict[str, Any]) -> str | None:
    """Return the first candidate's text, or None if there is none."""
    candidates = data.get("candidates") or []
    if not candidates:
        return None
    parts = (candidates[0].get("content") or {}).get("parts") or []
    if not parts:
        return None
    return parts[0].get("text")


class GeminiClient:
    """Single-shot text generation against Gemini."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient) -> None:
        self._settings = settings
        self._client = client

    @property
    def is_configured(self) -> bool:
        return bool(self._settings.gemini_api_key)

    def _get_url(self) -> str:
        base = self._settings.gemini_base_url.rstrip("/")
        return f"{base}/models/{self._settings.gemini_model}:generateContent"

    def _get_headers(self) -> dict[str, str]:
        return {"x-goog-api-key": self._settings.gemini_api_key}

    async def generate(self, request: GenerationRequest) -> str | None:
        """Generate text for ``request``, retrying transient failures."""
        max_attempts = self._settings.max_attempts
        body = request.to_api()
        last_error = ""

        for attempt in range(max_attempts):
            if attempt > 0:
                delay = backoff_delay(attempt)
                logger.info(
                    "Retrying Gemini call in %.1fs (attempt %d/%d)",
                    delay,
                    attempt + 1,
                    max_attempts,
                )
                await asyncio.sleep(delay)

            try:
                response = await self._client.post(
                    self._get_url(), json=body, headers=self._get_headers()
                )
            except httpx.TransportError as e:
                logger.warning(
                    "Gemini connection error (attempt %d/%d): %s", attempt + 1, max_attempts, e
                )
                last_error = f"Gemini connection error: {e}"
                continue

            if response.status_code == 429:
                logger.warning("Gemini rate limited (attempt %d/%d)", attempt + 1, max_attempts)
                last_error = "Gemini rate limited"
                continue

            if not response.is_success:
                logger.error(
                    "Gemini API error: %d - %s", response.status_code, truncate(response.text)
                )
                raise GenerationFailed(f"Gemini API error: {response.status_code}")

            try:
                data = response.json()
            except ValueError as e:
                logger.error("Gemini returned a non-JSON body: %s", truncate(response.text))
                raise GenerationFailed("Gemini returned an invalid response") from e

            try:
                return extract_text(data)
            except (AttributeError, TypeError, IndexError, KeyError) as e:
                logger.error("Unexpected Gemini response shape: %s", truncate(response.text))
                raise GenerationFailed("Gemini returned an invalid response") from e

        logger.error("Gemini call failed after %d attempts: %s", max_attempts, last_error)
        raise GenerationFailed(last_error or "Gemini call failed")
