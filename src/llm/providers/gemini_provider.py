from __future__ import annotations
import logging
import os
from typing import Any, Optional

import httpx

from llm.errors import AuthError, NoContentError, ProviderError
from .base import LLMProvider, TEMPERATURE, TOP_K, TOP_P

logger = logging.getLogger(__name__)


def _extract_text(data: Any) -> Optional[str]:
    try:
        return data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None


class GeminiProvider(LLMProvider):
    name = "gemini"

    def __init__(self, api_key: str, transport: Optional[httpx.BaseTransport] = None):
        self.api_key = api_key.strip()
        self.model = os.getenv("GEMINI_MODEL", "gemini-1.5-flash").strip()
        self.base_url = os.getenv(
            "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
        ).strip()
        self.timeout_s = float(os.getenv("LLM_TIMEOUT_S", "60"))
        self.transport = transport

        if not self.api_key:
            raise AuthError("Gemini API key required", status_code=400)

    def generate(self, *, system: Optional[str], user: str, max_tokens: int) -> str:
        # Single-turn request: Gemini gets the instruction alone, no system priming.
        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload = {
            "contents": [{"parts": [{"text": user}]}],
            "generationConfig": {
                "temperature": TEMPERATURE,
                "maxOutputTokens": max_tokens,
                "topP": TOP_P,
                "topK": TOP_K,
            },
        }

        logger.info(f"Calling Gemini model {self.model} (max tokens: {max_tokens})")
        try:
            with httpx.Client(timeout=self.timeout_s, transport=self.transport) as client:
                r = client.post(url, params={"key": self.api_key}, json=payload)
        except httpx.RequestError as e:
            raise ProviderError(None, f"Failed to connect to Gemini API: {e}") from e

        if r.is_error:
            logger.error(f"Gemini API error: {r.status_code}")
            raise ProviderError(r.status_code, f"Gemini API error: {r.status_code} {r.text}")

        try:
            data = r.json()
        except ValueError as e:
            raise ProviderError(
                r.status_code, f"Gemini API error: invalid JSON in response ({e})"
            ) from e

        text = _extract_text(data)
        if text is None:
            raise NoContentError("No content generated from Gemini API")
        return text
