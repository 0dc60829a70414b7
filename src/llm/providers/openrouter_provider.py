from __future__ import annotations
import logging
import os
from typing import Any, List, Optional

import httpx
import requests

from keyprompt.models import OpenRouterModel
from llm.errors import AuthError, InvalidRequestError, NoContentError, ProviderError
from .base import LLMProvider, TEMPERATURE, TOP_P

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"


def _base_url() -> str:
    return os.getenv("OPENROUTER_BASE_URL", DEFAULT_BASE_URL).strip()


def _extract_content(data: Any) -> Optional[str]:
    try:
        return data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None


class OpenRouterProvider(LLMProvider):
    name = "openrouter"

    def __init__(
        self,
        api_key: str,
        model: str,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = api_key.strip()
        self.model = model.strip()
        self.base_url = _base_url()
        self.app_title = os.getenv("OPENROUTER_APP_TITLE", "Keyword Prompt Generator").strip()
        self.referer = os.getenv("OPENROUTER_REFERER", "").strip()
        self.timeout_s = float(os.getenv("LLM_TIMEOUT_S", "60"))
        self.transport = transport

        if not self.api_key:
            raise AuthError("OpenRouter API key required")
        if not self.model:
            raise InvalidRequestError("OpenRouter model selection required")

    def _headers(self) -> dict:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "X-Title": self.app_title,
        }
        if self.referer:
            headers["HTTP-Referer"] = self.referer
        return headers

    def generate(self, *, system: Optional[str], user: str, max_tokens: int) -> str:
        url = f"{self.base_url}/chat/completions"
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": user})
        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": TEMPERATURE,
            "top_p": TOP_P,
            "max_tokens": max_tokens,
        }

        logger.info(f"Calling OpenRouter model {self.model} (max tokens: {max_tokens})")
        try:
            with httpx.Client(timeout=self.timeout_s, transport=self.transport) as client:
                r = client.post(url, headers=self._headers(), json=payload)
        except httpx.RequestError as e:
            raise ProviderError(None, f"Failed to connect to OpenRouter API: {e}") from e

        if r.is_error:
            logger.error(f"OpenRouter API error: {r.status_code}")
            raise ProviderError(
                r.status_code, f"OpenRouter API error: {r.status_code} {r.text}"
            )

        try:
            data = r.json()
        except ValueError as e:
            raise ProviderError(
                r.status_code, f"OpenRouter API error: invalid JSON in response ({e})"
            ) from e

        content = _extract_content(data)
        if content is None:
            raise NoContentError("No content generated from OpenRouter API")
        return content


def list_models(api_key: str, timeout_s: float = 15.0) -> List[OpenRouterModel]:
    """Fetch the live OpenRouter model catalog.

    Expected JSON shape:
      {"data": [{"id": "...", "name": "...", "description": "..."}, ...]}

    Entries without a name fall back to their id; entries without an id are skipped.
    """
    url = f"{_base_url()}/models"
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    try:
        resp = requests.get(url, headers=headers, timeout=timeout_s)
    except requests.RequestException as e:
        raise ProviderError(None, f"Failed to connect to OpenRouter API: {e}") from e

    if not resp.ok:
        raise ProviderError(
            resp.status_code, f"OpenRouter API error: {resp.status_code} {resp.text}"
        )

    try:
        payload = resp.json()
    except ValueError as e:
        raise ProviderError(
            resp.status_code, f"OpenRouter API error: invalid JSON in response ({e})"
        ) from e
    if not isinstance(payload, dict):
        raise ProviderError(resp.status_code, "OpenRouter API error: unexpected models payload")

    models = []
    for item in payload.get("data") or []:
        if not isinstance(item, dict) or not item.get("id"):
            logger.warning("Skipping OpenRouter model entry without an id")
            continue
        description = item.get("description")
        models.append(
            OpenRouterModel(
                id=str(item["id"]),
                name=str(item.get("name") or item["id"]),
                description=description if isinstance(description, str) else None,
            )
        )
    logger.info(f"Fetched {len(models)} OpenRouter models")
    return models
