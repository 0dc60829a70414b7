from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from keyprompt.models import (
    ApiConfig,
    KeywordResponse,
    OpenRouterModel,
    OpenRouterModelsResponse,
    PromptResponse,
    PromptType,
)
from llm.errors import AuthError, GenerationError

logger = logging.getLogger(__name__)


class GeneratorClient:
    """Calls the relay endpoints with the headers the saved settings imply."""

    def __init__(self, config: ApiConfig, http: Optional[httpx.Client] = None, base_url: str = ""):
        self.config = config
        self.http = http or httpx.Client(base_url=base_url, timeout=120.0)

    def _post(self, path: str, body: Dict[str, Any], headers: Dict[str, str]) -> Any:
        r = self.http.post(path, json=body, headers=headers)
        if r.is_error:
            try:
                message = r.json().get("message")
            except ValueError:
                message = None
            raise GenerationError(message or f"{r.status_code}: Request failed", status_code=r.status_code)
        return r.json()

    def _require_configured(self) -> Dict[str, str]:
        if not self.config.is_configured():
            raise AuthError("API settings are incomplete. Please configure in settings.", status_code=400)
        return self.config.provider_headers()

    def generate_keywords(self, topic: str, count: int) -> List[str]:
        headers = self._require_configured()
        data = self._post("/api/keywords/generate", {"input": topic, "count": count}, headers)
        keywords = KeywordResponse.model_validate(data).keywords
        logger.info(f"Generated {len(keywords)} keywords")
        return keywords

    def generate_prompts(self, keywords: List[str], prompt_type: PromptType, count: int) -> List[str]:
        headers = self._require_configured()
        body = {"keywords": keywords, "type": prompt_type, "count": count}
        data = self._post("/api/prompts/generate", body, headers)
        return PromptResponse.model_validate(data).prompts

    def fetch_models(self) -> List[OpenRouterModel]:
        if not self.config.openrouter_api_key:
            raise AuthError("OpenRouter API key required", status_code=400)
        data = self._post("/api/openrouter/models", {"apiKey": self.config.openrouter_api_key}, {})
        return OpenRouterModelsResponse.model_validate(data).models
