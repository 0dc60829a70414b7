from __future__ import annotations
from typing import Optional

from keyprompt.models import SUPPORTED_PROVIDERS
from llm.errors import AuthError, InvalidRequestError
from .base import LLMProvider
from .gemini_provider import GeminiProvider
from .openrouter_provider import OpenRouterProvider


def create_provider(
    name: Optional[str],
    *,
    api_key: Optional[str] = None,
    model: Optional[str] = None,
) -> LLMProvider:
    """
    Pick the adapter for a provider name and check its credentials.
    Every check runs before any network call is made.
    """
    if not name or name not in SUPPORTED_PROVIDERS:
        raise InvalidRequestError(
            "API provider must be specified. Please configure in settings."
        )

    if name == "gemini":
        if not api_key or not api_key.strip():
            raise AuthError(
                "Gemini API key required. Please configure in settings.",
                status_code=400,
            )
        return GeminiProvider(api_key=api_key)

    if not api_key or not api_key.strip():
        raise AuthError("OpenRouter API key required. Please configure in settings.")
    if not model or not model.strip():
        raise InvalidRequestError(
            "OpenRouter model selection required. Please select a model in settings."
        )
    return OpenRouterProvider(api_key=api_key, model=model)
