import logging
from typing import Optional

from llm.providers.base import LLMProvider

logger = logging.getLogger(__name__)

KEYWORD_MAX_TOKENS = 1000
PROMPT_BATCH_MAX_TOKENS = 2000


class LLMClient:
    """Thin wrapper around one provider adapter.

    Generators talk to this instead of to a concrete provider so tests
    can swap in a fake provider.
    """

    def __init__(self, provider: LLMProvider):
        self.provider = provider

    @property
    def provider_name(self) -> str:
        return getattr(self.provider, "name", "unknown")

    def complete(self, user: str, *, system: Optional[str] = None, max_tokens: int) -> str:
        text = self.provider.generate(system=system, user=user, max_tokens=max_tokens)
        logger.info(f"{self.provider_name} returned {len(text)} characters")
        return text
