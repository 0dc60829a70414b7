from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional

TEMPERATURE = 0.7
TOP_P = 0.8
TOP_K = 40


class LLMProvider(ABC):
    name: str = "unknown"

    @abstractmethod
    def generate(self, *, system: Optional[str], user: str, max_tokens: int) -> str:
        """
        Must return the raw completion TEXT (splitting into lines happens in the parser).
        Raises ProviderError on a non-2xx answer and NoContentError when the
        response carries no completion field.
        """
        raise NotImplementedError
