import logging
from typing import List

from generation.instructions import PROMPT_SYSTEM_MESSAGE, build_prompt_instruction
from llm.llm_client import PROMPT_BATCH_MAX_TOKENS, LLMClient
from parsing.output_parser import parse_prompts_counted
from keyprompt.models import PromptRequest

logger = logging.getLogger(__name__)


class PromptGenerator:

    def __init__(self, llm_client: LLMClient):
        self.llm = llm_client
        self.fallbacks_used = 0

    def generate(self, request: PromptRequest) -> List[str]:
        """One batched call for all selected keywords, padded with fallbacks."""
        keywords = request.selected_keywords()
        instruction = build_prompt_instruction(keywords, request.type)
        raw = self.llm.complete(
            instruction,
            system=PROMPT_SYSTEM_MESSAGE,
            max_tokens=PROMPT_BATCH_MAX_TOKENS,
        )

        prompts, self.fallbacks_used = parse_prompts_counted(raw, keywords, request.type)
        if self.fallbacks_used:
            logger.warning(
                f"Model returned {len(keywords) - self.fallbacks_used} usable prompts for "
                f"{len(keywords)} keywords, padding {self.fallbacks_used} with fallbacks"
            )
        return prompts
