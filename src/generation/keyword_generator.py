import logging
from typing import List

from generation.instructions import KEYWORD_SYSTEM_MESSAGE, build_keyword_instruction
from llm.llm_client import KEYWORD_MAX_TOKENS, LLMClient
from parsing.output_parser import parse_lines
from keyprompt.models import KeywordRequest

logger = logging.getLogger(__name__)


class KeywordGenerator:

    def __init__(self, llm_client: LLMClient):
        self.llm = llm_client

    def generate(self, request: KeywordRequest) -> List[str]:
        instruction = build_keyword_instruction(request.input, request.count)
        raw = self.llm.complete(
            instruction,
            system=KEYWORD_SYSTEM_MESSAGE,
            max_tokens=KEYWORD_MAX_TOKENS,
        )
        keywords = parse_lines(raw, request.count)
        if len(keywords) < request.count:
            logger.warning(f"Model returned {len(keywords)} of {request.count} requested keywords")
        return keywords
