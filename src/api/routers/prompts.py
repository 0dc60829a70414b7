import asyncio
import logging
import time

from fastapi import APIRouter, Depends

from api.dependencies import get_llm_client
from api.metrics import (
    FALLBACK_PROMPTS_TOTAL,
    PROMPTS_GENERATED_TOTAL,
    record_generated,
    record_provider_call,
    record_request,
)
from generation.prompt_generator import PromptGenerator
from keyprompt.models import PromptRequest, PromptResponse
from llm.llm_client import LLMClient

router = APIRouter()
logger = logging.getLogger(__name__)

ENDPOINT = "/api/prompts/generate"


@router.post(ENDPOINT, response_model=PromptResponse)
async def generate_prompts(
    payload: PromptRequest,
    llm: LLMClient = Depends(get_llm_client),
) -> PromptResponse:
    """
    Generate one prompt per keyword (the first `count` keywords) with a
    single batched provider call. Missing prompts are filled with fallbacks.
    """
    start = time.time()
    logger.info(
        f"Prompt request received: keywords={len(payload.keywords)} type={payload.type} "
        f"count={payload.count} provider={llm.provider_name}"
    )

    generator = PromptGenerator(llm_client=llm)
    try:
        prompts = await asyncio.to_thread(generator.generate, payload)
    except Exception as e:
        logger.error(f"Prompt generation error: {e}")
        record_provider_call(llm.provider_name, "error")
        record_request(ENDPOINT, "error", start, time.time())
        raise

    record_provider_call(llm.provider_name, "ok")
    record_generated(PROMPTS_GENERATED_TOTAL, len(prompts))
    record_generated(FALLBACK_PROMPTS_TOTAL, generator.fallbacks_used)
    record_request(ENDPOINT, "ok", start, time.time())
    logger.info(f"Generated prompts: {len(prompts)}")
    return PromptResponse(prompts=prompts)
