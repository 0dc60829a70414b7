import asyncio
import logging
import time

from fastapi import APIRouter, Depends

from api.dependencies import get_llm_client
from api.metrics import (
    KEYWORDS_GENERATED_TOTAL,
    record_generated,
    record_provider_call,
    record_request,
)
from generation.keyword_generator import KeywordGenerator
from keyprompt.models import KeywordRequest, KeywordResponse
from llm.llm_client import LLMClient

router = APIRouter()
logger = logging.getLogger(__name__)

ENDPOINT = "/api/keywords/generate"


@router.post(ENDPOINT, response_model=KeywordResponse)
async def generate_keywords(
    payload: KeywordRequest,
    llm: LLMClient = Depends(get_llm_client),
) -> KeywordResponse:
    start = time.time()
    logger.info(
        f"Keyword request received: input={payload.input[:50]!r} "
        f"count={payload.count} provider={llm.provider_name}"
    )

    generator = KeywordGenerator(llm_client=llm)
    try:
        keywords = await asyncio.to_thread(generator.generate, payload)
    except Exception as e:
        logger.error(f"Keyword generation error: {e}")
        record_provider_call(llm.provider_name, "error")
        record_request(ENDPOINT, "error", start, time.time())
        raise

    record_provider_call(llm.provider_name, "ok")
    record_generated(KEYWORDS_GENERATED_TOTAL, len(keywords))
    record_request(ENDPOINT, "ok", start, time.time())
    logger.info(f"Generated {len(keywords)} keywords")
    return KeywordResponse(keywords=keywords)
