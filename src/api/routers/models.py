import asyncio
import logging
import time

from fastapi import APIRouter

from api.metrics import record_provider_call, record_request
from keyprompt.models import OpenRouterModelsRequest, OpenRouterModelsResponse
from llm.providers.openrouter_provider import list_models

router = APIRouter()
logger = logging.getLogger(__name__)

ENDPOINT = "/api/openrouter/models"


@router.post(ENDPOINT, response_model=OpenRouterModelsResponse)
async def openrouter_models(payload: OpenRouterModelsRequest) -> OpenRouterModelsResponse:
    """List the models available to an OpenRouter API key."""
    start = time.time()
    try:
        models = await asyncio.to_thread(list_models, payload.apiKey)
    except Exception as e:
        logger.error(f"OpenRouter models fetch error: {e}")
        record_provider_call("openrouter", "error")
        record_request(ENDPOINT, "error", start, time.time())
        raise

    record_provider_call("openrouter", "ok")
    record_request(ENDPOINT, "ok", start, time.time())
    return OpenRouterModelsResponse(models=models)
