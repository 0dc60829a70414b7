import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from api import state
from api.dependencies import get_config_store
from keyprompt.models import ProviderName
from storage.config_store import ApiConfigStore

router = APIRouter()
logger = logging.getLogger(__name__)


class ApiConfigUpdateIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    selected_provider: Optional[ProviderName] = Field(None, alias="selectedProvider")
    gemini_api_key: Optional[str] = Field(None, alias="geminiApiKey")
    openrouter_api_key: Optional[str] = Field(None, alias="openRouterApiKey")
    openrouter_model: Optional[str] = Field(None, alias="openRouterModel")


def _settings_body() -> dict:
    return {
        "config": state.api_config.public_view(),
        "configured": state.api_config.is_configured(),
    }


@router.get("/api/settings")
async def get_settings() -> dict:
    """Return the saved provider settings (secrets masked) and whether they are complete."""
    return _settings_body()


@router.put("/api/settings")
async def update_settings(
    payload: ApiConfigUpdateIn,
    store: ApiConfigStore = Depends(get_config_store),
) -> dict:
    changes = payload.model_dump(by_alias=True, exclude_none=True)
    state.api_config = store.update(state.api_config, changes)
    logger.info(
        f"Saved settings (provider: {state.api_config.selected_provider}, "
        f"configured: {state.api_config.is_configured()})"
    )
    return _settings_body()
