from typing import Optional

from fastapi import Header

from api import state
from llm.llm_client import LLMClient
from llm.providers.factory import create_provider
from storage.config_store import ApiConfigStore


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization or not authorization.startswith("Bearer "):
        return None
    return authorization[len("Bearer "):].strip() or None


def get_llm_client(
    x_provider: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None),
    authorization: Optional[str] = Header(None),
    x_model: Optional[str] = Header(None),
) -> LLMClient:
    """Build the provider adapter from request headers; fails before any upstream call."""
    if x_provider == "gemini":
        api_key = x_api_key
    else:
        api_key = _bearer_token(authorization)
    provider = create_provider(x_provider, api_key=api_key, model=x_model)
    return LLMClient(provider=provider)


def get_config_store() -> ApiConfigStore:
    if state.config_store is None:
        state.config_store = ApiConfigStore()
    return state.config_store
