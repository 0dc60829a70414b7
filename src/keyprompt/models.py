from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ProviderName = Literal["gemini", "openrouter"]
PromptType = Literal["photography", "vector"]

SUPPORTED_PROVIDERS = ("gemini", "openrouter")


class ApiConfig(BaseModel):
    """
    Provider selection and credentials, kept in camelCase on the wire
    so saved settings stay compatible with the browser client.
    """
    model_config = ConfigDict(populate_by_name=True)

    selected_provider: ProviderName = Field("gemini", alias="selectedProvider")
    gemini_api_key: str = Field("", alias="geminiApiKey")
    openrouter_api_key: str = Field("", alias="openRouterApiKey")
    openrouter_model: str = Field("", alias="openRouterModel")

    def is_configured(self) -> bool:
        if self.selected_provider == "gemini":
            return bool(self.gemini_api_key)
        return bool(self.openrouter_api_key and self.openrouter_model)

    def public_view(self) -> Dict[str, Any]:
        """Settings without the secrets; keys are reported as present or not."""
        return {
            "selectedProvider": self.selected_provider,
            "hasGeminiApiKey": bool(self.gemini_api_key),
            "hasOpenRouterApiKey": bool(self.openrouter_api_key),
            "openRouterModel": self.openrouter_model,
        }

    def provider_headers(self) -> Dict[str, str]:
        headers = {"X-Provider": self.selected_provider}
        if self.selected_provider == "gemini":
            if self.gemini_api_key:
                headers["X-API-Key"] = self.gemini_api_key
        else:
            if self.openrouter_api_key:
                headers["Authorization"] = f"Bearer {self.openrouter_api_key}"
            if self.openrouter_model:
                headers["X-Model"] = self.openrouter_model
        return headers


class KeywordRequest(BaseModel):
    input: str = Field(..., min_length=1)
    count: int = Field(..., ge=1, le=200)

    @field_validator("input")
    @classmethod
    def input_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Word or category is required")
        return v


class PromptRequest(BaseModel):
    keywords: List[str] = Field(..., min_length=1)
    type: PromptType
    count: int = Field(..., ge=1, le=200)

    def selected_keywords(self) -> List[str]:
        return self.keywords[: self.count]


class KeywordResponse(BaseModel):
    keywords: List[str]


class PromptResponse(BaseModel):
    prompts: List[str]


class OpenRouterModel(BaseModel):
    id: str
    name: str
    description: Optional[str] = None


class OpenRouterModelsRequest(BaseModel):
    apiKey: str = Field(..., min_length=1)


class OpenRouterModelsResponse(BaseModel):
    models: List[OpenRouterModel] = Field(default_factory=list)
