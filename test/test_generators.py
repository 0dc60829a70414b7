import pytest

from generation.keyword_generator import KeywordGenerator
from generation.prompt_generator import PromptGenerator
from keyprompt.models import KeywordRequest, PromptRequest
from llm.errors import NoContentError
from llm.llm_client import LLMClient


def test_keyword_generator_scenario(fake_provider_factory):
    provider = fake_provider_factory("tree\nriver\nriver\nmountain\nsky\nstone")
    generator = KeywordGenerator(llm_client=LLMClient(provider=provider))
    out = generator.generate(KeywordRequest(input="nature", count=5))
    assert out == ["tree", "river", "river", "mountain", "sky"]

    call = provider.calls[0]
    assert call["max_tokens"] == 1000
    assert "keyword generator" in call["system"]
    assert '"nature"' in call["user"]


def test_keyword_generator_short_answer_is_not_padded(fake_provider_factory):
    provider = fake_provider_factory("tree\n\n")
    generator = KeywordGenerator(llm_client=LLMClient(provider=provider))
    assert generator.generate(KeywordRequest(input="nature", count=3)) == ["tree"]


def test_prompt_generator_uses_one_batched_call(fake_provider_factory):
    provider = fake_provider_factory("An owl at night.\nA fox at dawn.")
    generator = PromptGenerator(llm_client=LLMClient(provider=provider))
    request = PromptRequest(keywords=["owl", "fox", "bear"], type="photography", count=2)

    out = generator.generate(request)

    assert out == ["An owl at night.", "A fox at dawn."]
    assert len(provider.calls) == 1
    assert provider.calls[0]["max_tokens"] == 2000
    assert "bear" not in provider.calls[0]["user"]
    assert generator.fallbacks_used == 0


def test_prompt_generator_counts_fallbacks(fake_provider_factory):
    provider = fake_provider_factory("")
    generator = PromptGenerator(llm_client=LLMClient(provider=provider))
    out = generator.generate(PromptRequest(keywords=["owl"], type="vector", count=1))
    assert out == ["A clean vector illustration of owl with modern design elements and vibrant colors."]
    assert generator.fallbacks_used == 1


def test_provider_errors_propagate(failing_provider_factory):
    provider = failing_provider_factory(NoContentError("No content generated from Gemini API"))
    generator = PromptGenerator(llm_client=LLMClient(provider=provider))
    with pytest.raises(NoContentError):
        generator.generate(PromptRequest(keywords=["owl"], type="vector", count=1))
