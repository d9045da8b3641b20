"""
Unit tests for API dependency injection.
"""

from legal_assistant.api.dependencies import (
    get_llm_client,
    get_prompt_builder,
    get_question_filter_service,
    get_settings,
)
from legal_assistant.config import Settings
from legal_assistant.filtering.service import QuestionFilterService
from legal_assistant.llm.gemini_client import GeminiClient
from legal_assistant.llm.prompt_builder import PromptBuilder


def test_get_settings():
    """Test settings singleton."""
    settings1 = get_settings()
    settings2 = get_settings()

    # Should be same instance (cached)
    assert settings1 is settings2
    assert isinstance(settings1, Settings)


def test_get_llm_client():
    """Test LLM client singleton."""
    client1 = get_llm_client()
    client2 = get_llm_client()

    # Should be same instance (cached)
    assert client1 is client2
    assert isinstance(client1, GeminiClient)
    assert client1.default_model == get_settings().GEMINI_MODEL


def test_get_prompt_builder():
    """Test prompt builder singleton."""
    builder1 = get_prompt_builder()
    builder2 = get_prompt_builder()

    # Should be same instance (cached)
    assert builder1 is builder2
    assert isinstance(builder1, PromptBuilder)
    assert builder1.default_temperature == get_settings().LLM_TEMPERATURE


def test_get_question_filter_service(mock_llm_client, prompt_builder, test_settings):
    """Test filtering service factory (not cached)."""
    service1 = get_question_filter_service(mock_llm_client, prompt_builder, test_settings)
    service2 = get_question_filter_service(mock_llm_client, prompt_builder, test_settings)

    assert isinstance(service1, QuestionFilterService)
    assert service1 is not service2
    assert service1.llm_client is mock_llm_client
    assert service1.settings is test_settings
