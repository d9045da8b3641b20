"""Unit test fixtures (mocks and stubs).

Provides mock objects for testing without external dependencies.
"""

from unittest.mock import AsyncMock, patch

import pytest

from legal_assistant.filtering.service import QuestionFilterService
from legal_assistant.llm.prompt_builder import PromptBuilder
from legal_assistant.models.llm_models import LLMGenerationResponse


def make_llm_response(content: str, model: str = "gemini-2.5-flash-lite") -> LLMGenerationResponse:
    """Minimal LLMGenerationResponse wrapping the given text."""
    return LLMGenerationResponse(
        content=content,
        model_version=model,
        finish_reason="STOP",
        usage_tokens=120,
        prompt_tokens=80,
        completion_tokens=40,
        latency_ms=350,
        raw_metadata={},
    )


@pytest.fixture
def llm_response_factory():
    """Factory fixture building LLMGenerationResponse objects from text."""
    return make_llm_response


@pytest.fixture
def mock_llm_client(model_answer):
    """Mock GeminiClient for unit tests."""
    mock = AsyncMock()

    mock.generate = AsyncMock(return_value=make_llm_response(model_answer()))
    mock.health_check = AsyncMock(return_value=True)
    mock.list_models = AsyncMock(return_value=[{"name": "models/gemini-2.5-flash-lite"}])
    mock.configured = True

    return mock


@pytest.fixture
def prompt_builder() -> PromptBuilder:
    """Real PromptBuilder over the bundled templates."""
    return PromptBuilder()


@pytest.fixture
def filter_service(mock_llm_client, prompt_builder, test_settings) -> QuestionFilterService:
    """QuestionFilterService wired to the mock client."""
    return QuestionFilterService(
        llm_client=mock_llm_client,
        prompt_builder=prompt_builder,
        settings=test_settings,
    )


@pytest.fixture
def mock_sleep():
    """Patch the executor's asyncio.sleep so retries do not wait."""
    with patch("legal_assistant.retry.engine.asyncio.sleep", new_callable=AsyncMock) as sleep:
        yield sleep
