"""
FastAPI dependency injection for the Legal Assistant service.

Provides singleton instances of expensive resources (Gemini client with its
connection pool, prompt builder with loaded templates) and a factory for
the filtering service.
"""

from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from legal_assistant.config import Settings, settings
from legal_assistant.filtering.service import QuestionFilterService
from legal_assistant.llm.base_client import BaseLLMClient
from legal_assistant.llm.gemini_client import GeminiClient
from legal_assistant.llm.prompt_builder import PromptBuilder


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.

    Returns:
        Settings instance
    """
    return settings


@lru_cache()
def get_llm_client() -> BaseLLMClient:
    """
    Get singleton LLM client with connection pooling.

    Uses @lru_cache to ensure only one client instance is created.
    The client does not retry; QuestionFilterService retries whole calls.

    Returns:
        GeminiClient instance
    """
    app_settings = get_settings()
    return GeminiClient(
        api_key=app_settings.GEMINI_API_KEY,
        base_url=app_settings.GEMINI_BASE_URL,
        model=app_settings.GEMINI_MODEL,
        timeout=app_settings.GEMINI_TIMEOUT,
    )


@lru_cache()
def get_prompt_builder() -> PromptBuilder:
    """
    Get singleton prompt builder.

    Loads Jinja2 templates once and reuses them across requests.

    Returns:
        PromptBuilder instance
    """
    app_settings = get_settings()
    templates_dir = Path(app_settings.PROMPT_TEMPLATES_DIR) if app_settings.PROMPT_TEMPLATES_DIR else None
    return PromptBuilder(
        templates_dir=templates_dir,
        default_model=app_settings.GEMINI_MODEL,
        default_temperature=app_settings.LLM_TEMPERATURE,
        default_max_tokens=app_settings.LLM_MAX_TOKENS,
        detailed_temperature=app_settings.DETAILED_TEMPERATURE,
        detailed_max_tokens=app_settings.DETAILED_MAX_TOKENS,
    )


def get_question_filter_service(
    llm_client: BaseLLMClient = Depends(get_llm_client),
    prompt_builder: PromptBuilder = Depends(get_prompt_builder),
    app_settings: Settings = Depends(get_settings),
) -> QuestionFilterService:
    """
    Create the filtering service with injected dependencies.

    Note: QuestionFilterService is NOT cached because it's lightweight and
    stateless. All heavy resources (client, builder) are singletons.

    Args:
        llm_client: LLM client singleton (injected)
        prompt_builder: Prompt builder singleton (injected)
        app_settings: Application settings (injected)

    Returns:
        QuestionFilterService instance
    """
    return QuestionFilterService(
        llm_client=llm_client,
        prompt_builder=prompt_builder,
        settings=app_settings,
    )
