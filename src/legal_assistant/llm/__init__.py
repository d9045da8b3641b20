"""
LLM client abstraction and implementations.

Components:
- BaseLLMClient: Abstract base class for LLM clients
- GeminiClient: Implementation for the Gemini REST API
- PromptBuilder: Renders classification and detailed-answer prompts
- exceptions: LLM-specific exceptions
"""

from legal_assistant.llm.base_client import BaseLLMClient
from legal_assistant.llm.gemini_client import GeminiClient
from legal_assistant.llm.prompt_builder import PromptBuilder
from legal_assistant.llm.exceptions import (
    LLMAuthenticationError,
    LLMClientError,
    LLMConnectionError,
    LLMGenerationError,
    LLMModelNotAvailableError,
    LLMRateLimitError,
    LLMTimeoutError,
)

__all__ = [
    "BaseLLMClient",
    "GeminiClient",
    "PromptBuilder",
    "LLMClientError",
    "LLMConnectionError",
    "LLMTimeoutError",
    "LLMGenerationError",
    "LLMRateLimitError",
    "LLMAuthenticationError",
    "LLMModelNotAvailableError",
]
