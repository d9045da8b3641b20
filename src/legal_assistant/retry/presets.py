"""
Preset retry configurations.

Both presets run the same executor; they only change the defaults.
"""

from typing import Any, Awaitable, Callable, TypeVar

from legal_assistant.retry.config import RetryConfig
from legal_assistant.retry.engine import execute_with_retry

T = TypeVar("T")

# Generative-model calls: slower provider, worth a longer first wait
AI_RETRY_CONFIG = RetryConfig(
    max_attempts=3,
    delay_ms=1500,
    backoff_multiplier=2.0,
    operation_name="ai",
)

# Auth calls: a user is waiting on the login form, fail fast
AUTH_RETRY_CONFIG = RetryConfig(
    max_attempts=2,
    delay_ms=500,
    backoff_multiplier=1.5,
    operation_name="auth",
)


async def retry_ai(operation: Callable[[], Awaitable[T]], **overrides: Any) -> T:
    """Retry with the AI preset (3 attempts, 1500ms, x2); any field can be overridden."""
    return await execute_with_retry(operation, AI_RETRY_CONFIG, **overrides)


async def retry_auth(operation: Callable[[], Awaitable[T]], **overrides: Any) -> T:
    """Retry with the auth preset (2 attempts, 500ms, x1.5); any field can be overridden."""
    return await execute_with_retry(operation, AUTH_RETRY_CONFIG, **overrides)
