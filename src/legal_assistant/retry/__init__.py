"""
Retry executor with exponential backoff.

Wraps any failable async operation and re-invokes it on transient failures:

1. **Attempt**: call the operation; success returns immediately
2. **Classify**: ask ``should_retry`` whether the failure is transient
3. **Back off**: wait ``delay_ms``, then multiply the delay by ``backoff_multiplier``
4. **Give up**: re-raise the last failure unchanged when attempts run out

Main Components:
    - execute_with_retry: The executor
    - RetryConfig: Immutable retry parameters
    - default_should_retry: Network / 5xx / 429 classification
    - retry_ai, retry_auth: Preset wrappers over the same executor

Usage:
    >>> from legal_assistant.retry import retry_ai
    >>> result = await retry_ai(lambda: service.filter_question(question))
"""

from legal_assistant.retry.config import OnRetry, RetryConfig
from legal_assistant.retry.engine import execute_with_retry, retry_sync
from legal_assistant.retry.policies import (
    ShouldRetry,
    default_should_retry,
    extract_status_code,
    is_network_error,
    is_retryable_status,
)
from legal_assistant.retry.presets import (
    AI_RETRY_CONFIG,
    AUTH_RETRY_CONFIG,
    retry_ai,
    retry_auth,
)

__all__ = [
    "execute_with_retry",
    "retry_sync",
    "RetryConfig",
    "OnRetry",
    "ShouldRetry",
    "default_should_retry",
    "extract_status_code",
    "is_network_error",
    "is_retryable_status",
    "AI_RETRY_CONFIG",
    "AUTH_RETRY_CONFIG",
    "retry_ai",
    "retry_auth",
]
