"""
Custom exceptions for the LLM client layer.

Each exception carries the HTTP status reported by the provider (when one
was received) in ``status_code``. The retry executor's default predicate
reads that field: no status means a network-level failure (retryable),
5xx/429 are retryable, other statuses are not.
"""

from typing import Optional


class LLMClientError(Exception):
    """
    Base exception for all LLM client errors.

    All LLM-specific exceptions inherit from this to allow catching
    any LLM-related error with a single except clause.
    """
    def __init__(
        self,
        message: str,
        details: dict | None = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.status_code = status_code


class LLMConnectionError(LLMClientError):
    """
    Raised when unable to reach the LLM provider.

    Includes network errors, DNS failures, dropped connections.
    No HTTP response was received, so ``status_code`` is None.
    """
    pass


class LLMTimeoutError(LLMConnectionError):
    """
    Raised when the request exceeds the configured timeout.

    Separate from generic connection errors so handlers can answer 504.
    """
    pass


class LLMGenerationError(LLMClientError):
    """
    Raised when the provider answers with an error or an unusable body.

    Examples:
    - HTTP 500/503 (provider overloaded)
    - HTTP 400 (invalid parameters)
    - Empty candidate list, blocked prompt
    """
    pass


class LLMRateLimitError(LLMGenerationError):
    """
    Raised when the provider rate-limits the request (HTTP 429).

    Quota exhaustion on the Gemini API also surfaces as 429.
    """
    pass


class LLMAuthenticationError(LLMGenerationError):
    """
    Raised when the provider rejects the API key (HTTP 401/403).

    Never retryable: the key will not become valid between attempts.
    """
    pass


class LLMModelNotAvailableError(LLMGenerationError):
    """
    Raised when the requested model does not exist on the provider (HTTP 404).
    """
    pass
