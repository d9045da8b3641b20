"""
Exceptions raised by the question filtering call.

Permanent failures (``retryable = False``) are never retried: the API key
will not appear and an empty question will not fill itself between attempts.
A parse failure is retryable, the next model answer may well be valid JSON.
"""

from typing import Any


class QuestionFilterError(Exception):
    """
    Base exception for question filtering errors.
    """

    retryable: bool = True

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize filtering error.

        Args:
            message: Human-readable error description
            details: Structured error data for logging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class AIServiceNotConfiguredError(QuestionFilterError):
    """Raised when no Gemini API key is configured."""

    retryable = False

    def __init__(self, message: str = "AI service is not configured (GEMINI_API_KEY missing)"):
        super().__init__(message)


class InvalidQuestionError(QuestionFilterError):
    """Raised for empty or whitespace-only questions."""

    retryable = False


class ResponseParseError(QuestionFilterError):
    """
    Model output could not be turned into a FilteredQuestion.

    Raised when no JSON object is found, the JSON is malformed or a field
    has an unusable value.
    """

    def __init__(self, message: str, raw_content: str | None = None, parse_error: str | None = None):
        """
        Initialize parse error.

        Args:
            message: Error description
            raw_content: Model output (first 500 chars are kept)
            parse_error: Underlying decoder / validation message
        """
        details = {}
        if raw_content:
            details["content_snippet"] = raw_content[:500]
        if parse_error:
            details["parse_error"] = parse_error

        super().__init__(message, details)
