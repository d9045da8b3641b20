"""
Question filtering: AI classification + local FAQ lookup.

Components:
- QuestionFilterService: The filtering call and its retried variants
- parse_filter_response: Raw model output -> FilteredQuestion
- exceptions: Filtering-specific exceptions
"""

from legal_assistant.filtering.exceptions import (
    AIServiceNotConfiguredError,
    InvalidQuestionError,
    QuestionFilterError,
    ResponseParseError,
)
from legal_assistant.filtering.response_parser import parse_filter_response
from legal_assistant.filtering.service import QuestionFilterService, filter_should_retry

__all__ = [
    "QuestionFilterService",
    "filter_should_retry",
    "parse_filter_response",
    "QuestionFilterError",
    "AIServiceNotConfiguredError",
    "InvalidQuestionError",
    "ResponseParseError",
]
