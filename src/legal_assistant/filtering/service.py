"""
Question filtering call.

One filtering call classifies a visitor question with the generative model,
looks for a canned answer in the local FAQ table and, when the model wants
an automatic answer but gave no text, asks for a detailed one. The whole
call is a single retry unit: ``filter_question_with_retry`` re-runs all of
it, the sub-steps are never retried on their own.
"""

from typing import Any, Optional

import structlog

from legal_assistant.config import Settings
from legal_assistant.faq.matcher import find_similar_faq
from legal_assistant.filtering.exceptions import (
    AIServiceNotConfiguredError,
    InvalidQuestionError,
    QuestionFilterError,
)
from legal_assistant.filtering.response_parser import parse_filter_response
from legal_assistant.llm.base_client import BaseLLMClient
from legal_assistant.llm.prompt_builder import PromptBuilder
from legal_assistant.models.enums import LegalCategory
from legal_assistant.models.question_models import FilteredQuestion
from legal_assistant.monitoring.metrics import faq_matches_total, questions_filtered_total
from legal_assistant.retry.policies import default_should_retry
from legal_assistant.retry.presets import retry_ai

logger = structlog.get_logger(__name__)

NO_RESPONSE_PLACEHOLDER = "No response generated"


def filter_should_retry(error: Optional[BaseException]) -> bool:
    """
    Retry predicate for filtering calls.

    Permanent filtering errors are never retried; everything else follows
    the default network / 5xx / 429 classification.
    """
    if isinstance(error, QuestionFilterError) and not error.retryable:
        return False
    return default_should_retry(error)


class QuestionFilterService:
    """
    Classify legal questions and pick the answer shown to the visitor.

    Answer precedence: FAQ entry, then the model's brief answer, then a
    secondary detailed generation.
    """

    def __init__(
        self,
        llm_client: BaseLLMClient,
        prompt_builder: PromptBuilder,
        settings: Settings,
    ):
        """
        Initialize the filtering service.

        Args:
            llm_client: Client used for both generation calls
            prompt_builder: Renders the classification and detailed prompts
            settings: Thresholds and retry parameters
        """
        self.llm_client = llm_client
        self.prompt_builder = prompt_builder
        self.settings = settings

    @property
    def configured(self) -> bool:
        return self.settings.ai_configured

    def ensure_configured(self) -> None:
        """
        Raises:
            AIServiceNotConfiguredError: No Gemini API key is configured
        """
        if not self.configured:
            logger.warning("AI service called without GEMINI_API_KEY")
            raise AIServiceNotConfiguredError()

    async def filter_question(self, question: str) -> FilteredQuestion:
        """
        Filter one question (single attempt).

        Args:
            question: Visitor question

        Returns:
            FilteredQuestion with the answer to show, if any

        Raises:
            AIServiceNotConfiguredError: API key missing (model not called)
            InvalidQuestionError: Empty question
            ResponseParseError: Model output could not be parsed
            LLMClientError: Provider call failed
        """
        if not question or not question.strip():
            raise InvalidQuestionError("Question cannot be empty")
        self.ensure_configured()

        request = self.prompt_builder.build_filter_request(question)
        response = await self.llm_client.generate(request)
        result = parse_filter_response(
            response.content,
            min_confidence=self.settings.AUTO_RESPONSE_MIN_CONFIDENCE,
        )

        faq = find_similar_faq(question, result.category, min_score=self.settings.FAQ_MIN_SCORE)
        if faq is not None:
            result = result.model_copy(update={
                "auto_response": faq.answer,
                "has_auto_response": True,
                "faq_id": faq.id,
            })
            faq_matches_total.labels(category=result.category.value).inc()
            source = "faq"
        elif result.has_auto_response and not result.auto_response:
            detailed = await self.generate_detailed_response(question, result.category)
            result = result.model_copy(update={"auto_response": detailed})
            source = "generated"
        elif result.has_auto_response:
            source = "ai"
        else:
            source = "none"

        questions_filtered_total.labels(category=result.category.value, source=source).inc()
        logger.info(
            "Question filtered",
            category=result.category.value,
            confidence=result.confidence,
            has_auto_response=result.has_auto_response,
            answer_source=source,
            faq_id=result.faq_id,
        )
        return result

    async def generate_detailed_response(self, question: str, category: LegalCategory | str) -> str:
        """
        Secondary generation with a category-specific lawyer prompt.

        Returns:
            Model text, or "No response generated" when the model returns none
        """
        if not question or not question.strip():
            raise InvalidQuestionError("Question cannot be empty")
        self.ensure_configured()

        request = self.prompt_builder.build_detailed_request(question, category)
        response = await self.llm_client.generate(request)
        text = (response.content or "").strip()
        if not text:
            logger.warning("Detailed generation returned no text", category=str(category))
            return NO_RESPONSE_PLACEHOLDER
        return text

    def _retry_overrides(self, operation_name: str, overrides: dict[str, Any]) -> dict[str, Any]:
        merged = {
            "max_attempts": self.settings.AI_RETRY_MAX_ATTEMPTS,
            "delay_ms": self.settings.AI_RETRY_DELAY_MS,
            "backoff_multiplier": self.settings.AI_RETRY_BACKOFF_MULTIPLIER,
            "max_delay_ms": self.settings.RETRY_MAX_DELAY_MS,
            "should_retry": filter_should_retry,
            "operation_name": operation_name,
        }
        merged.update(overrides)
        return merged

    async def filter_question_with_retry(self, question: str, **overrides: Any) -> FilteredQuestion:
        """Run filter_question through the AI retry preset as one unit."""
        return await retry_ai(
            lambda: self.filter_question(question),
            **self._retry_overrides("filter_question", overrides),
        )

    async def generate_response_with_retry(
        self,
        question: str,
        category: LegalCategory | str,
        **overrides: Any,
    ) -> str:
        """Run generate_detailed_response through the AI retry preset."""
        return await retry_ai(
            lambda: self.generate_detailed_response(question, category),
            **self._retry_overrides("generate_response", overrides),
        )
