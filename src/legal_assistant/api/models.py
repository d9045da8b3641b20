"""
API-specific request and response models for FastAPI endpoints.

Every JSON body uses camelCase keys and the ``{"success": ..., "data": ...}``
envelope the website already consumes.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from legal_assistant.models.enums import ComplexityEnum, LegalCategory
from legal_assistant.models.question_models import FilteredQuestion


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FilterQuestionRequest(BaseModel):
    """Request for POST /api/filter-question."""

    question: str = Field(
        min_length=1,
        description="Legal question written by the visitor",
        examples=["¿Cuál es el plazo para presentar una demanda civil?"]
    )


class GenerateResponseRequest(BaseModel):
    """Request for POST /api/generate-response."""

    question: str = Field(min_length=1, description="Legal question")
    category: str = Field(
        min_length=1,
        description="Legal category the answer should be written for",
        examples=["Civil", "Laboral"]
    )


class FilteredQuestionData(CamelModel):
    """Filtering outcome as returned to the website."""

    question: str = Field(description="The question as received")
    category: LegalCategory = Field(description="Detected legal category")
    brief_answer: Optional[str] = Field(
        default=None,
        description="Answer shown to the visitor (FAQ answer, model brief answer or generated text)"
    )
    has_auto_response: bool = Field(description="Whether brief_answer is an automatic answer")
    needs_professional_consultation: bool = Field(description="Refer the visitor to a lawyer")
    reasoning: str = Field(default="", description="Why the model chose this category")
    confidence: float = Field(ge=0.0, le=1.0, description="Model confidence")
    complexity: ComplexityEnum = Field(description="Perceived complexity of the case")
    faq_id: Optional[str] = Field(default=None, description="FAQ entry that supplied the answer")

    @classmethod
    def from_filtered(cls, question: str, result: FilteredQuestion) -> "FilteredQuestionData":
        return cls(
            question=question,
            category=result.category,
            brief_answer=result.auto_response,
            has_auto_response=result.has_auto_response,
            needs_professional_consultation=result.needs_professional_consultation,
            reasoning=result.reasoning,
            confidence=result.confidence,
            complexity=result.complexity,
            faq_id=result.faq_id,
        )


class FilterQuestionResponse(CamelModel):
    """Response for POST /api/filter-question."""

    success: bool = True
    data: FilteredQuestionData


class GeneratedResponseData(CamelModel):
    question: str
    category: str
    response: str = Field(description="Detailed answer written by the model")


class GenerateResponseResponse(CamelModel):
    """Response for POST /api/generate-response."""

    success: bool = True
    data: GeneratedResponseData


class HealthResponse(BaseModel):
    """Response for GET /api/health."""

    status: str = Field(
        description="Service status",
        examples=["ok"]
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Check timestamp (UTC)"
    )
    services: dict[str, str] = Field(
        default_factory=dict,
        description="Status of dependencies (gemini: ok, unavailable, not_configured)"
    )


class ModelsResponse(BaseModel):
    """Response for GET /api/list-models."""

    success: bool = True
    models: list[dict[str, Any]] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Body of every error response."""

    success: bool = False
    error: str = Field(description="User-facing error message (Spanish)")
    attempts: Optional[int] = Field(
        default=None,
        description="Attempts made by the retry executor (1 when the failure was not retryable)"
    )


class RootResponse(BaseModel):
    """Response for GET /."""

    message: str
    version: str
    status: str
