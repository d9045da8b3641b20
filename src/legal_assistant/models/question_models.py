"""
Business models for legal question filtering.

FilteredQuestion is built fresh for every question from the parsed model
output and is never mutated afterwards; later steps (FAQ match, secondary
generation) derive a new instance with ``model_copy``.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from legal_assistant.models.enums import ComplexityEnum, LegalCategory


class FilteredQuestion(BaseModel):
    """
    Outcome of filtering one legal question.

    Serialises with camelCase keys (hasAutoResponse, autoResponse, ...) to
    match what the website expects.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=False,
    )

    category: LegalCategory = Field(..., description="Detected legal category")
    has_auto_response: bool = Field(
        default=False,
        description="Whether an automatic answer can be shown to the visitor"
    )
    auto_response: Optional[str] = Field(
        default=None,
        description="Automatic answer text (FAQ answer, model brief answer or generated text)"
    )
    reasoning: str = Field(default="", description="Why the model chose this category")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Model confidence")
    needs_professional_consultation: bool = Field(
        default=True,
        description="Whether the case should be referred to a lawyer"
    )
    complexity: ComplexityEnum = Field(
        default=ComplexityEnum.MEDIUM,
        description="Perceived complexity of the case"
    )
    faq_id: Optional[str] = Field(
        default=None,
        description="ID of the FAQ entry that supplied the answer, if any"
    )


class FAQEntry(BaseModel):
    """A canned question/answer pair from the local FAQ table."""

    model_config = ConfigDict(frozen=True)

    id: str
    question: str
    answer: str
    category: LegalCategory
    keywords: tuple[str, ...] = ()
