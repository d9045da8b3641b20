"""
Data models for the Legal Assistant service.

- enums: LegalCategory, ComplexityEnum
- llm_models: provider-neutral generation request/response
- question_models: FilteredQuestion, FAQEntry
"""

from legal_assistant.models.enums import ComplexityEnum, LegalCategory
from legal_assistant.models.llm_models import LLMGenerationRequest, LLMGenerationResponse
from legal_assistant.models.question_models import FAQEntry, FilteredQuestion

__all__ = [
    "LegalCategory",
    "ComplexityEnum",
    "LLMGenerationRequest",
    "LLMGenerationResponse",
    "FilteredQuestion",
    "FAQEntry",
]
