"""
Parse the classification model's raw output into a FilteredQuestion.

The model is asked for a JSON object but may wrap it in prose or code
fences, so the outermost ``{...}`` block is extracted before decoding.
Normalisation rules:
    - unknown category             -> Civil
    - confidence below threshold   -> no automatic response
    - no answer text and no automatic response -> default brief answer
"""

import json
import re
from typing import Any, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError

from legal_assistant.filtering.exceptions import ResponseParseError
from legal_assistant.models.enums import ComplexityEnum, LegalCategory
from legal_assistant.models.question_models import FilteredQuestion

logger = structlog.get_logger(__name__)

JSON_BLOCK_RE = re.compile(r"\{[\s\S]*\}")

DEFAULT_MIN_CONFIDENCE = 0.5
DEFAULT_BRIEF_ANSWER = (
    "Para evaluar correctamente su situación, necesitamos analizar los detalles "
    "específicos de su caso en una consulta personalizada."
)


def extract_json_object(content: str) -> dict[str, Any]:
    """
    Extract and decode the JSON object embedded in model output.

    Raises:
        ResponseParseError: Empty content, no object found or malformed JSON
    """
    if not content or not content.strip():
        raise ResponseParseError(
            "Model response is empty or whitespace-only",
            raw_content=content,
            parse_error="Empty content",
        )

    match = JSON_BLOCK_RE.search(content)
    if match is None:
        raise ResponseParseError(
            "No JSON object found in model response",
            raw_content=content,
            parse_error="No {...} block",
        )

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise ResponseParseError(
            f"Failed to parse model response as JSON: {e.msg}",
            raw_content=content,
            parse_error=f"{e.msg} at line {e.lineno} col {e.colno}",
        ) from e

    if not isinstance(parsed, dict):
        raise ResponseParseError(
            f"Model response is not a JSON object (got {type(parsed).__name__})",
            raw_content=content,
        )
    return parsed


def _parse_confidence(value: Any, content: str) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise ResponseParseError(
            "confidence must be a number",
            raw_content=content,
            parse_error=f"got {value!r}",
        )
    try:
        confidence = float(value)
    except (TypeError, ValueError) as e:
        raise ResponseParseError(
            "confidence must be a number",
            raw_content=content,
            parse_error=f"got {value!r}",
        ) from e
    return min(max(confidence, 0.0), 1.0)


def _parse_complexity(value: Any) -> ComplexityEnum:
    if isinstance(value, str):
        try:
            return ComplexityEnum(value.strip().lower())
        except ValueError:
            pass
    return ComplexityEnum.MEDIUM


def _answer_text(data: dict[str, Any]) -> Optional[str]:
    # Older prompts used "briefAnswer" for the same field
    for key in ("autoResponse", "briefAnswer"):
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def parse_filter_response(
    content: str,
    min_confidence: float = DEFAULT_MIN_CONFIDENCE,
) -> FilteredQuestion:
    """
    Build a FilteredQuestion from raw model output.

    Args:
        content: Raw text returned by the model
        min_confidence: Below this confidence no automatic response is allowed

    Returns:
        Normalised FilteredQuestion

    Raises:
        ResponseParseError: If the output cannot be parsed
    """
    data = extract_json_object(content)

    raw_category = data.get("category")
    category = LegalCategory.parse(raw_category if isinstance(raw_category, str) else None)
    if category is None:
        logger.warning("Unknown category from model, falling back", category=raw_category)
        category = LegalCategory.default()

    confidence = _parse_confidence(data.get("confidence"), content)
    has_auto_response = data.get("hasAutoResponse") is True
    if confidence < min_confidence:
        has_auto_response = False

    needs_consultation = data.get("needsProfessionalConsultation")
    needs_consultation = True if not isinstance(needs_consultation, bool) else needs_consultation

    auto_response = _answer_text(data)
    if auto_response is None and not has_auto_response:
        auto_response = DEFAULT_BRIEF_ANSWER
        needs_consultation = True

    reasoning = data.get("reasoning")

    try:
        result = FilteredQuestion(
            category=category,
            has_auto_response=has_auto_response,
            auto_response=auto_response,
            reasoning=reasoning if isinstance(reasoning, str) else "",
            confidence=confidence,
            needs_professional_consultation=needs_consultation,
            complexity=_parse_complexity(data.get("complexity")),
        )
    except PydanticValidationError as e:
        raise ResponseParseError(
            "Model response has invalid field values",
            raw_content=content,
            parse_error=str(e),
        ) from e

    logger.debug(
        "Parsed filter response",
        category=result.category.value,
        confidence=result.confidence,
        has_auto_response=result.has_auto_response,
    )
    return result
