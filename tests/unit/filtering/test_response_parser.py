"""
Unit tests for the filter response parser.
"""

import pytest

from legal_assistant.filtering.exceptions import ResponseParseError
from legal_assistant.filtering.response_parser import (
    DEFAULT_BRIEF_ANSWER,
    extract_json_object,
    parse_filter_response,
)
from legal_assistant.models.enums import ComplexityEnum, LegalCategory


class TestExtractJsonObject:

    def test_plain_object(self):
        assert extract_json_object('{"category": "Penal"}') == {"category": "Penal"}

    def test_object_wrapped_in_prose_and_fences(self):
        content = 'Aquí está el análisis:\n```json\n{"category": "Laboral", "confidence": 0.8}\n```\n'
        assert extract_json_object(content) == {"category": "Laboral", "confidence": 0.8}

    @pytest.mark.parametrize("content", ["", "   \n  "])
    def test_empty_content(self, content):
        with pytest.raises(ResponseParseError, match="empty"):
            extract_json_object(content)

    def test_no_object(self):
        with pytest.raises(ResponseParseError, match="No JSON object"):
            extract_json_object("Lo siento, no puedo ayudar con eso.")

    def test_malformed_json(self):
        with pytest.raises(ResponseParseError) as exc_info:
            extract_json_object('{"category": "Civil",}')

        assert "content_snippet" in exc_info.value.details
        assert "parse_error" in exc_info.value.details


class TestParseFilterResponse:

    def test_valid_answer(self, model_answer):
        result = parse_filter_response(model_answer(category="Penal", confidence=0.85, complexity="simple"))

        assert result.category == LegalCategory.PENAL
        assert result.confidence == 0.85
        assert result.has_auto_response is True
        assert result.auto_response == "Respuesta orientativa breve."
        assert result.complexity == ComplexityEnum.SIMPLE
        assert result.faq_id is None

    def test_unknown_category_falls_back_to_civil(self, model_answer):
        result = parse_filter_response(model_answer(category="Internacional"))
        assert result.category == LegalCategory.CIVIL

    def test_category_is_case_insensitive(self, model_answer):
        result = parse_filter_response(model_answer(category="familia"))
        assert result.category == LegalCategory.FAMILIA

    def test_low_confidence_disables_auto_response(self, model_answer):
        result = parse_filter_response(model_answer(confidence=0.3, hasAutoResponse=True))

        assert result.has_auto_response is False
        # The model's own text is kept as the brief answer
        assert result.auto_response == "Respuesta orientativa breve."

    def test_confidence_threshold_is_configurable(self, model_answer):
        content = model_answer(confidence=0.6)

        assert parse_filter_response(content, min_confidence=0.5).has_auto_response is True
        assert parse_filter_response(content, min_confidence=0.7).has_auto_response is False

    def test_missing_answer_without_auto_response_gets_default(self, model_answer):
        result = parse_filter_response(
            model_answer(hasAutoResponse=False, autoResponse=None, needsProfessionalConsultation=False)
        )

        assert result.auto_response == DEFAULT_BRIEF_ANSWER
        assert result.needs_professional_consultation is True

    def test_missing_answer_with_auto_response_is_left_empty(self, model_answer):
        result = parse_filter_response(model_answer(autoResponse=""))

        assert result.has_auto_response is True
        assert result.auto_response is None

    def test_brief_answer_key_is_accepted(self, model_answer):
        result = parse_filter_response(model_answer(autoResponse=None, briefAnswer="Texto breve"))
        assert result.auto_response == "Texto breve"

    def test_confidence_is_clamped(self, model_answer):
        assert parse_filter_response(model_answer(confidence=1.7)).confidence == 1.0
        assert parse_filter_response(model_answer(confidence=-2)).confidence == 0.0

    def test_missing_confidence_counts_as_zero(self, model_answer):
        content = '{"category": "Civil", "hasAutoResponse": true, "autoResponse": "x"}'
        result = parse_filter_response(content)

        assert result.confidence == 0.0
        assert result.has_auto_response is False

    def test_non_numeric_confidence(self, model_answer):
        with pytest.raises(ResponseParseError, match="confidence"):
            parse_filter_response(model_answer(confidence="alta"))

    def test_string_confidence_is_converted(self, model_answer):
        assert parse_filter_response(model_answer(confidence="0.75")).confidence == 0.75

    def test_unknown_complexity_defaults_to_medium(self, model_answer):
        result = parse_filter_response(model_answer(complexity="extreme"))
        assert result.complexity == ComplexityEnum.MEDIUM

    def test_serialises_with_camel_case_keys(self, model_answer):
        data = parse_filter_response(model_answer()).model_dump(by_alias=True)

        assert "hasAutoResponse" in data
        assert "needsProfessionalConsultation" in data
        assert "faqId" in data
