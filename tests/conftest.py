"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import json

import pytest

from legal_assistant.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.GEMINI_API_KEY = None
    """
    return Settings(
        # === Application ===
        APP_NAME="Bufete Jurídico Backend (Test)",
        APP_VERSION="1.0.0",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",

        # === Gemini ===
        GEMINI_API_KEY="test-api-key",
        GEMINI_BASE_URL="https://gemini.test/v1beta",
        GEMINI_MODEL="gemini-2.5-flash-lite",
        GEMINI_TIMEOUT=5,

        # === Retry ===
        AI_RETRY_MAX_ATTEMPTS=3,
        AI_RETRY_DELAY_MS=1500,
        AI_RETRY_BACKOFF_MULTIPLIER=2.0,
        RETRY_MAX_DELAY_MS=None,

        # === Filtering ===
        FAQ_MIN_SCORE=2,
        AUTO_RESPONSE_MIN_CONFIDENCE=0.5,

        PROMETHEUS_ENABLED=False,  # Disable metrics in tests unless explicitly needed
    )


@pytest.fixture
def model_answer():
    """Factory fixture for the JSON text the classification model returns.

    Usage:
        def test_something(model_answer):
            content = model_answer(category="Penal", confidence=0.4)
    """
    def _create(**overrides) -> str:
        payload = {
            "category": "Civil",
            "hasAutoResponse": True,
            "autoResponse": "Respuesta orientativa breve.",
            "needsProfessionalConsultation": True,
            "reasoning": "Consulta sobre responsabilidad civil",
            "confidence": 0.9,
            "complexity": "medium",
        }
        payload.update(overrides)
        return json.dumps(payload, ensure_ascii=False)

    return _create
