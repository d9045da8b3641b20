"""
Unit tests for Settings validation.
"""

import pytest
from pydantic import ValidationError

from legal_assistant.config import Settings


def test_defaults_are_valid():
    settings = Settings(GEMINI_API_KEY="k", RETRY_MAX_DELAY_MS=None)

    assert settings.AI_RETRY_MAX_ATTEMPTS >= 1
    assert settings.ai_configured is True


def test_retry_cap_below_initial_delay_rejected_at_startup():
    """A cap below the first delay would make every AI request fail."""
    with pytest.raises(ValidationError, match="RETRY_MAX_DELAY_MS"):
        Settings(AI_RETRY_DELAY_MS=1500, RETRY_MAX_DELAY_MS=1000)


def test_retry_cap_equal_to_initial_delay_accepted():
    settings = Settings(AI_RETRY_DELAY_MS=1500, RETRY_MAX_DELAY_MS=1500)

    assert settings.RETRY_MAX_DELAY_MS == 1500


@pytest.mark.parametrize("overrides", [
    {"AI_RETRY_MAX_ATTEMPTS": 0},
    {"AI_RETRY_DELAY_MS": -1},
    {"AI_RETRY_BACKOFF_MULTIPLIER": 0},
])
def test_invalid_retry_settings_rejected(overrides):
    with pytest.raises(ValidationError):
        Settings(**overrides)


def test_blank_api_key_is_not_configured():
    assert Settings(GEMINI_API_KEY="   ").ai_configured is False
