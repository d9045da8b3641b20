"""
Unit tests for logging processors.
"""

from legal_assistant.logging_config import REDACTED, add_app_context, redact_secrets


def test_redact_secrets_masks_credentials():
    event = {"event": "Calling Gemini", "api_key": "AIza-secret", "model": "gemini-2.5-flash-lite"}

    result = redact_secrets(None, "info", event)

    assert result["api_key"] == REDACTED
    assert result["model"] == "gemini-2.5-flash-lite"


def test_redact_secrets_leaves_empty_values():
    event = {"event": "Startup", "gemini_api_key": None}

    assert redact_secrets(None, "info", event)["gemini_api_key"] is None


def test_app_context_added():
    assert add_app_context(None, "info", {"event": "x"})["app"] == "legal-assistant"


def test_redact_secrets_masks_gemini_header():
    event = {"event": "Gemini request", "x-goog-api-key": "AIza-secret"}

    assert redact_secrets(None, "debug", event)["x-goog-api-key"] == REDACTED
