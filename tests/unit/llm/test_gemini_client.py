"""
Unit tests for GeminiClient.

HTTP traffic is served by httpx.MockTransport; no network access.
"""

import json

import httpx
import pytest

from legal_assistant.llm.exceptions import (
    LLMAuthenticationError,
    LLMConnectionError,
    LLMGenerationError,
    LLMModelNotAvailableError,
    LLMRateLimitError,
    LLMTimeoutError,
)
from legal_assistant.llm.gemini_client import GeminiClient
from legal_assistant.models.llm_models import LLMGenerationRequest
from legal_assistant.retry.policies import default_should_retry

BASE_URL = "https://gemini.test/v1beta"


def gemini_body(text: str = '{"category": "Civil"}') -> dict:
    return {
        "candidates": [
            {"content": {"parts": [{"text": text}], "role": "model"}, "finishReason": "STOP"}
        ],
        "usageMetadata": {"promptTokenCount": 50, "candidatesTokenCount": 20, "totalTokenCount": 70},
        "modelVersion": "gemini-2.5-flash-lite-001",
        "responseId": "resp-1",
    }


def make_client(handler, api_key: str | None = "test-key") -> GeminiClient:
    return GeminiClient(
        api_key=api_key,
        base_url=BASE_URL,
        model="gemini-2.5-flash-lite",
        timeout=5,
        transport=httpx.MockTransport(handler),
    )


def make_request(**kwargs) -> LLMGenerationRequest:
    defaults = {"prompt": "Clasifica esta pregunta", "model": "gemini-2.5-flash-lite"}
    defaults.update(kwargs)
    return LLMGenerationRequest(**defaults)


class TestGenerate:

    @pytest.mark.asyncio
    async def test_successful_generation(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["api_key"] = request.headers.get("x-goog-api-key")
            captured["payload"] = json.loads(request.content)
            return httpx.Response(200, json=gemini_body("hola"))

        async with make_client(handler) as client:
            response = await client.generate(make_request(response_mime_type="application/json"))

        assert response.content == "hola"
        assert response.model_version == "gemini-2.5-flash-lite-001"
        assert response.finish_reason == "STOP"
        assert response.prompt_tokens == 50
        assert response.completion_tokens == 20
        assert response.usage_tokens == 70

        assert captured["url"] == f"{BASE_URL}/models/gemini-2.5-flash-lite:generateContent"
        assert captured["api_key"] == "test-key"
        payload = captured["payload"]
        assert payload["contents"][0]["parts"][0]["text"] == "Clasifica esta pregunta"
        assert payload["generationConfig"]["temperature"] == 0.3
        assert payload["generationConfig"]["maxOutputTokens"] == 500
        assert payload["generationConfig"]["responseMimeType"] == "application/json"

    @pytest.mark.asyncio
    async def test_multiple_parts_are_concatenated(self):
        body = gemini_body()
        body["candidates"][0]["content"]["parts"] = [{"text": "uno "}, {"text": "dos"}]

        async with make_client(lambda request: httpx.Response(200, json=body)) as client:
            response = await client.generate(make_request())

        assert response.content == "uno dos"

    @pytest.mark.asyncio
    async def test_empty_candidates_raise_generation_error(self):
        body = {"candidates": [], "promptFeedback": {"blockReason": "SAFETY"}}

        async with make_client(lambda request: httpx.Response(200, json=body)) as client:
            with pytest.raises(LLMGenerationError) as exc_info:
                await client.generate(make_request())

        assert exc_info.value.status_code == 200
        assert exc_info.value.details["prompt_feedback"] == {"blockReason": "SAFETY"}
        # A blocked prompt is not sent again
        assert default_should_retry(exc_info.value) is False

    @pytest.mark.asyncio
    async def test_invalid_json_body(self):
        async with make_client(lambda request: httpx.Response(200, text="<html>")) as client:
            with pytest.raises(LLMGenerationError, match="Invalid JSON"):
                await client.generate(make_request())

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status,exc_class", [
        (429, LLMRateLimitError),
        (401, LLMAuthenticationError),
        (403, LLMAuthenticationError),
        (404, LLMModelNotAvailableError),
        (500, LLMGenerationError),
        (503, LLMGenerationError),
        (400, LLMGenerationError),
    ])
    async def test_http_errors_keep_status(self, status, exc_class):
        error_body = {"error": {"code": status, "message": "The model is overloaded.", "status": "UNAVAILABLE"}}

        async with make_client(lambda request: httpx.Response(status, json=error_body)) as client:
            with pytest.raises(exc_class) as exc_info:
                await client.generate(make_request())

        assert exc_info.value.status_code == status
        assert exc_info.value.details["status"] == status

    @pytest.mark.asyncio
    async def test_timeout_maps_to_llm_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        async with make_client(handler) as client:
            with pytest.raises(LLMTimeoutError) as exc_info:
                await client.generate(make_request())

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_network_error_maps_to_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(LLMConnectionError) as exc_info:
                await client.generate(make_request())

        assert not isinstance(exc_info.value, LLMTimeoutError)
        assert exc_info.value.details["error_type"] == "ConnectError"


class TestHealthAndModels:

    @pytest.mark.asyncio
    async def test_health_check_ok(self):
        async with make_client(lambda request: httpx.Response(200, json={"models": []})) as client:
            assert await client.health_check() is True

    @pytest.mark.asyncio
    async def test_health_check_error_status(self):
        async with make_client(lambda request: httpx.Response(500, json={})) as client:
            assert await client.health_check() is False

    @pytest.mark.asyncio
    async def test_health_check_without_key_skips_call(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={})

        async with make_client(handler, api_key=None) as client:
            assert client.configured is False
            assert await client.health_check() is False

        assert calls == []

    @pytest.mark.asyncio
    async def test_list_models(self):
        models = [{"name": "models/gemini-2.5-flash-lite"}, {"name": "models/gemini-2.5-pro"}]

        async with make_client(lambda request: httpx.Response(200, json={"models": models})) as client:
            assert await client.list_models() == models

    @pytest.mark.asyncio
    async def test_list_models_rejected_key(self):
        async with make_client(lambda request: httpx.Response(403, json={"error": {"message": "denied"}})) as client:
            with pytest.raises(LLMAuthenticationError):
                await client.list_models()


def test_blank_key_is_not_configured():
    client = GeminiClient(api_key="   ")
    assert client.configured is False
