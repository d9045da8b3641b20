"""
Unit tests for retryability policies.
"""

import httpx
import pytest

from legal_assistant.filtering.exceptions import ResponseParseError
from legal_assistant.llm.exceptions import (
    LLMAuthenticationError,
    LLMConnectionError,
    LLMGenerationError,
    LLMRateLimitError,
    LLMTimeoutError,
)
from legal_assistant.retry.policies import (
    always_retry,
    default_should_retry,
    extract_status_code,
    is_network_error,
    is_retryable_status,
    never_retry,
    status_from_response,
)


class FakeResponse:
    def __init__(self, status=None, status_code=None):
        if status is not None:
            self.status = status
        if status_code is not None:
            self.status_code = status_code


class ClientFailure(Exception):
    """Failure shaped like a browser-style HTTP client error."""

    def __init__(self, message="", code=None, response=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.response = response


def http_status_error(status_code: int) -> httpx.HTTPStatusError:
    request = httpx.Request("POST", "https://gemini.test/v1beta/models/m:generateContent")
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError("error", request=request, response=response)


class TestIsRetryableStatus:

    @pytest.mark.parametrize("status", [500, 502, 503, 504, 429])
    def test_server_errors_and_rate_limit(self, status):
        assert is_retryable_status(status) is True

    @pytest.mark.parametrize("status", [400, 401, 403, 404, 422, 200, 302])
    def test_other_statuses(self, status):
        assert is_retryable_status(status) is False


class TestDefaultShouldRetry:

    def test_none_is_not_retryable(self):
        assert default_should_retry(None) is False

    def test_network_error_message(self):
        assert default_should_retry(ClientFailure("Network Error")) is True

    def test_connection_aborted_code(self):
        assert default_should_retry(ClientFailure("timeout of 1000ms exceeded", code="ECONNABORTED")) is True

    def test_network_marker_wins_over_response(self):
        failure = ClientFailure("Network Error", response=FakeResponse(status=400))
        assert default_should_retry(failure) is True

    @pytest.mark.parametrize("status,expected", [(500, True), (503, True), (429, True), (400, False), (404, False)])
    def test_response_status_attribute(self, status, expected):
        failure = ClientFailure("Request failed", response=FakeResponse(status=status))
        assert default_should_retry(failure) is expected

    def test_response_mapping(self):
        assert default_should_retry(ClientFailure("x", response={"status": 502})) is True
        assert default_should_retry(ClientFailure("x", response={"status": 401})) is False

    def test_response_without_status_is_not_retryable(self):
        assert default_should_retry(ClientFailure("x", response={"body": "?"})) is False

    def test_error_without_response_info_is_retryable(self):
        assert default_should_retry(ValueError("something odd")) is True

    def test_httpx_transport_errors(self):
        request = httpx.Request("GET", "https://gemini.test")
        assert default_should_retry(httpx.ConnectError("refused", request=request)) is True
        assert default_should_retry(httpx.ReadTimeout("slow", request=request)) is True

    def test_httpx_status_errors(self):
        assert default_should_retry(http_status_error(503)) is True
        assert default_should_retry(http_status_error(429)) is True
        assert default_should_retry(http_status_error(400)) is False

    def test_llm_client_errors(self):
        assert default_should_retry(LLMConnectionError("reset")) is True
        assert default_should_retry(LLMTimeoutError("slow")) is True
        assert default_should_retry(LLMRateLimitError("quota", status_code=429)) is True
        assert default_should_retry(LLMGenerationError("overloaded", status_code=503)) is True
        assert default_should_retry(LLMGenerationError("bad request", status_code=400)) is False
        assert default_should_retry(LLMAuthenticationError("bad key", status_code=403)) is False

    def test_parse_error_is_retryable(self):
        assert default_should_retry(ResponseParseError("no JSON")) is True


class TestHelpers:

    def test_is_network_error(self):
        assert is_network_error(ClientFailure("Network Error")) is True
        assert is_network_error(ClientFailure("Request failed with status code 500")) is False

    def test_status_from_response_variants(self):
        assert status_from_response(FakeResponse(status_code=503)) == 503
        assert status_from_response(FakeResponse(status=429)) == 429
        assert status_from_response({"status_code": 404}) == 404
        assert status_from_response({"status": True}) is None

    def test_extract_status_code(self):
        assert extract_status_code(LLMRateLimitError("quota", status_code=429)) == 429
        assert extract_status_code(http_status_error(500)) == 500
        assert extract_status_code(ValueError("no status")) is None

    def test_trivial_predicates(self):
        assert never_retry(LLMConnectionError("reset")) is False
        assert always_retry(LLMAuthenticationError("bad key", status_code=401)) is True
        assert always_retry(None) is False
