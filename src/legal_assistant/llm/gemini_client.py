"""
Gemini client implementation for LLM inference.

Communicates with the Gemini REST API (v1beta) using httpx AsyncClient:
- POST /models/{model}:generateContent
- GET /models

The client performs a single HTTP call per generate(); retries are the
caller's business (the question filtering call is retried as one unit).
"""

import json
import time
from typing import Any, Optional
import httpx
import structlog

from legal_assistant.llm.base_client import BaseLLMClient
from legal_assistant.llm.exceptions import (
    LLMAuthenticationError,
    LLMConnectionError,
    LLMGenerationError,
    LLMModelNotAvailableError,
    LLMRateLimitError,
    LLMTimeoutError,
)
from legal_assistant.models.llm_models import LLMGenerationRequest, LLMGenerationResponse
from legal_assistant.monitoring.metrics import llm_latency_seconds, llm_tokens_total


logger = structlog.get_logger(__name__)

API_KEY_HEADER = "x-goog-api-key"


def _error_message(response: httpx.Response) -> str:
    """Best-effort extraction of the provider's error message."""
    try:
        payload = response.json()
    except (json.JSONDecodeError, ValueError):
        return response.text[:500]
    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict):
        return str(error.get("message") or error.get("status") or "")
    return response.text[:500]


def raise_for_provider_status(response: httpx.Response, model: str) -> None:
    """
    Translate a non-2xx provider response into an LLMClientError subclass.

    The HTTP status is kept on the exception (``status_code``) so the retry
    policy can classify it.
    """
    status_code = response.status_code
    if status_code < 400:
        return

    message = _error_message(response)
    details = {"status": status_code, "model": model, "error": message}

    if status_code == 429:
        raise LLMRateLimitError(
            f"Gemini rate limit or quota exceeded: {message}",
            details=details,
            status_code=status_code,
        )
    if status_code in (401, 403):
        raise LLMAuthenticationError(
            f"Gemini rejected the API key: {message}",
            details=details,
            status_code=status_code,
        )
    if status_code == 404:
        raise LLMModelNotAvailableError(
            f"Model not found: {model}",
            details=details,
            status_code=status_code,
        )
    if status_code >= 500:
        raise LLMGenerationError(
            f"Gemini server error {status_code}: {message}",
            details=details,
            status_code=status_code,
        )
    raise LLMGenerationError(
        f"Gemini client error {status_code}: {message}",
        details=details,
        status_code=status_code,
    )


class GeminiClient(BaseLLMClient):
    """
    Gemini-specific LLM client using httpx for async HTTP communication.

    Features:
    - Connection pooling via persistent AsyncClient
    - JSON output via responseMimeType
    - Token usage and latency metrics
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        model: str = "gemini-2.5-flash-lite",
        timeout: int = 30,
        connection_limits: Optional[httpx.Limits] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **kwargs
    ):
        """
        Initialize Gemini client.

        Args:
            api_key: Gemini API key (None leaves the client unusable until set)
            base_url: Gemini REST API root
            model: Default model name
            timeout: Request timeout in seconds
            connection_limits: httpx connection pool limits (default: 10 max connections)
            transport: Custom httpx transport (tests use httpx.MockTransport)
            **kwargs: Additional config
        """
        super().__init__(base_url, timeout, **kwargs)
        self.api_key = api_key
        self.default_model = model

        if connection_limits is None:
            connection_limits = httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
                keepalive_expiry=30.0
            )

        self._client: Optional[httpx.AsyncClient] = None
        self._connection_limits = connection_limits
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                limits=self._connection_limits,
                transport=self._transport,
                headers={API_KEY_HEADER: self.api_key or ""},
            )
            logger.debug("Created new httpx AsyncClient")
        return self._client

    def _build_payload(self, request: LLMGenerationRequest) -> dict[str, Any]:
        generation_config: dict[str, Any] = {
            "temperature": request.temperature,
            "maxOutputTokens": request.max_tokens,
        }
        if request.top_p is not None:
            generation_config["topP"] = request.top_p
        if request.stop_sequences:
            generation_config["stopSequences"] = request.stop_sequences
        if request.response_mime_type:
            generation_config["responseMimeType"] = request.response_mime_type

        return {
            "contents": [{"role": "user", "parts": [{"text": request.prompt}]}],
            "generationConfig": generation_config,
        }

    async def generate(self, request: LLMGenerationRequest) -> LLMGenerationResponse:
        """
        Generate content using the Gemini API.

        Response shape:
        {
            "candidates": [{"content": {"parts": [{"text": "..."}]}, "finishReason": "STOP"}],
            "usageMetadata": {"promptTokenCount": 50, "candidatesTokenCount": 150, "totalTokenCount": 200},
            "modelVersion": "gemini-2.5-flash-lite"
        }
        """
        start_time = time.time()
        payload = self._build_payload(request)

        logger.info(
            "Sending generation request to Gemini",
            model=request.model,
            prompt_length=len(request.prompt),
            temperature=request.temperature,
            max_tokens=request.max_tokens,
        )

        try:
            client = await self._get_client()
            response = await client.post(
                f"/models/{request.model}:generateContent",
                json=payload,
            )
        except httpx.TimeoutException as e:
            llm_latency_seconds.labels(model=request.model, success="false").observe(time.time() - start_time)
            logger.warning("Gemini request timeout", timeout=self.timeout, error=str(e))
            raise LLMTimeoutError(
                f"Request timeout after {self.timeout}s",
                details={"timeout": self.timeout},
            ) from e
        except httpx.TransportError as e:
            llm_latency_seconds.labels(model=request.model, success="false").observe(time.time() - start_time)
            logger.warning("Gemini network error", error=str(e), error_type=type(e).__name__)
            raise LLMConnectionError(
                f"Network error: {str(e)}",
                details={"error_type": type(e).__name__},
            ) from e

        if response.status_code >= 400:
            llm_latency_seconds.labels(model=request.model, success="false").observe(time.time() - start_time)
            logger.error(
                "Gemini HTTP error",
                status_code=response.status_code,
                model=request.model,
            )
            raise_for_provider_status(response, request.model)

        try:
            data = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            logger.error("Failed to parse Gemini response JSON", error=str(e))
            raise LLMGenerationError(
                "Invalid JSON response from Gemini",
                details={"parse_error": str(e)},
                status_code=response.status_code,
            ) from e

        latency_ms = int((time.time() - start_time) * 1000)
        content, finish_reason = self._extract_content(data)
        model_version = data.get("modelVersion", request.model)

        if not content:
            llm_latency_seconds.labels(model=model_version, success="false").observe(latency_ms / 1000.0)
            raise LLMGenerationError(
                "Empty response from Gemini",
                details={
                    "finish_reason": finish_reason,
                    "prompt_feedback": data.get("promptFeedback"),
                },
                # 2xx status: not retryable
                status_code=response.status_code,
            )

        usage = data.get("usageMetadata") or {}
        prompt_tokens = usage.get("promptTokenCount")
        completion_tokens = usage.get("candidatesTokenCount")
        total_tokens = usage.get("totalTokenCount")

        logger.info(
            "Gemini generation successful",
            model=model_version,
            latency_ms=latency_ms,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            finish_reason=finish_reason,
        )

        llm_latency_seconds.labels(model=model_version, success="true").observe(latency_ms / 1000.0)
        if prompt_tokens:
            llm_tokens_total.labels(model=model_version, token_type="prompt").inc(prompt_tokens)
        if completion_tokens:
            llm_tokens_total.labels(model=model_version, token_type="completion").inc(completion_tokens)

        return LLMGenerationResponse(
            content=content,
            model_version=model_version,
            finish_reason=finish_reason,
            usage_tokens=total_tokens,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            latency_ms=latency_ms,
            raw_metadata={"response_id": data.get("responseId")},
        )

    @staticmethod
    def _extract_content(data: dict) -> tuple[str, str]:
        """Concatenate the text parts of the first candidate."""
        candidates = data.get("candidates") or []
        if not candidates:
            return "", "NO_CANDIDATES"
        first = candidates[0]
        parts = (first.get("content") or {}).get("parts") or []
        text = "".join(part.get("text", "") for part in parts if isinstance(part, dict))
        return text, first.get("finishReason", "UNKNOWN")

    async def health_check(self) -> bool:
        """
        Check Gemini reachability via GET /models.

        Returns True if the API answers 200, False otherwise.
        """
        if not self.configured:
            return False
        try:
            client = await self._get_client()
            response = await client.get("/models", params={"pageSize": 1}, timeout=5.0)
            response.raise_for_status()
            return True
        except httpx.HTTPError as e:
            logger.warning("Gemini health check failed", error=str(e))
            return False

    async def list_models(self) -> list[dict]:
        """
        List models via GET /models.

        Returns:
            Raw model descriptors (name, displayName, supportedGenerationMethods, ...)
        """
        try:
            client = await self._get_client()
            response = await client.get("/models")
        except httpx.TransportError as e:
            raise LLMConnectionError(
                f"Failed to list models: {str(e)}",
                details={"error_type": type(e).__name__},
            ) from e

        raise_for_provider_status(response, self.default_model)
        models = response.json().get("models", [])
        logger.debug("Listed available models", count=len(models))
        return models

    async def close(self):
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed Gemini client connection")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
