"""
FastAPI exception handlers for structured error responses.

Maps domain exceptions to HTTP status codes and the Spanish messages shown
on the website. Every body has the shape::

    {"success": false, "error": "<message>", "attempts": <n, when the retry executor ran>}
"""

from typing import Any

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from legal_assistant.api.models import ErrorResponse
from legal_assistant.filtering.exceptions import (
    AIServiceNotConfiguredError,
    InvalidQuestionError,
    ResponseParseError,
)
from legal_assistant.llm.exceptions import (
    LLMAuthenticationError,
    LLMClientError,
    LLMConnectionError,
    LLMGenerationError,
    LLMModelNotAvailableError,
    LLMRateLimitError,
    LLMTimeoutError,
)

logger = structlog.get_logger(__name__)

MSG_INVALID_QUESTION = "La pregunta es obligatoria y debe ser un texto."
MSG_NOT_CONFIGURED = (
    "El servicio de IA no está disponible en este momento. Por favor, contacta al administrador."
)
MSG_MODEL_NOT_AVAILABLE = "El modelo de IA no está disponible. Por favor, contacta al administrador."
MSG_RATE_LIMITED = "Se ha alcanzado el límite de consultas. Por favor, intenta más tarde."
MSG_OVERLOADED = (
    "El servicio de IA está temporalmente sobrecargado. Por favor, intenta de nuevo en unos segundos."
)
MSG_TIMEOUT = "El servicio de IA tardó demasiado en responder. Por favor, intenta de nuevo."
MSG_CONNECTION = "No se pudo conectar con el servicio de IA. Por favor, intenta de nuevo."
MSG_PARSE = "No se pudo interpretar la respuesta del servicio de IA. Por favor, intenta de nuevo."
MSG_GENERIC = "Error al procesar la consulta. Por favor, intenta de nuevo."


def error_response(status_code: int, message: str, exc: Exception | None = None) -> JSONResponse:
    """Build the error envelope, adding the attempt count left by the retry executor."""
    attempts = getattr(exc, "retry_attempts", None) if exc is not None else None
    body = ErrorResponse(error=message, attempts=attempts)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _log_fields(exc: Exception) -> dict[str, Any]:
    return {
        "error_type": type(exc).__name__,
        "error": getattr(exc, "message", str(exc)),
        "details": getattr(exc, "details", None) or None,
        "attempts": getattr(exc, "retry_attempts", None),
    }


async def invalid_question_handler(request: Request, exc: InvalidQuestionError) -> JSONResponse:
    """Empty question: 400 Bad Request."""
    logger.info("Invalid question", path=request.url.path)
    return error_response(status.HTTP_400_BAD_REQUEST, MSG_INVALID_QUESTION, exc)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle malformed request bodies (missing or non-string fields).

    Maps to 400 Bad Request (client error).
    """
    logger.warning("Invalid request format", path=request.url.path, errors=exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST, MSG_INVALID_QUESTION)


async def not_configured_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Missing or rejected API key.

    Maps to 503 Service Unavailable: nothing the visitor can do about it.
    """
    logger.error("AI service not available", **_log_fields(exc))
    return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, MSG_NOT_CONFIGURED, exc)


async def rate_limit_handler(request: Request, exc: LLMRateLimitError) -> JSONResponse:
    logger.warning("AI provider rate limit", **_log_fields(exc))
    return error_response(status.HTTP_429_TOO_MANY_REQUESTS, MSG_RATE_LIMITED, exc)


async def model_not_available_handler(
    request: Request, exc: LLMModelNotAvailableError
) -> JSONResponse:
    logger.error("AI model not available", **_log_fields(exc))
    return error_response(status.HTTP_502_BAD_GATEWAY, MSG_MODEL_NOT_AVAILABLE, exc)


async def generation_error_handler(request: Request, exc: LLMGenerationError) -> JSONResponse:
    """
    Provider-reported errors.

    An overloaded provider (503 or "overloaded" in the message) answers 503,
    any other provider failure 502 Bad Gateway.
    """
    logger.error("AI generation error", status_code=exc.status_code, **_log_fields(exc))
    if exc.status_code == 503 or "overload" in exc.message.lower():
        return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, MSG_OVERLOADED, exc)
    return error_response(status.HTTP_502_BAD_GATEWAY, MSG_GENERIC, exc)


async def llm_timeout_error_handler(request: Request, exc: LLMTimeoutError) -> JSONResponse:
    """
    Handle LLM timeout errors.

    Maps to 504 Gateway Timeout (upstream service timeout).
    """
    logger.error("LLM timeout error", **_log_fields(exc))
    return error_response(status.HTTP_504_GATEWAY_TIMEOUT, MSG_TIMEOUT, exc)


async def llm_connection_error_handler(request: Request, exc: LLMConnectionError) -> JSONResponse:
    """
    Handle LLM connection errors.

    Maps to 502 Bad Gateway (upstream service unavailable).
    """
    logger.error("LLM connection error", **_log_fields(exc))
    return error_response(status.HTTP_502_BAD_GATEWAY, MSG_CONNECTION, exc)


async def llm_client_error_handler(request: Request, exc: LLMClientError) -> JSONResponse:
    logger.error("LLM client error", **_log_fields(exc))
    return error_response(status.HTTP_502_BAD_GATEWAY, MSG_GENERIC, exc)


async def response_parse_error_handler(request: Request, exc: ResponseParseError) -> JSONResponse:
    """Unparseable model output: 502 Bad Gateway."""
    logger.warning("Model response could not be parsed", **_log_fields(exc))
    return error_response(status.HTTP_502_BAD_GATEWAY, MSG_PARSE, exc)


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.

    Maps to 500 Internal Server Error.
    """
    logger.exception("Unexpected error", error_type=type(exc).__name__)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, MSG_GENERIC, exc)


# Exception handler mapping for FastAPI app.add_exception_handler()
# Starlette picks the handler of the most specific class in the MRO.
EXCEPTION_HANDLERS = {
    InvalidQuestionError: invalid_question_handler,
    RequestValidationError: request_validation_error_handler,
    AIServiceNotConfiguredError: not_configured_handler,
    LLMAuthenticationError: not_configured_handler,
    LLMRateLimitError: rate_limit_handler,
    LLMModelNotAvailableError: model_not_available_handler,
    LLMGenerationError: generation_error_handler,
    LLMTimeoutError: llm_timeout_error_handler,
    LLMConnectionError: llm_connection_error_handler,
    LLMClientError: llm_client_error_handler,
    ResponseParseError: response_parse_error_handler,
    Exception: generic_error_handler,
}
