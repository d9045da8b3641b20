"""
API routes for the consultation website (mounted under /api).

- POST /filter-question: classify a question and pick the answer to show
- POST /generate-response: detailed answer for a question and category
- GET /health: service and Gemini status
- GET /list-models: models visible to the configured API key
"""

import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from legal_assistant.api.dependencies import (
    get_llm_client,
    get_question_filter_service,
    get_settings,
)
from legal_assistant.api.error_handlers import MSG_NOT_CONFIGURED, error_response
from legal_assistant.api.models import (
    ErrorResponse,
    FilteredQuestionData,
    FilterQuestionRequest,
    FilterQuestionResponse,
    GeneratedResponseData,
    GenerateResponseRequest,
    GenerateResponseResponse,
    HealthResponse,
    ModelsResponse,
)
from legal_assistant.config import Settings
from legal_assistant.filtering.service import QuestionFilterService
from legal_assistant.llm.base_client import BaseLLMClient

logger = structlog.get_logger(__name__)

router = APIRouter()

AI_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Empty or malformed question"},
    429: {"model": ErrorResponse, "description": "AI provider rate limit reached"},
    502: {"model": ErrorResponse, "description": "AI provider error or unusable answer"},
    503: {"model": ErrorResponse, "description": "AI service not configured or overloaded"},
    504: {"model": ErrorResponse, "description": "AI provider timed out"},
}


@router.post(
    "/filter-question",
    response_model=FilterQuestionResponse,
    status_code=status.HTTP_200_OK,
    summary="Filter a legal question",
    description="""
    Classify a legal question into a category and decide which answer to show.

    The answer comes from the local FAQ table when a canned entry matches,
    otherwise from the model. The whole call is retried on transient
    provider failures (network errors, 5xx, 429).
    """,
    responses=AI_ERROR_RESPONSES,
)
async def filter_question(
    request: FilterQuestionRequest,
    service: QuestionFilterService = Depends(get_question_filter_service),
) -> FilterQuestionResponse:
    logger.info("Filter question request received", question_length=len(request.question))

    result = await service.filter_question_with_retry(request.question)

    return FilterQuestionResponse(
        data=FilteredQuestionData.from_filtered(request.question, result),
    )


@router.post(
    "/generate-response",
    response_model=GenerateResponseResponse,
    summary="Generate a detailed answer",
    responses=AI_ERROR_RESPONSES,
)
async def generate_response(
    request: GenerateResponseRequest,
    service: QuestionFilterService = Depends(get_question_filter_service),
) -> GenerateResponseResponse:
    """Detailed answer written for the given category, retried with the AI preset."""
    logger.info("Generate response request received", category=request.category)

    text = await service.generate_response_with_retry(request.question, request.category)

    return GenerateResponseResponse(
        data=GeneratedResponseData(
            question=request.question,
            category=request.category,
            response=text,
        ),
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="""
    Report service status and whether Gemini is reachable.

    The service itself is always "ok"; gemini is one of ok, unavailable,
    not_configured.
    """,
)
async def health_check(
    settings: Settings = Depends(get_settings),
    llm_client: BaseLLMClient = Depends(get_llm_client),
) -> HealthResponse:
    if not settings.ai_configured:
        gemini_status = "not_configured"
    elif await llm_client.health_check():
        gemini_status = "ok"
    else:
        gemini_status = "unavailable"

    return HealthResponse(status="ok", services={"gemini": gemini_status})


@router.get(
    "/list-models",
    response_model=ModelsResponse,
    summary="List available Gemini models",
    responses={400: {"model": ErrorResponse, "description": "GEMINI_API_KEY not configured"}},
)
async def list_models(
    settings: Settings = Depends(get_settings),
    llm_client: BaseLLMClient = Depends(get_llm_client),
) -> ModelsResponse | JSONResponse:
    if not settings.ai_configured:
        logger.warning("Model listing requested without GEMINI_API_KEY")
        return error_response(status.HTTP_400_BAD_REQUEST, MSG_NOT_CONFIGURED)

    models = await llm_client.list_models()
    return ModelsResponse(models=models)
