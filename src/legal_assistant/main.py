"""
FastAPI application entry point for the Legal Assistant service.
"""

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from legal_assistant.api.dependencies import get_llm_client
from legal_assistant.api.error_handlers import EXCEPTION_HANDLERS
from legal_assistant.api.middleware import RequestTracingMiddleware
from legal_assistant.api.models import RootResponse
from legal_assistant.api.routes import router as api_router
from legal_assistant.config import settings
from legal_assistant.logging_config import configure_logging

# Configure structured logging before any other imports
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Legal question filtering with Gemini and a local FAQ table",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Request tracing middleware (must be first for request_id in all logs)
app.add_middleware(RequestTracingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=sorted({settings.FRONTEND_URL, *settings.CORS_ORIGINS}),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Register exception handlers
for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

# Include routers
app.include_router(api_router, prefix="/api", tags=["api"])


# Startup event
@app.on_event("startup")
async def startup():
    """Application startup - report configuration."""
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        model=settings.GEMINI_MODEL,
        retry_max_attempts=settings.AI_RETRY_MAX_ATTEMPTS,
    )

    if not settings.ai_configured:
        logger.warning("GEMINI_API_KEY not configured, AI endpoints will answer 503")

    logger.info("Application startup complete")


# Shutdown event
@app.on_event("shutdown")
async def shutdown():
    """Application shutdown - close the pooled Gemini connection."""
    logger.info("Application shutdown")
    await get_llm_client().close()
    logger.info("Application shutdown complete")


# Prometheus metrics instrumentation
if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


@app.get("/", response_model=RootResponse)
async def root():
    """Service banner."""
    return RootResponse(
        message="Bufete Jurídico Backend",
        version=settings.APP_VERSION,
        status="running",
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "legal_assistant.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Only for development
    )
