"""
FastAPI API routes and endpoints.

- routes.py: /api endpoints (filter-question, generate-response, health, list-models)
- dependencies.py: Dependency injection for the Gemini client, prompt builder, filtering service
- models.py: API-specific request/response models
- error_handlers.py: Exception handlers for structured error responses
- middleware.py: Request ID tracing
"""

from legal_assistant.api import dependencies, error_handlers, models
from legal_assistant.api.routes import router

__all__ = [
    "router",
    "dependencies",
    "error_handlers",
    "models",
]
