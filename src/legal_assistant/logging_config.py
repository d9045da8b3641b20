"""Structured logging configuration using structlog.

JSON lines in production, coloured console output elsewhere. Stdlib loggers
(uvicorn, httpx) are routed through the same processors so every line
carries the request_id bound by RequestTracingMiddleware.
"""

import logging
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

APP_LABEL = "legal-assistant"

# Keys whose values must never reach the logs
SECRET_KEYS = frozenset({"api_key", "gemini_api_key", "x-goog-api-key", "key", "authorization"})
REDACTED = "***"

NOISY_LOGGERS = ("httpx", "httpcore", "asyncio", "uvicorn.access")


def add_app_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    event_dict["app"] = APP_LABEL
    return event_dict


def redact_secrets(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Mask credential-like fields, such as the Gemini key sent in the x-goog-api-key header."""
    for key in event_dict.keys() & SECRET_KEYS:
        if event_dict[key]:
            event_dict[key] = REDACTED
    return event_dict


def _renderer(is_production: bool) -> Processor:
    if is_production:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(log_level: str = "INFO", environment: str = "development") -> None:
    """Configure structlog and route stdlib logging through it.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        environment: "production" switches to JSON output
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    is_production = environment.lower() == "production"

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_app_context,
        redact_secrets,
    ]
    if is_production:
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_renderer(is_production),
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    # uvicorn --reload re-imports the app
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_level=logging.getLevelName(level),
        environment=environment,
        renderer="json" if is_production else "console",
    )
