"""
Retry executor with exponential backoff.

Re-invokes a failable async operation until it succeeds, the configured
predicate rejects a failure, or the attempts run out. Attempts are strictly
sequential and the wait between them is a non-blocking ``asyncio.sleep``,
so the event loop keeps serving other requests meanwhile.

Failure propagation:
    The exception reaching the caller is always the one raised by the last
    attempt, re-raised as-is (same type, same fields). The executor only
    adds a ``retry_attempts`` attribute with the number of invocations made,
    so callers can tell an exhausted retry from a first-attempt failure.

Usage:
    >>> from legal_assistant.retry import execute_with_retry
    >>> result = await execute_with_retry(
    ...     lambda: service.filter_question(question),
    ...     max_attempts=3,
    ...     delay_ms=1000,
    ... )
"""

import asyncio
from typing import Any, Awaitable, Callable, Optional, TypeVar

import structlog

from legal_assistant.monitoring.metrics import retries_total, retry_failures_total
from legal_assistant.retry.config import RetryConfig

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def resolve_config(config: Optional[RetryConfig], overrides: dict[str, Any]) -> RetryConfig:
    """Merge an optional base config with keyword overrides."""
    base = config if config is not None else RetryConfig()
    return base.with_overrides(**overrides)


def _mark_attempts(error: BaseException, attempts: int) -> None:
    try:
        error.retry_attempts = attempts  # type: ignore[attr-defined]
    except (AttributeError, TypeError):
        # Exceptions with __slots__ cannot carry the annotation
        logger.debug("Could not annotate failure with attempt count", error_type=type(error).__name__)


def _notify_retry(config: RetryConfig, attempt: int, delay_ms: float) -> None:
    if config.on_retry is None:
        return
    try:
        config.on_retry(attempt, delay_ms)
    except Exception:
        # Observers never change the retry decision
        logger.exception(
            "on_retry observer raised",
            operation=config.operation_name,
            attempt=attempt,
        )


async def execute_with_retry(
    operation: Callable[[], Awaitable[T]],
    config: Optional[RetryConfig] = None,
    **overrides: Any,
) -> T:
    """
    Run ``operation`` with retry and exponential backoff.

    Args:
        operation: Zero-argument callable returning an awaitable
        config: Base RetryConfig (defaults: 3 attempts, 1000ms, x2)
        **overrides: Any RetryConfig field to override for this call

    Returns:
        The result of the first successful attempt

    Raises:
        Exception: The last attempt's failure, unchanged, when attempts are
            exhausted or ``should_retry`` rejects it
    """
    config = resolve_config(config, overrides)
    delay_ms = config.delay_ms

    for attempt in range(1, config.max_attempts + 1):
        try:
            result = await operation()
        except Exception as error:
            if attempt == config.max_attempts:
                _mark_attempts(error, attempt)
                retry_failures_total.labels(
                    operation=config.operation_name, reason="exhausted"
                ).inc()
                if config.max_attempts > 1:
                    logger.error(
                        "All retry attempts failed",
                        operation=config.operation_name,
                        attempts=attempt,
                        error_type=type(error).__name__,
                        error=str(error),
                    )
                raise

            if not config.should_retry(error):
                _mark_attempts(error, attempt)
                retry_failures_total.labels(
                    operation=config.operation_name, reason="not_retryable"
                ).inc()
                logger.info(
                    "Failure is not retryable",
                    operation=config.operation_name,
                    attempt=attempt,
                    error_type=type(error).__name__,
                )
                raise

            _notify_retry(config, attempt, delay_ms)

            logger.warning(
                f"Attempt {attempt} of {config.max_attempts} failed, retrying in {delay_ms:g}ms",
                operation=config.operation_name,
                attempt=attempt,
                max_attempts=config.max_attempts,
                delay_ms=delay_ms,
                error_type=type(error).__name__,
            )
            retries_total.labels(operation=config.operation_name).inc()

            await asyncio.sleep(delay_ms / 1000)
            delay_ms = config.next_delay(delay_ms)
        else:
            if attempt > 1:
                logger.info(
                    "Operation succeeded after retry",
                    operation=config.operation_name,
                    attempt=attempt,
                )
            return result

    # max_attempts >= 1 guarantees the loop returns or raises
    raise RuntimeError("Retry loop exited without a result")


async def retry_sync(
    fn: Callable[[], T],
    config: Optional[RetryConfig] = None,
    **overrides: Any,
) -> T:
    """
    Run a synchronous callable through the retry executor.

    The callable runs on the event loop thread; keep it short.
    """

    async def _call() -> T:
        return fn()

    return await execute_with_retry(_call, config, **overrides)
