"""
Retryability policies for the retry executor.

A policy is a plain predicate over the failure raised by an operation:
it returns True when the failure looks transient and another attempt is
worth making. The executor never inspects failures itself; it only asks
the configured predicate.

Default classification:
    - no failure information            -> not retryable
    - network-level failure             -> retryable
    - HTTP 5xx or HTTP 429              -> retryable
    - any other HTTP status (4xx, ...)  -> not retryable
    - no HTTP response at all           -> retryable (assumed network-level)
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional

import httpx

ShouldRetry = Callable[[Optional[BaseException]], bool]

NETWORK_ERROR_MESSAGE = "Network Error"
CONNECTION_ABORTED_CODE = "ECONNABORTED"
TOO_MANY_REQUESTS = 429


def is_retryable_status(status: int) -> bool:
    """Server errors and rate limiting are transient; everything else is not."""
    return status >= 500 or status == TOO_MANY_REQUESTS


def is_network_error(error: Any) -> bool:
    """
    Check whether a failure signals a network-level problem.

    Recognises httpx transport errors (connect, read, timeouts, ...) as well
    as errors that carry the conventional "Network Error" message or the
    ECONNABORTED code.
    """
    if isinstance(error, httpx.TransportError):
        return True
    if getattr(error, "message", None) == NETWORK_ERROR_MESSAGE:
        return True
    return getattr(error, "code", None) == CONNECTION_ABORTED_CODE


def status_from_response(response: Any) -> Optional[int]:
    """
    Read an HTTP status from a response-like object.

    Accepts httpx/requests style objects (``status_code``), objects with a
    ``status`` attribute, and plain mappings with a ``status`` key.
    """
    if isinstance(response, Mapping):
        status = response.get("status", response.get("status_code"))
    else:
        status = getattr(response, "status_code", None)
        if status is None:
            status = getattr(response, "status", None)
    if isinstance(status, int) and not isinstance(status, bool):
        return status
    return None


def extract_status_code(error: Any) -> Optional[int]:
    """HTTP status carried by a failure, from ``error.response`` or ``error.status_code``."""
    response = getattr(error, "response", None)
    if response is not None:
        return status_from_response(response)
    status = getattr(error, "status_code", None)
    if isinstance(status, int) and not isinstance(status, bool):
        return status
    return None


def default_should_retry(error: Optional[BaseException]) -> bool:
    """
    Default retryability predicate.

    Args:
        error: Failure raised by the operation (None when nothing is known)

    Returns:
        True if the failure is classified as transient
    """
    if error is None:
        return False

    if is_network_error(error):
        return True

    # A response was received: only its status decides
    response = getattr(error, "response", None)
    if response is not None:
        status = status_from_response(response)
        return status is not None and is_retryable_status(status)

    status = extract_status_code(error)
    if status is not None:
        return is_retryable_status(status)

    # No HTTP response: most likely the request never completed
    return True


def never_retry(error: Optional[BaseException]) -> bool:
    """Predicate that rejects every failure."""
    return False


def always_retry(error: Optional[BaseException]) -> bool:
    """Predicate that retries every failure until attempts run out."""
    return error is not None
