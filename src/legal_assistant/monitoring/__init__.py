"""Monitoring and metrics instrumentation for the Legal Assistant service.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from legal_assistant.monitoring.metrics import (
    faq_matches_total,
    llm_latency_seconds,
    llm_tokens_total,
    questions_filtered_total,
    retries_total,
    retry_failures_total,
)

__all__ = [
    "retries_total",
    "retry_failures_total",
    "llm_latency_seconds",
    "llm_tokens_total",
    "questions_filtered_total",
    "faq_matches_total",
]
