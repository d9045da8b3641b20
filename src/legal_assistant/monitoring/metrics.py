"""Custom Prometheus metrics for the Legal Assistant service.

These metrics are exposed at the /metrics endpoint. Alert rules worth having:
- retry_failures_total (terminal failures after the retry executor gave up)
- retries_total (high retry rate means the AI provider is unstable)
- llm_latency_seconds (provider slowness)
"""

from prometheus_client import Counter, Histogram

# === Retry Metrics ===

retries_total = Counter(
    "retries_total",
    "Total retries scheduled by the retry executor",
    ["operation"],
)
"""
Retries scheduled by the executor (one increment per backoff wait).

Labels:
- operation: operation_name from RetryConfig (filter_question, generate_response, ...)
"""

retry_failures_total = Counter(
    "retry_failures_total",
    "Terminal failures propagated by the retry executor",
    ["operation", "reason"],
)
"""
Failures the executor re-raised to the caller.

Labels:
- operation: operation_name from RetryConfig
- reason: exhausted (max_attempts reached), not_retryable (predicate said no)

Alert thresholds:
- WARN: any sustained rate of reason="exhausted"
"""

# === LLM Performance Metrics ===

llm_latency_seconds = Histogram(
    "llm_latency_seconds",
    "LLM generation latency in seconds",
    ["model", "success"],
    buckets=[0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
)
"""
LLM generation latency histogram.

Labels:
- model: Model name (e.g., gemini-2.5-flash-lite)
- success: true (generation succeeded), false (generation failed)
"""

llm_tokens_total = Counter(
    "llm_tokens_total",
    "Total tokens consumed by model and type",
    ["model", "token_type"],
)
"""
Token consumption counter.

Labels:
- model: Model name
- token_type: prompt (input tokens), completion (output tokens)

Used for cost estimation against the provider quota.
"""

# === Question Filtering Metrics ===

questions_filtered_total = Counter(
    "questions_filtered_total",
    "Questions classified by category and answer source",
    ["category", "source"],
)
"""
Filtered questions counter.

Labels:
- category: LegalCategory value (Civil, Penal, ...)
- source: faq (local table), ai (model brief answer), generated (secondary generation),
  none (no automatic answer shown)
"""

faq_matches_total = Counter(
    "faq_matches_total",
    "Local FAQ matches by category",
    ["category"],
)
