"""
Retry configuration.

RetryConfig is an immutable value object; the executor copies its initial
delay into local loop state, so one config can be shared by any number of
concurrent calls.
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

from legal_assistant.retry.policies import ShouldRetry, default_should_retry

OnRetry = Callable[[int, float], None]


@dataclass(frozen=True)
class RetryConfig:
    """
    Retry/backoff parameters for one executor call.

    Attributes:
        max_attempts: Total attempts including the first one (>= 1)
        delay_ms: Delay before the second attempt, in milliseconds
        backoff_multiplier: Factor applied to the delay after every retry
        should_retry: Predicate deciding whether a failure is retryable
        on_retry: Observer called with (attempt, delay_ms) before each wait
        max_delay_ms: Optional upper bound for the delay (None = unbounded)
        operation_name: Label used in logs and metrics
    """

    max_attempts: int = 3
    delay_ms: float = 1000
    backoff_multiplier: float = 2.0
    should_retry: ShouldRetry = default_should_retry
    on_retry: Optional[OnRetry] = None
    max_delay_ms: Optional[float] = None
    operation_name: str = "operation"

    def __post_init__(self) -> None:
        """Validate config invariants."""
        if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int):
            raise ValueError("max_attempts must be an integer")

        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")

        if self.delay_ms < 0:
            raise ValueError("delay_ms must be >= 0")

        if self.backoff_multiplier <= 0:
            raise ValueError("backoff_multiplier must be > 0")

        if self.max_delay_ms is not None and self.max_delay_ms < self.delay_ms:
            raise ValueError("max_delay_ms must be >= delay_ms")

        if not callable(self.should_retry):
            raise ValueError("should_retry must be callable")

        if self.on_retry is not None and not callable(self.on_retry):
            raise ValueError("on_retry must be callable")

    def with_overrides(self, **overrides: Any) -> "RetryConfig":
        """
        Copy of this config with some fields replaced.

        Overrides set to None are ignored, except for the fields where None
        is itself meaningful (on_retry, max_delay_ms).
        """
        nullable = {"on_retry", "max_delay_ms"}
        changes = {
            key: value
            for key, value in overrides.items()
            if value is not None or key in nullable
        }
        if not changes:
            return self
        return replace(self, **changes)

    def next_delay(self, delay_ms: float) -> float:
        """Delay to use after the current one has been waited out."""
        grown = delay_ms * self.backoff_multiplier
        if self.max_delay_ms is not None:
            return min(grown, self.max_delay_ms)
        return grown
