import time
from collections.abc import Callable
from typing import TypeVar

from claimcheck.logging.logger import Log
from claimcheck.validation.exceptions import TransientCallError

T = TypeVar("T")

BackoffFn = Callable[[int], float]
RetryPredicate = Callable[[Exception], bool]


def linear_backoff(base_delay: float) -> BackoffFn:
    """Delay grows with the attempt number: base, 2*base, 3*base..."""

    def backoff(attempt: int) -> float:
        return base_delay * attempt

    return backoff


def is_transient(exc: Exception) -> bool:
    return isinstance(exc, TransientCallError)


def call_with_retry(
    operation: Callable[[], T],
    *,
    max_attempts: int = 3,
    backoff: BackoffFn = linear_backoff(1.0),
    is_retryable: RetryPredicate = is_transient,
    operation_name: str = "call",
) -> T:
    """Run ``operation`` with bounded retries.

    Only errors accepted by ``is_retryable`` are retried; anything else
    propagates immediately. The error of the last attempt propagates once
    ``max_attempts`` is reached.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")
    attempt = 1
    while True:
        try:
            return operation()
        except Exception as exc:
            if not is_retryable(exc):
                raise
            if attempt >= max_attempts:
                Log.error(f"{operation_name} failed after {attempt} attempts: {exc}")
                raise
            delay = backoff(attempt)
            Log.warning(
                f"{operation_name} attempt {attempt}/{max_attempts} failed: {exc}. "
                f"Retrying in {delay:.1f}s"
            )
            time.sleep(delay)
            attempt += 1
