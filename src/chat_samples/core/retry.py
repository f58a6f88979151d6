"""Retry utilities with exponential backoff using tenacity.

The samples report a failed call instead of repeating it, so the default
budget is zero retries. Raising ``CHAT_SAMPLES_MAX_RETRIES`` turns on
exponential backoff with jitter for rate limits and transient failures.
"""

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

from tenacity import (  # type: ignore[attr-defined]
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from chat_samples.core.config import Settings, get_settings
from chat_samples.core.errors import RateLimitError, RetryableError
from chat_samples.core.logging import get_logger

P = ParamSpec("P")
T = TypeVar("T")

logger = get_logger(__name__)


# Exceptions that should trigger a retry
RETRYABLE_EXCEPTIONS: tuple[type[Exception], ...] = (
    RetryableError,
    RateLimitError,
)


def create_retry_decorator(
    max_retries: int | None = None,
    min_wait: float | None = None,
    max_wait: float | None = None,
    retryable_exceptions: tuple[type[Exception], ...] = RETRYABLE_EXCEPTIONS,
    settings: Settings | None = None,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Create a retry decorator.

    Args:
        max_retries: Maximum number of retry attempts. Defaults to settings.
        min_wait: Minimum wait time between retries in seconds.
        max_wait: Maximum wait time between retries in seconds.
        retryable_exceptions: Tuple of exception types to retry on.
        settings: Settings to read defaults from.

    Returns:
        A decorator that adds retry logic to functions.
    """
    settings = settings or get_settings()

    max_retries = max_retries if max_retries is not None else settings.max_retries
    min_wait = min_wait if min_wait is not None else settings.retry_min_wait
    max_wait = max_wait if max_wait is not None else settings.retry_max_wait

    def log_retry(retry_state: Any) -> None:
        exception = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(
            "retry_attempt",
            attempt=retry_state.attempt_number,
            max_attempts=max_retries + 1,
            exception_type=type(exception).__name__ if exception else None,
            exception_message=str(exception) if exception else None,
        )

    return retry(
        stop=stop_after_attempt(max_retries + 1),  # type: ignore[no-untyped-call]
        wait=wait_exponential_jitter(initial=min_wait, max=max_wait, jitter=min_wait),
        retry=retry_if_exception_type(retryable_exceptions),  # type: ignore[no-untyped-call]
        before_sleep=log_retry,
        reraise=True,
    )
