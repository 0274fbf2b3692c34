"""
Module: delivery/retry.py
Description: Retry policy for registration attempts.

Retries 5xx responses, 429 rate limiting and transport failures with
pure exponential backoff (base delay doubled per attempt, no jitter)
until the attempt ceiling is reached. Client errors are never retried.
"""

import asyncio
from typing import Awaitable, Callable

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from zekt_action.exceptions import RetryableDeliveryError
from zekt_action.utils.logger import get_logger

logger = get_logger(__name__)

SleepFn = Callable[[float], Awaitable[None]]


def _log_retry(max_attempts: int) -> Callable[[RetryCallState], None]:
    def log_retry(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception()
        attempt = retry_state.attempt_number
        delay_ms = round(retry_state.next_action.sleep * 1000)

        if getattr(error, "is_network_error", True):
            logger.warning(
                "Network error, retrying registration",
                error=str(error),
                attempt=attempt,
                next_attempt=attempt + 1,
                max_attempts=max_attempts,
                delay_ms=delay_ms
            )
        else:
            logger.warning(
                "Received retryable status from API, retrying registration",
                status_code=error.status_code,
                attempt=attempt,
                next_attempt=attempt + 1,
                max_attempts=max_attempts,
                delay_ms=delay_ms
            )

    return log_retry


def registration_retrying(
    max_attempts: int,
    retry_delay_ms: int,
    sleep: SleepFn = asyncio.sleep
) -> AsyncRetrying:
    """
    Build the retry controller for one registration.

    Args:
        max_attempts: Total number of attempts, including the first
        retry_delay_ms: Delay before the first retry in milliseconds
        sleep: Coroutine used to wait between attempts

    Returns:
        AsyncRetrying that re-raises the last error once attempts run out
    """
    return AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=retry_delay_ms / 1000, exp_base=2, min=0),
        retry=retry_if_exception_type(RetryableDeliveryError),
        before_sleep=_log_retry(max_attempts),
        sleep=sleep,
        reraise=True
    )
