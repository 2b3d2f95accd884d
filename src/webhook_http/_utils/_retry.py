import logging
from typing import Awaitable, Callable, TypeVar

from tenacity import AsyncRetrying, before_sleep_log, stop_after_attempt

from .constants import DEFAULT_RETRY_ATTEMPTS, LOGGER_NAME

T = TypeVar("T")

logger = logging.getLogger(LOGGER_NAME)


async def retry_on_fail(
    operation: Callable[[], Awaitable[T]],
    *,
    attempts: int = DEFAULT_RETRY_ATTEMPTS,
) -> T:
    """Run ``operation`` until it succeeds or the attempt budget is spent.

    Every exception is retried the same way, immediately and without backoff.
    Once ``attempts`` calls have failed, the last exception is re-raised
    unchanged. Attempts are strictly sequential.

    Args:
        operation: Zero-argument coroutine function. It is called once per
            attempt, so each attempt builds its own request.
        attempts: Total number of calls, including the first one.

    Returns:
        The result of the first successful call.
    """
    if attempts < 1:
        raise ValueError(f"attempts must be at least 1, got {attempts}")

    retrying = AsyncRetrying(
        stop=stop_after_attempt(attempts),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    async for attempt in retrying:
        with attempt:
            result = await operation()
    return result
