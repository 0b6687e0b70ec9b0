"""
Retry utilities for handling rate limits and transient errors.
"""

import asyncio
import logging
import re
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)


def is_rate_limit_error(exception: Exception) -> bool:
    """Check if an exception looks like an upstream 429 / rate-limit error."""
    status = getattr(exception, "status_code", None)
    if status is None:
        response = getattr(exception, "response", None)
        status = getattr(response, "status_code", None)
    if status == 429:
        return True
    error_str = str(exception).lower()
    return "rate limit" in error_str or "rate_limit" in error_str


def is_transient_error(exception: Exception) -> bool:
    """Check if an exception is a connection-level failure worth retrying."""
    if isinstance(exception, (TimeoutError, asyncio.TimeoutError, ConnectionError)):
        return True
    error_str = str(exception).lower()
    return (
        "connection reset" in error_str
        or "connection timeout" in error_str
        or "temporarily unavailable" in error_str
    )


async def run_with_retry(
    func: Callable[[], Awaitable[Any]],
    max_retries: int = 3,
    initial_delay: float = 5.0,
    backoff_factor: float = 2.0,
    retry_on_rate_limit: bool = True,
) -> Any:
    """
    Execute an async function with retry logic for rate limit and transient errors.

    Args:
        func: Async function to execute (no parameters)
        max_retries: Maximum number of attempts
        initial_delay: Initial delay in seconds before first retry
        backoff_factor: Multiplier for delay between retries
        retry_on_rate_limit: Whether to retry on rate limit errors

    Returns:
        Result from the function

    Raises:
        Exception: If max retries exceeded or non-retryable error occurs
    """
    last_exception: Exception | None = None

    for attempt in range(max_retries):
        try:
            return await func()
        except Exception as e:
            last_exception = e

            is_rate_limit = is_rate_limit_error(e)
            should_retry = retry_on_rate_limit and (is_rate_limit or is_transient_error(e))

            if should_retry and attempt < max_retries - 1:
                wait_time_match = re.search(r"(\d+)\s{0,10}seconds?", str(e), re.IGNORECASE)
                if wait_time_match:
                    wait_time = float(wait_time_match.group(1))
                else:
                    wait_time = initial_delay * (backoff_factor**attempt)

                error_type = "rate limit" if is_rate_limit else "connection/timeout"
                logger.warning(
                    "Transient %s error detected (%s). Attempt %s/%s. Waiting %.1f seconds before retry...",
                    error_type,
                    e,
                    attempt + 1,
                    max_retries,
                    wait_time,
                )
                await asyncio.sleep(wait_time)
                continue

            # If not retryable or max retries reached, raise the exception
            raise

    # If we exhausted retries, raise the last exception
    if last_exception:
        raise last_exception
    raise RuntimeError("Max retries exceeded")
