"""
Retry utilities for handling transient failures.

Uses tenacity for retry logic with exponential backoff.
"""

import asyncio
from functools import wraps
from typing import Any, Callable, Optional, Type

from sqlalchemy.exc import DisconnectionError, OperationalError
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from config import settings
from config.logging_config import get_logger

logger = get_logger(__name__)


# Errors worth another attempt: locked SQLite files, dropped connections
RETRIABLE_EXCEPTIONS: tuple[Type[Exception], ...] = (
    OperationalError,
    DisconnectionError,
    ConnectionError,
    TimeoutError,
    asyncio.TimeoutError,
)


def _log_retry(retry_state) -> None:
    logger.warning(
        "Retrying after error",
        func=getattr(retry_state.fn, "__name__", "unknown"),
        attempt=retry_state.attempt_number,
        error=str(retry_state.outcome.exception()),
    )


def with_async_retry(
    max_attempts: Optional[int] = None,
    wait_seconds: Optional[float] = None,
    max_wait_seconds: Optional[float] = None,
    exceptions: tuple[Type[Exception], ...] = RETRIABLE_EXCEPTIONS,
):
    """
    Decorator for async functions that should be retried on failure.

    Uses exponential backoff between attempts. Defaults come from the
    store settings and are read when the wrapped function is called.

    Args:
        max_attempts: Maximum number of attempts
        wait_seconds: Initial wait time between retries
        max_wait_seconds: Maximum wait time between retries
        exceptions: Tuple of exception types to retry on

    Usage:
        @with_async_retry(max_attempts=3)
        async def load_all():
            ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            attempts = max_attempts or settings.store.retry_attempts
            wait = settings.store.retry_wait_seconds if wait_seconds is None else wait_seconds
            max_wait = (
                settings.store.retry_max_wait_seconds
                if max_wait_seconds is None
                else max_wait_seconds
            )

            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(attempts),
                wait=wait_exponential(multiplier=wait, max=max_wait),
                retry=retry_if_exception_type(exceptions),
                before_sleep=_log_retry,
                reraise=True,
            ):
                with attempt:
                    return await func(*args, **kwargs)
        return wrapper
    return decorator
