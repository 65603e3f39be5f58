"""
Error handling utilities for Wayfarer.

This module provides the exception hierarchy shared across the application
and a retry decorator for upstream HTTP calls.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar, cast

from loguru import logger
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

# Type variables for function decorator typing
F = TypeVar("F", bound=Callable[..., Any])

# Status codes worth another attempt
RETRYABLE_STATUS_CODES = (429, 500, 502, 503, 504)


class WayfarerError(Exception):
    """Base exception class for all Wayfarer errors."""

    def __init__(self, message: str, original_error: Exception | None = None):
        """
        Initialize a WayfarerError.

        Args:
            message: Error message
            original_error: The original exception that caused this error (optional)
        """
        self.original_error = original_error
        if original_error:
            message = f"{message} - Original error: {original_error!s}"
        super().__init__(message)


class UpstreamError(WayfarerError):
    """Error raised when an upstream service call fails or returns nothing usable."""

    def __init__(
        self,
        message: str,
        service_name: str,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ):
        """
        Initialize an UpstreamError.

        Args:
            message: Error message
            service_name: Name of the upstream service
            status_code: HTTP status code (optional)
            original_error: The original exception that caused this error (optional)
        """
        self.service_name = service_name
        self.status_code = status_code
        status_str = f" (status: {status_code})" if status_code else ""
        full_message = f"Error in {service_name} API{status_str}: {message}"
        super().__init__(full_message, original_error)


class ParseError(WayfarerError):
    """Error raised when generated text holds no valid structured payload."""

    pass


class MissingInputError(WayfarerError):
    """Error raised when caller-supplied parameters are absent or invalid."""

    pass


class UnauthenticatedError(WayfarerError):
    """Error raised when an operation needs an identity and none is present."""

    pass


class FallbackFailure(WayfarerError):
    """Error raised when deterministic fallback synthesis itself fails."""

    pass


def _is_retryable(exception: BaseException) -> bool:
    if isinstance(exception, UpstreamError):
        return exception.status_code is None or (
            exception.status_code in RETRYABLE_STATUS_CODES
        )
    return False


def before_sleep_callback(retry_state: RetryCallState) -> None:
    """
    Callback executed before sleeping between retries.

    Args:
        retry_state: Current retry state
    """
    exception = retry_state.outcome.exception()
    if exception:
        logger.warning(
            f"Request failed (attempt {retry_state.attempt_number}/"
            f"{retry_state.retry_object.stop.max_attempt_number}), "
            f"retrying in {retry_state.next_action.sleep:.2f} seconds: {exception!s}"
        )


def with_retry(
    max_attempts: int = 3,
    min_wait_seconds: float = 1.0,
    max_wait_seconds: float = 10.0,
) -> Callable[[F], F]:
    """
    Decorator to retry an async function with exponential backoff when it
    raises a retryable UpstreamError (transport failure, 429 or 5xx).

    Args:
        max_attempts: Maximum number of attempts
        min_wait_seconds: Minimum wait time between retries
        max_wait_seconds: Maximum wait time between retries

    Returns:
        Decorated function
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception(_is_retryable),
                stop=stop_after_attempt(max_attempts),
                wait=wait_exponential(
                    multiplier=1, min=min_wait_seconds, max=max_wait_seconds
                ),
                reraise=True,
                before_sleep=before_sleep_callback,
            ):
                with attempt:
                    return await func(*args, **kwargs)

        return cast(F, wrapper)

    return decorator
