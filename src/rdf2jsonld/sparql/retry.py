"""
Retrying SPARQL requests.

Repeats a request with exponential backoff and turns the final failure
into TimeoutError, ConnectionError or RuntimeError.
"""

__all__ = [
    "with_retry",
    "RetryConfig",
    "classify_failure",
]

import time
import urllib.error
from dataclasses import dataclass
from typing import Callable, TypeVar, Optional

from loguru import logger

T = TypeVar("T")


@dataclass
class RetryConfig:
    """How often to send a request and how long to wait in between."""

    max_attempts: int = 3
    backoff_base: float = 2.0
    backoff_multiplier: float = 1.0

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.backoff_base < 0 or self.backoff_multiplier < 0:
            raise ValueError("backoff_base and backoff_multiplier must not be negative")

    def wait_time(self, attempt: int) -> float:
        """Seconds to wait after the given 0-indexed attempt."""
        return self.backoff_multiplier * (self.backoff_base**attempt)


def _is_timeout(error: BaseException) -> bool:
    # urlopen reports connect timeouts as URLError(reason=TimeoutError)
    if isinstance(error, TimeoutError):
        return True
    return isinstance(error, urllib.error.URLError) and isinstance(error.reason, TimeoutError)


def classify_failure(error: Exception, attempts: int) -> Exception:
    """
    Map the last request error onto the exception reported to callers.

    Args:
        error: Exception raised by the final attempt
        attempts: Number of attempts that were made

    Returns:
        TimeoutError for timeouts, ConnectionError for HTTP and URL
        errors, RuntimeError otherwise (the caller chains ``error``)
    """
    if _is_timeout(error):
        return TimeoutError(f"Query timed out after {attempts} attempts.")
    if isinstance(error, urllib.error.HTTPError):
        return ConnectionError(f"HTTP {error.code}: {error.reason}")
    if isinstance(error, (urllib.error.URLError, ConnectionError)):
        return ConnectionError(f"Endpoint unreachable: {error}")
    return RuntimeError(f"{type(error).__name__}: {error}")


def with_retry(
    func: Callable[[], T],
    config: Optional[RetryConfig] = None,
    on_retry: Optional[Callable[[int, Exception], None]] = None,
) -> T:
    """
    Call ``func`` until it succeeds or ``config.max_attempts`` is spent.

    Args:
        func: Zero-argument request callable
        config: Attempts and backoff (3 attempts, base 2 if None)
        on_retry: Called with (attempt, exception) before each wait

    Returns:
        Result of the first successful call

    Raises:
        TimeoutError, ConnectionError or RuntimeError from
        classify_failure, chained from the last error

    Example:
        >>> data = with_retry(lambda: client.query_ntriples(q), RetryConfig(max_attempts=5))
    """
    if config is None:
        config = RetryConfig()

    attempt = 0
    while True:
        try:
            return func()
        except Exception as e:
            attempt += 1
            if attempt >= config.max_attempts:
                logger.error(f"Giving up after {attempt} attempts: {type(e).__name__}: {e}")
                raise classify_failure(e, attempt) from e

            wait = config.wait_time(attempt - 1)
            logger.warning(
                f"Attempt {attempt}/{config.max_attempts} failed "
                f"({type(e).__name__}: {e}), retrying in {wait:.1f}s"
            )
            if on_retry:
                on_retry(attempt - 1, e)
            time.sleep(wait)
