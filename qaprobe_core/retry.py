"""
Retry Logic for DOM Operations

Bounded, sequential retries with a fixed backoff. Used to absorb transient
staleness when the product grid re-renders between a read and its use.

Usage:
    from qaprobe_core.retry import with_stale_retry, RetryBudget

    cards = await with_stale_retry(read_cards)
    cards = await with_stale_retry(read_cards, RetryBudget(max_attempts=5))
"""

import asyncio
import logging
from dataclasses import dataclass
from functools import wraps
from typing import Any, Awaitable, Callable, Tuple, Type

from .errors import StaleReferenceError

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[Any]]


@dataclass(frozen=True)
class RetryBudget:
    """How many times to try and how long to wait between tries."""
    max_attempts: int = 3
    backoff_ms: int = 1000

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.backoff_ms < 0:
            raise ValueError(f"backoff_ms must be >= 0, got {self.backoff_ms}")

    @property
    def backoff_seconds(self) -> float:
        return self.backoff_ms / 1000


async def retry_with_backoff(
    operation: Callable[[], Awaitable[Any]],
    budget: RetryBudget,
    retry_on: Tuple[Type[BaseException], ...],
    sleep: Sleep = asyncio.sleep,
):
    """
    Await ``operation`` until it succeeds or the budget runs out.

    Args:
        operation: Zero-argument coroutine function
        budget: Attempt count and backoff between attempts
        retry_on: Error classes treated as transient
        sleep: Awaitable delay, replaceable in tests

    Returns:
        Result of the first successful attempt

    Raises:
        The last transient error once every attempt failed. Errors outside
        ``retry_on`` propagate on first occurrence.
    """
    name = getattr(operation, "__name__", "operation")

    for attempt in range(1, budget.max_attempts + 1):
        try:
            return await operation()
        except retry_on as e:
            if attempt == budget.max_attempts:
                logger.error(f"Retry exhausted for {name} after {budget.max_attempts} attempts: {e}")
                raise
            logger.warning(
                f"Attempt {attempt}/{budget.max_attempts} failed for {name}: {e}. "
                f"Retrying in {budget.backoff_seconds:.1f}s..."
            )
            await sleep(budget.backoff_seconds)


async def with_stale_retry(
    operation: Callable[[], Awaitable[Any]],
    budget: RetryBudget = RetryBudget(),
    sleep: Sleep = asyncio.sleep,
):
    """Retry ``operation`` only on StaleReferenceError."""
    return await retry_with_backoff(operation, budget, (StaleReferenceError,), sleep=sleep)


def stale_retry(budget: RetryBudget = RetryBudget()):
    """
    Decorator form of with_stale_retry for async methods.

    The wrapped callable may carry a ``_sleep`` attribute on its first
    argument (a page object); it is used as the backoff delay when present.

    Example:
        @stale_retry(RetryBudget(max_attempts=3, backoff_ms=1000))
        async def first_card_visible(self):
            ...
    """
    def decorator(func: Callable):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            sleep = getattr(args[0], "_sleep", asyncio.sleep) if args else asyncio.sleep

            async def attempt():
                return await func(*args, **kwargs)

            attempt.__name__ = func.__name__
            return await with_stale_retry(attempt, budget, sleep=sleep)

        return wrapper
    return decorator
