"""Retry logic with exponential backoff."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetryPolicy:
    """Configuration for retrying a remote call."""

    max_attempts: int = 3
    base_delay: float = 1.0
    backoff_multiplier: float = 2.0
    on_retry: Callable[[int, Exception, float], None] | None = field(
        default=None, compare=False, hash=False
    )


def calculate_delay(attempt: int, policy: RetryPolicy) -> float:
    """Seconds to wait after failed *attempt* (1-based): 1, 2, 4, ..."""
    return policy.base_delay * (policy.backoff_multiplier ** (attempt - 1))


def with_retry(fn: Callable[[int], T], policy: RetryPolicy) -> T:
    """Call ``fn(attempt)`` until it succeeds or attempts run out.

    Every exception counts as a failed attempt. The exception from the
    final attempt is re-raised unchanged.
    """
    attempts = max(1, policy.max_attempts)

    for attempt in range(1, attempts + 1):
        try:
            return fn(attempt)
        except Exception as exc:
            logger.error("Attempt %d/%d failed: %s", attempt, attempts, exc)
            if attempt >= attempts:
                raise

            delay = calculate_delay(attempt, policy)
            if policy.on_retry is not None:
                policy.on_retry(attempt, exc, delay)
            time.sleep(delay)

    raise AssertionError("unreachable")  # pragma: no cover
