# Copyright (c)
# SPDX-License-Identifier: MIT
"""Async retry loop with capped exponential backoff and server delay hints."""

from __future__ import annotations

import asyncio
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")

type DelayHint = Callable[[Exception], float | None]
type RetryHook = Callable[[Exception, int, float], None]


@dataclass(frozen=True)
class RetryPolicy:
    """How many times to retry and how long to wait in between."""

    total: int  # retries after the first attempt
    base: float  # seconds before the first retry
    cap: float  # upper bound for any single wait
    jitter: bool = True  # draw uniformly from [0, delay]

    def backoff(self, attempt: int) -> float:
        """Wait before retry ``attempt`` (0-based), never above ``cap``."""
        ceiling = min(self.cap, self.base * 2**attempt)
        return random.uniform(0, ceiling) if self.jitter else ceiling  # noqa: S311


NO_RETRY = RetryPolicy(total=0, base=0.0, cap=0.0, jitter=False)


def _next_delay(policy: RetryPolicy, exc: Exception, attempt: int, hint: DelayHint | None) -> float:
    hinted = hint(exc) if hint is not None else None
    if hinted is None:
        return policy.backoff(attempt)
    return min(policy.cap, hinted)


async def retry_async(
    fn: Callable[[], Awaitable[T]],
    *,
    policy: RetryPolicy,
    retry_on: Callable[[Exception], bool],
    delay_hint: DelayHint | None = None,
    on_retry: RetryHook | None = None,
) -> T:
    """Await ``fn()`` until it succeeds or the retry budget runs out.

    Args:
        fn: Zero-argument coroutine factory; called once per attempt.
        policy: Retry budget and backoff shape.
        retry_on: Returns True for exceptions worth another attempt.
        delay_hint: Server-requested wait for an exception, such as a
            ``Retry-After`` header. Overrides the backoff, still capped by
            ``policy.cap``.
        on_retry: Receives ``(exc, attempt, delay)`` just before sleeping.

    Raises:
        Exception: Whatever ``fn`` raised last, once it is not retryable or
            the budget is spent.
    """
    for attempt in range(policy.total + 1):
        try:
            return await fn()
        except Exception as exc:
            if attempt == policy.total or not retry_on(exc):
                raise
            delay = _next_delay(policy, exc, attempt, delay_hint)
            if on_retry is not None:
                on_retry(exc, attempt, delay)
        await asyncio.sleep(delay)
    raise AssertionError("unreachable")  # pragma: no cover
