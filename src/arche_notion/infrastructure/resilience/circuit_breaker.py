# Copyright (c)
# SPDX-License-Identifier: MIT
"""In-process circuit breaker for async upstream calls.

A closed circuit lets every call through and counts consecutive failures.
Reaching ``failure_threshold`` opens it; open circuits reject calls until
``recovery_timeout_s`` has passed, after which a bounded number of trial
calls run half-open. One successful trial closes the circuit again and a
failed one reopens it.

Each ``NotionClient`` owns a single breaker.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from enum import Enum


class BreakerState(str, Enum):
    """Breaker positions; values double as metric and log labels."""

    CLOSED = "CLOSED"
    OPEN = "OPEN"
    HALF_OPEN = "HALF_OPEN"

    def __str__(self) -> str:
        return self.value


class CircuitOpenError(RuntimeError):
    """The breaker refused a call without running it."""


@dataclass
class CircuitBreaker:
    """Breaker state shared by every call routed through :meth:`guard`.

    Attributes:
        failure_threshold: Consecutive failures needed to open the circuit.
        recovery_timeout_s: Seconds an open circuit waits before trial calls.
        half_open_max_calls: Trial calls allowed in flight while half-open.
        on_transition: Receives ``(key, new_state)`` on every state change.
    """

    failure_threshold: int
    recovery_timeout_s: float
    half_open_max_calls: int
    on_transition: Callable[[str, str], None] | None = None

    _state: BreakerState = BreakerState.CLOSED
    _consecutive_failures: int = 0
    _open_since: float = 0.0
    _trials_in_flight: int = 0
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    @property
    def state(self) -> BreakerState:
        return self._state

    def _move_to(self, key: str, state: BreakerState) -> None:
        self._state = state
        if state is BreakerState.OPEN:
            self._open_since = time.monotonic()
        elif state is BreakerState.HALF_OPEN:
            self._trials_in_flight = 0
        if self.on_transition is not None:
            self.on_transition(key, state)

    async def _admit(self, key: str) -> None:
        async with self._lock:
            if self._state is BreakerState.OPEN:
                if time.monotonic() - self._open_since < self.recovery_timeout_s:
                    raise CircuitOpenError("circuit_open")
                self._move_to(key, BreakerState.HALF_OPEN)
            if self._state is BreakerState.HALF_OPEN:
                if self._trials_in_flight >= self.half_open_max_calls:
                    raise CircuitOpenError("circuit_half_open_limit")
                self._trials_in_flight += 1

    async def _record(self, key: str, *, ok: bool) -> None:
        async with self._lock:
            if ok:
                if self._state is BreakerState.HALF_OPEN:
                    self._move_to(key, BreakerState.CLOSED)
                self._consecutive_failures = 0
            elif self._state is BreakerState.HALF_OPEN:
                self._move_to(key, BreakerState.OPEN)
            elif self._state is BreakerState.CLOSED:
                self._consecutive_failures += 1
                if self._consecutive_failures >= self.failure_threshold:
                    self._move_to(key, BreakerState.OPEN)

    @asynccontextmanager
    async def guard(self, key: str) -> AsyncIterator[None]:
        """Run the enclosed block under the breaker.

        Raises:
            CircuitOpenError: The circuit is open, or every half-open trial
                slot is taken.
        """
        await self._admit(key)
        try:
            yield
        except Exception:
            await self._record(key, ok=False)
            raise
        await self._record(key, ok=True)
