from __future__ import annotations

from types import SimpleNamespace

import pytest

from arche_notion.infrastructure.resilience import retry as retry_module
from arche_notion.infrastructure.resilience.retry import RetryPolicy, retry_async


class _Flaky(Exception):
    pass


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    recorded: list[float] = []

    async def fake_sleep(delay: float) -> None:
        recorded.append(delay)

    monkeypatch.setattr(retry_module, "asyncio", SimpleNamespace(sleep=fake_sleep))
    return recorded


def test_backoff_doubles_up_to_the_cap() -> None:
    policy = RetryPolicy(total=5, base=0.5, cap=3.0, jitter=False)
    assert [policy.backoff(i) for i in range(5)] == [0.5, 1.0, 2.0, 3.0, 3.0]


def test_jitter_stays_within_the_deterministic_bound() -> None:
    policy = RetryPolicy(total=3, base=1.0, cap=10.0, jitter=True)
    for attempt in range(4):
        assert 0.0 <= policy.backoff(attempt) <= min(10.0, 2.0**attempt)


@pytest.mark.anyio
async def test_first_success_is_returned_without_sleeping(sleeps: list[float]) -> None:
    async def ok() -> str:
        return "ok"

    policy = RetryPolicy(total=3, base=1.0, cap=1.0, jitter=False)
    assert await retry_async(ok, policy=policy, retry_on=lambda exc: True) == "ok"
    assert sleeps == []


@pytest.mark.anyio
async def test_retries_until_success_and_reports_each_retry(sleeps: list[float]) -> None:
    calls = 0
    seen: list[tuple[str, int, float]] = []

    async def flaky() -> str:
        nonlocal calls
        calls += 1
        if calls < 3:
            raise _Flaky(f"attempt {calls}")
        return "done"

    policy = RetryPolicy(total=4, base=0.25, cap=10.0, jitter=False)
    result = await retry_async(
        flaky,
        policy=policy,
        retry_on=lambda exc: isinstance(exc, _Flaky),
        on_retry=lambda exc, attempt, delay: seen.append((str(exc), attempt, delay)),
    )

    assert result == "done"
    assert sleeps == [0.25, 0.5]
    assert seen == [("attempt 1", 0, 0.25), ("attempt 2", 1, 0.5)]


@pytest.mark.anyio
async def test_last_error_is_raised_when_budget_is_spent(sleeps: list[float]) -> None:
    calls = 0

    async def always_fails() -> None:
        nonlocal calls
        calls += 1
        raise _Flaky("nope")

    policy = RetryPolicy(total=2, base=0.1, cap=1.0, jitter=False)
    with pytest.raises(_Flaky):
        await retry_async(always_fails, policy=policy, retry_on=lambda exc: True)

    assert calls == 3
    assert len(sleeps) == 2


@pytest.mark.anyio
async def test_non_retryable_errors_propagate_immediately(sleeps: list[float]) -> None:
    calls = 0

    async def bad_request() -> None:
        nonlocal calls
        calls += 1
        raise ValueError("invalid")

    policy = RetryPolicy(total=5, base=0.1, cap=1.0, jitter=False)
    with pytest.raises(ValueError):
        await retry_async(bad_request, policy=policy, retry_on=lambda exc: isinstance(exc, _Flaky))

    assert calls == 1
    assert sleeps == []


@pytest.mark.anyio
async def test_server_delay_hint_replaces_backoff_and_is_capped(sleeps: list[float]) -> None:
    calls = 0

    async def limited() -> str:
        nonlocal calls
        calls += 1
        if calls == 1:
            raise _Flaky("short")
        if calls == 2:
            raise _Flaky("long")
        return "ok"

    hints = {"short": 1.5, "long": 120.0}
    policy = RetryPolicy(total=3, base=0.1, cap=5.0, jitter=False)
    await retry_async(
        limited,
        policy=policy,
        retry_on=lambda exc: True,
        delay_hint=lambda exc: hints.get(str(exc)),
    )

    assert sleeps == [1.5, 5.0]
