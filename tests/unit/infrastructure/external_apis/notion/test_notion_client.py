from __future__ import annotations

import json
from decimal import Decimal

import httpx
import pytest
import respx
from prometheus_client import REGISTRY as PROM_REGISTRY

from arche_notion.domain.exceptions.notion import (
    NotionAPIError,
    NotionBadRequest,
    NotionConflict,
    NotionNotFound,
    NotionRateLimited,
    NotionResponseError,
    NotionRestricted,
    NotionUnauthorized,
    NotionUnavailable,
)
from arche_notion.infrastructure.external_apis.notion.client import NotionClient
from arche_notion.infrastructure.external_apis.notion.settings import NotionSettings
from arche_notion.infrastructure.logging.logger import set_request_context
from arche_notion.infrastructure.resilience.circuit_breaker import CircuitBreaker
from arche_notion.infrastructure.resilience.retry import NO_RETRY, RetryPolicy

BASE = "https://api.notion.com/v1"


def _error_body(status: int, code: str, message: str) -> dict[str, object]:
    return {"object": "error", "status": status, "code": code, "message": message}


def _sample(name: str, labels: dict[str, str]) -> float:
    return PROM_REGISTRY.get_sample_value(name, labels) or 0.0


@pytest.mark.asyncio
@respx.mock
async def test_sends_auth_version_and_correlation_headers(
    settings: NotionSettings, fast_retry: RetryPolicy
) -> None:
    set_request_context(request_id="req-123", trace_id="abc123")
    route = respx.get(f"{BASE}/users").mock(
        return_value=httpx.Response(200, json={"object": "list", "results": [], "has_more": False})
    )

    async with httpx.AsyncClient() as http:
        client = NotionClient(settings, http=http, retry_policy=fast_retry)
        body = await client.request(
            "GET",
            "/users",
            params={"page_size": 10, "start_cursor": None},
            endpoint="users.list",
        )

    assert body["has_more"] is False
    request = route.calls.last.request
    assert request.headers["Authorization"] == "Bearer secret_test_token"
    assert request.headers["Notion-Version"] == "2025-09-03"
    assert request.headers["User-Agent"] == "arche-notion/0.1"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["X-Request-ID"] == "req-123"
    assert request.headers["x-trace-id"] == "abc123"
    assert dict(request.url.params) == {"page_size": "10"}


@pytest.mark.asyncio
@respx.mock
async def test_configured_user_agent_replaces_http_client_defaults(
    settings: NotionSettings, fast_retry: RetryPolicy
) -> None:
    route = respx.get(f"{BASE}/users/me").mock(
        return_value=httpx.Response(200, json={"object": "user", "id": "u1", "type": "bot"})
    )

    async with httpx.AsyncClient(headers={"User-Agent": "someone-else/2.0"}) as http:
        await NotionClient(settings, http=http, retry_policy=fast_retry).request(
            "GET", "/users/me", endpoint="users.me"
        )
    async with NotionClient(settings, retry_policy=fast_retry) as owned:
        await owned.request("GET", "/users/me", endpoint="users.me")

    sent = [call.request.headers for call in route.calls]
    assert [h["User-Agent"] for h in sent] == ["arche-notion/0.1", "arche-notion/0.1"]
    assert [h["Accept"] for h in sent] == ["application/json", "application/json"]


@pytest.mark.asyncio
@respx.mock
async def test_json_body_is_sent_and_numbers_parse_as_decimal(
    settings: NotionSettings, fast_retry: RetryPolicy
) -> None:
    route = respx.post(f"{BASE}/data_sources/ds1/query").mock(
        return_value=httpx.Response(
            200,
            content=b'{"object": "list", "results": [], "amount": 0.1, "count": 3}',
            headers={"Content-Type": "application/json"},
        )
    )

    async with NotionClient(settings, retry_policy=fast_retry) as client:
        body = await client.request(
            "POST",
            "/data_sources/ds1/query",
            json={"page_size": 5},
            endpoint="data_sources.query",
        )

    assert json.loads(route.calls.last.request.content) == {"page_size": 5}
    assert body["amount"] == Decimal("0.1")
    assert isinstance(body["amount"], Decimal)
    assert body["count"] == 3


@pytest.mark.asyncio
@respx.mock
@pytest.mark.parametrize(
    ("status", "error_type"),
    [
        (400, NotionBadRequest),
        (401, NotionUnauthorized),
        (403, NotionRestricted),
        (404, NotionNotFound),
        (409, NotionConflict),
        (418, NotionAPIError),
    ],
)
async def test_error_statuses_map_to_domain_errors(
    settings: NotionSettings,
    fast_retry: RetryPolicy,
    status: int,
    error_type: type[NotionAPIError],
) -> None:
    route = respx.get(f"{BASE}/pages/p1").mock(
        return_value=httpx.Response(
            status,
            json=_error_body(status, "object_not_found", "Could not find page."),
            headers={"x-request-id": "notion-req-1"},
        )
    )

    async with NotionClient(settings, retry_policy=fast_retry) as client:
        with pytest.raises(error_type) as info:
            await client.request("GET", "/pages/p1", endpoint="pages.retrieve")

    err = info.value
    assert type(err) is error_type
    assert err.status == status
    assert err.api_code == "object_not_found"
    assert err.message == "Could not find page."
    assert err.details["notion_request_id"] == "notion-req-1"
    assert err.details["endpoint"] == "pages.retrieve"
    # Client errors are not retried.
    assert route.call_count == 1


@pytest.mark.asyncio
@respx.mock
async def test_rate_limit_is_retried_honoring_retry_after(
    settings: NotionSettings, fast_retry: RetryPolicy
) -> None:
    route = respx.get(f"{BASE}/pages/p1").mock(
        side_effect=[
            httpx.Response(
                429,
                json=_error_body(429, "rate_limited", "Slow down."),
                headers={"Retry-After": "2"},
            ),
            httpx.Response(200, json={"object": "page", "id": "p1"}),
        ]
    )
    before = _sample("notion_retries_total", {"endpoint": "pages.retrieve", "reason": "NotionRateLimited"})

    async with NotionClient(settings, retry_policy=fast_retry) as client:
        body = await client.request("GET", "/pages/p1", endpoint="pages.retrieve")

    assert body["id"] == "p1"
    assert route.call_count == 2
    after = _sample("notion_retries_total", {"endpoint": "pages.retrieve", "reason": "NotionRateLimited"})
    assert after - before == 1


@pytest.mark.asyncio
@respx.mock
async def test_rate_limit_surfaces_after_budget_is_spent(
    settings: NotionSettings, fast_retry: RetryPolicy
) -> None:
    route = respx.get(f"{BASE}/pages/p1").mock(
        return_value=httpx.Response(
            429,
            json=_error_body(429, "rate_limited", "Slow down."),
            headers={"Retry-After": "1.5"},
        )
    )

    async with NotionClient(settings, retry_policy=fast_retry) as client:
        with pytest.raises(NotionRateLimited) as info:
            await client.request("GET", "/pages/p1", endpoint="pages.retrieve")

    assert route.call_count == 3
    assert info.value.details["retry_after_s"] == 1.5


@pytest.mark.asyncio
@respx.mock
async def test_server_errors_are_retried(settings: NotionSettings, fast_retry: RetryPolicy) -> None:
    route = respx.get(f"{BASE}/blocks/b1").mock(
        side_effect=[
            httpx.Response(502, text="bad gateway"),
            httpx.Response(503, json=_error_body(503, "service_unavailable", "Try later.")),
            httpx.Response(200, json={"object": "block", "id": "b1"}),
        ]
    )

    async with NotionClient(settings, retry_policy=fast_retry) as client:
        body = await client.request("GET", "/blocks/b1", endpoint="blocks.retrieve")

    assert body["id"] == "b1"
    assert route.call_count == 3


@pytest.mark.asyncio
@respx.mock
async def test_transport_failures_become_unavailable(
    settings: NotionSettings, fast_retry: RetryPolicy
) -> None:
    attempts: list[httpx.Request] = []

    def refuse(request: httpx.Request) -> httpx.Response:
        attempts.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    respx.get(f"{BASE}/users/me").mock(side_effect=refuse)

    async with NotionClient(settings, retry_policy=fast_retry) as client:
        with pytest.raises(NotionUnavailable) as info:
            await client.request("GET", "/users/me", endpoint="users.me")

    assert len(attempts) == 3
    assert "connection refused" in info.value.details["error"]
    assert not isinstance(info.value, httpx.HTTPError)


@pytest.mark.asyncio
@respx.mock
@pytest.mark.parametrize("content", [b"<html>maintenance</html>", b"[1, 2, 3]", b""])
async def test_non_object_bodies_are_response_errors(
    settings: NotionSettings, fast_retry: RetryPolicy, content: bytes
) -> None:
    respx.get(f"{BASE}/users/me").mock(return_value=httpx.Response(200, content=content))

    async with NotionClient(settings, retry_policy=fast_retry) as client:
        with pytest.raises(NotionResponseError) as info:
            await client.request("GET", "/users/me", endpoint="users.me")

    assert info.value.status == 200


@pytest.mark.asyncio
@respx.mock
async def test_open_breaker_fails_fast_without_calling_notion(settings: NotionSettings) -> None:
    route = respx.get(f"{BASE}/pages/p1").mock(return_value=httpx.Response(500))
    breaker = CircuitBreaker(failure_threshold=1, recovery_timeout_s=60.0, half_open_max_calls=1)

    async with NotionClient(settings, retry_policy=NO_RETRY, breaker=breaker) as client:
        with pytest.raises(NotionUnavailable):
            await client.request("GET", "/pages/p1", endpoint="pages.retrieve")
        assert breaker.state == "OPEN"

        with pytest.raises(NotionUnavailable, match="circuit breaker is open"):
            await client.request("GET", "/pages/p1", endpoint="pages.retrieve")

    assert route.call_count == 1


@pytest.mark.asyncio
@respx.mock
async def test_client_errors_do_not_trip_the_breaker(settings: NotionSettings) -> None:
    route = respx.get(f"{BASE}/pages/missing").mock(
        return_value=httpx.Response(404, json=_error_body(404, "object_not_found", "Nope."))
    )
    breaker = CircuitBreaker(failure_threshold=1, recovery_timeout_s=60.0, half_open_max_calls=1)

    async with NotionClient(settings, retry_policy=NO_RETRY, breaker=breaker) as client:
        for _ in range(3):
            with pytest.raises(NotionNotFound):
                await client.request("GET", "/pages/missing", endpoint="pages.retrieve")

    assert breaker.state == "CLOSED"
    assert route.call_count == 3


@pytest.mark.asyncio
async def test_shared_http_client_is_left_open(settings: NotionSettings) -> None:
    async with httpx.AsyncClient() as http:
        client = NotionClient(settings, http=http)
        await client.aclose()
        assert not http.is_closed


@pytest.mark.asyncio
async def test_owned_http_client_is_closed(settings: NotionSettings) -> None:
    client = NotionClient(settings)
    await client.aclose()
    assert client._client.is_closed
