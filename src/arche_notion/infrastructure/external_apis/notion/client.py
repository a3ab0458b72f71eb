# Copyright (c)
# SPDX-License-Identifier: MIT
"""Notion Transport Client: resilient, instrumented, async.

This transport is framework-agnostic and provides:

* Async HTTP (httpx) with per-request timeout.
* Jittered exponential retries (bounded) for 429 and 5xx, honoring
  ``Retry-After``.
* Circuit breaker (CLOSED / OPEN / HALF-OPEN) counting 5xx and transport
  failures.
* Deterministic mapping of HTTP statuses and Notion error bodies to domain
  errors.
* OpenTelemetry spans and Prometheus metrics.

Notes:
    * Response bodies are parsed with ``parse_float=Decimal`` so Notion
      numbers keep their exact representation.
    * Caller-facing exceptions are always Notion domain exceptions; httpx
      types never cross the boundary.
"""

from __future__ import annotations

import json
import time
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Final

import httpx

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
from arche_notion.infrastructure.external_apis.notion.settings import NotionSettings
from arche_notion.infrastructure.logging.logger import (
    get_json_logger,
    get_request_id,
    get_trace_id,
)
from arche_notion.infrastructure.observability.metrics_notion import (
    get_notion_breaker_events_total,
    get_notion_errors_total,
    get_notion_http_status_total,
    get_notion_request_latency_seconds,
    get_notion_response_bytes,
    get_notion_retries_total,
)
from arche_notion.infrastructure.observability.tracing import traced
from arche_notion.infrastructure.resilience.circuit_breaker import (
    CircuitBreaker,
    CircuitOpenError,
)
from arche_notion.infrastructure.resilience.retry import RetryPolicy, retry_async

logger = get_json_logger(__name__)

_DEFAULT_TIMEOUT: Final[float] = 8.0
_DEFAULT_TOTAL_RETRIES: Final[int] = 4
_DEFAULT_BASE_BACKOFF: Final[float] = 0.5
_DEFAULT_MAX_BACKOFF: Final[float] = 30.0

_DEFAULT_HEADERS: Final[dict[str, str]] = {
    "Accept": "application/json",
}

_STATUS_ERRORS: Final[dict[int, type[NotionAPIError]]] = {
    400: NotionBadRequest,
    401: NotionUnauthorized,
    403: NotionRestricted,
    404: NotionNotFound,
    409: NotionConflict,
    429: NotionRateLimited,
}

_RETRYABLE: Final[tuple[type[NotionAPIError], ...]] = (NotionRateLimited, NotionUnavailable)


class NotionClient:
    """Resilient, instrumented transport client for the Notion API."""

    def __init__(
        self,
        settings: NotionSettings,
        *,
        http: httpx.AsyncClient | None = None,
        timeout_s: float | None = None,
        retry_policy: RetryPolicy | None = None,
        breaker: CircuitBreaker | None = None,
    ) -> None:
        """Initialize the transport client.

        Args:
            settings: Client settings loaded from environment or passed in.
            http: Optional shared ``httpx.AsyncClient``. If omitted, a client
                is created and owned by this instance.
            timeout_s: Optional per-request timeout override in seconds.
            retry_policy: Optional retry configuration for retryable failures.
            breaker: Circuit breaker instance to use; created if omitted.
        """
        self._settings = settings
        self._base_url = str(settings.base_url).rstrip("/")

        if timeout_s is not None:
            self._timeout = float(timeout_s)
        else:
            self._timeout = float(getattr(settings, "timeout_s", _DEFAULT_TIMEOUT))

        # Sent per request: a shared client already carries httpx defaults for both.
        self._default_headers = {**_DEFAULT_HEADERS, "User-Agent": settings.user_agent}
        self._owns_client = http is None
        self._client = http or httpx.AsyncClient(timeout=self._timeout)

        total_retries = int(getattr(settings, "max_retries", _DEFAULT_TOTAL_RETRIES))
        self._retry = retry_policy or RetryPolicy(
            total=total_retries,
            base=_DEFAULT_BASE_BACKOFF,
            cap=_DEFAULT_MAX_BACKOFF,
            jitter=True,
        )

        # Metrics handles.
        self._latency = get_notion_request_latency_seconds()
        self._errors = get_notion_errors_total()
        self._status_total = get_notion_http_status_total()
        self._resp_bytes = get_notion_response_bytes()
        self._retries_total = get_notion_retries_total()
        self._breaker_events_total = get_notion_breaker_events_total()

        self._breaker = breaker or CircuitBreaker(
            failure_threshold=5,
            recovery_timeout_s=30.0,
            half_open_max_calls=1,
            on_transition=self._on_breaker_transition,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance owns it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> NotionClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        endpoint: str,
    ) -> Mapping[str, Any]:
        """Send one API call and return the parsed JSON object.

        Args:
            method: HTTP method.
            path: Path relative to the base URL, e.g. ``/pages/abc``.
            json: Request body (already JSON-compatible).
            params: Query parameters; ``None`` values are dropped.
            endpoint: Logical operation name for metrics and spans
                (e.g. ``"pages.retrieve"``).

        Returns:
            The response body as a mapping. Floats are ``Decimal``.

        Raises:
            NotionBadRequest, NotionUnauthorized, NotionRestricted,
            NotionNotFound, NotionConflict: Non-retryable API errors.
            NotionRateLimited, NotionUnavailable: Retryable errors after the
                retry budget is spent.
            NotionResponseError: The body is not a JSON object.
        """
        url = f"{self._base_url}{path}"
        headers = self._request_headers()
        query = {k: v for k, v in (params or {}).items() if v is not None}

        async def _call() -> Mapping[str, Any]:
            """Execute a single HTTP call and map it into a JSON object."""
            response = await self._perform_request(
                method=method,
                url=url,
                headers=headers,
                body=json,
                params=query,
                endpoint=endpoint,
                path=path,
            )
            return self._handle_response(response=response, endpoint=endpoint, path=path)

        def _retry_predicate(exc: Exception) -> bool:
            """Return True for retryable conditions only."""
            return isinstance(exc, _RETRYABLE)

        def _on_retry(exc: Exception, attempt: int, delay: float) -> None:
            self._retries_total.labels(endpoint, type(exc).__name__).inc()
            logger.warning(
                "notion.retry",
                extra={
                    "extra": {
                        "endpoint": endpoint,
                        "attempt": attempt + 1,
                        "delay_s": round(delay, 3),
                        "reason": type(exc).__name__,
                    }
                },
            )

        start = time.perf_counter()
        error_reason: str | None = None

        try:
            async with traced("notion.http", endpoint=endpoint, method=method, path=path):
                return await retry_async(
                    _call,
                    policy=self._retry,
                    retry_on=_retry_predicate,
                    delay_hint=self._retry_after_hint,
                    on_retry=_on_retry,
                )
        except NotionAPIError as exc:
            error_reason = type(exc).__name__
            logger.info(
                "notion.request_failed",
                extra={
                    "extra": {
                        "endpoint": endpoint,
                        "status": exc.status,
                        "code": exc.api_code,
                        "reason": error_reason,
                    }
                },
            )
            raise
        finally:
            elapsed = time.perf_counter() - start
            outcome = "error" if error_reason else "success"
            self._latency.labels(endpoint=endpoint, outcome=outcome).observe(elapsed)
            if error_reason:
                self._errors.labels(endpoint=endpoint, reason=error_reason).inc()

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _request_headers(self) -> dict[str, str]:
        headers = {
            **self._default_headers,
            "Authorization": f"Bearer {self._settings.token.get_secret_value()}",
            "Notion-Version": self._settings.notion_version,
        }
        request_id = get_request_id()
        trace_id = get_trace_id()
        if request_id:
            headers["X-Request-ID"] = request_id
        if trace_id:
            headers["x-trace-id"] = trace_id
        return headers

    def _on_breaker_transition(self, key: str, state: str) -> None:
        self._breaker_events_total.labels(key, state.lower()).inc()
        logger.warning("notion.breaker", extra={"extra": {"endpoint": key, "state": state}})

    async def _perform_request(
        self,
        *,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Mapping[str, Any] | None,
        params: Mapping[str, Any],
        endpoint: str,
        path: str,
    ) -> httpx.Response:
        """Execute one HTTP call under breaker control and map transport errors.

        5xx responses are raised inside the guard so they count as breaker
        failures; every other status is returned for mapping.
        """
        try:
            async with self._breaker.guard(endpoint):
                response = await self._client.request(
                    method,
                    url,
                    headers=headers,
                    json=body,
                    params=params or None,
                    timeout=self._timeout,
                )
                self._status_total.labels(endpoint, str(response.status_code)).inc()
                if response.status_code >= 500:
                    raise self._api_error(
                        NotionUnavailable, response, endpoint=endpoint, path=path
                    )
                return response
        except CircuitOpenError as cb_exc:
            self._breaker_events_total.labels(endpoint, "rejected").inc()
            raise NotionUnavailable(
                "Notion circuit breaker is open.",
                details={"endpoint": endpoint, "path": path},
            ) from cb_exc
        except httpx.RequestError as exc:
            raise NotionUnavailable(
                "Notion transport failure.",
                details={"endpoint": endpoint, "path": path, "error": str(exc)},
            ) from exc

    def _handle_response(
        self,
        *,
        response: httpx.Response,
        endpoint: str,
        path: str,
    ) -> Mapping[str, Any]:
        """Map an HTTP response into a JSON object or domain error."""
        status = response.status_code
        if status >= 400:
            error_type = _STATUS_ERRORS.get(status, NotionAPIError)
            raise self._api_error(error_type, response, endpoint=endpoint, path=path)

        length = response.headers.get("Content-Length")
        size = int(length) if length and length.isdigit() else len(response.content)
        self._resp_bytes.labels(endpoint).observe(float(size))

        try:
            payload: Any = json.loads(response.content, parse_float=Decimal)
        except ValueError as exc:
            raise NotionResponseError(
                "Notion response was not valid JSON.",
                status=status,
                details={"endpoint": endpoint, "path": path, "error": str(exc)},
            ) from exc

        if not isinstance(payload, Mapping):
            raise NotionResponseError(
                "Notion JSON response must be an object.",
                status=status,
                details={"endpoint": endpoint, "path": path, "type": type(payload).__name__},
            )

        return payload

    def _api_error(
        self,
        error_type: type[NotionAPIError],
        response: httpx.Response,
        *,
        endpoint: str,
        path: str,
    ) -> NotionAPIError:
        """Build a domain error from a Notion error body (best effort)."""
        api_code: str | None = None
        message = f"Notion returned HTTP {response.status_code}."
        try:
            body: Any = json.loads(response.content)
        except ValueError:
            body = None
        if isinstance(body, Mapping):
            code = body.get("code")
            api_code = code if isinstance(code, str) else None
            if isinstance(body.get("message"), str):
                message = body["message"]

        details: dict[str, Any] = {
            "endpoint": endpoint,
            "path": path,
            "status": response.status_code,
        }
        request_id = response.headers.get("x-request-id")
        if request_id:
            details["notion_request_id"] = request_id
        if error_type is NotionRateLimited:
            details["retry_after_s"] = self._parse_retry_after(response.headers.get("Retry-After"))
        return error_type(message, status=response.status_code, api_code=api_code, details=details)

    @staticmethod
    def _retry_after_hint(exc: Exception) -> float | None:
        if isinstance(exc, NotionRateLimited):
            hint = exc.details.get("retry_after_s")
            return float(hint) if hint is not None else None
        return None

    @staticmethod
    def _parse_retry_after(val: str | None) -> float | None:
        """Parse HTTP Retry-After header (seconds form only)."""
        if not val:
            return None
        try:
            seconds = float(val)
        except (TypeError, ValueError):
            return None
        return max(0.0, seconds)
