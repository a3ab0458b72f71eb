# Copyright (c)
# SPDX-License-Identifier: MIT
"""Notion metrics.

Purpose:
    Prometheus metrics for Notion API calls:
      * Latency histograms.
      * Error counters by reason.
      * HTTP status distribution.
      * Response size histograms.
      * Retry and circuit-breaker event counters.
      * Response decode failures by operation and kind.

Design:
    Functions return lazily created singleton metric instances, so importing
    this module never touches the default registry.
"""

from __future__ import annotations

from prometheus_client import Counter, Histogram

_notion_request_latency_seconds: Histogram | None = None
_notion_errors_total: Counter | None = None
_notion_http_status_total: Counter | None = None
_notion_response_bytes: Histogram | None = None
_notion_retries_total: Counter | None = None
_notion_breaker_events_total: Counter | None = None
_notion_decode_errors_total: Counter | None = None


def get_notion_request_latency_seconds() -> Histogram:
    """Return (and lazily create) the Notion request latency histogram."""
    global _notion_request_latency_seconds
    if _notion_request_latency_seconds is None:
        _notion_request_latency_seconds = Histogram(
            "notion_request_latency_seconds",
            "Latency of Notion API calls in seconds.",
            ["endpoint", "outcome"],
        )
    return _notion_request_latency_seconds


def get_notion_errors_total() -> Counter:
    """Return (and lazily create) the Notion error counter."""
    global _notion_errors_total
    if _notion_errors_total is None:
        _notion_errors_total = Counter(
            "notion_errors_total",
            "Total number of Notion client errors.",
            ["endpoint", "reason"],
        )
    return _notion_errors_total


def get_notion_http_status_total() -> Counter:
    """Return (and lazily create) the Notion HTTP status counter."""
    global _notion_http_status_total
    if _notion_http_status_total is None:
        _notion_http_status_total = Counter(
            "notion_http_status_total",
            "Notion HTTP responses by status code.",
            ["endpoint", "status"],
        )
    return _notion_http_status_total


def get_notion_response_bytes() -> Histogram:
    """Return (and lazily create) the Notion response-bytes histogram."""
    global _notion_response_bytes
    if _notion_response_bytes is None:
        _notion_response_bytes = Histogram(
            "notion_response_bytes",
            "Size of Notion HTTP responses in bytes.",
            ["endpoint"],
        )
    return _notion_response_bytes


def get_notion_retries_total() -> Counter:
    """Return (and lazily create) the Notion retry counter."""
    global _notion_retries_total
    if _notion_retries_total is None:
        _notion_retries_total = Counter(
            "notion_retries_total",
            "Total number of Notion retries.",
            ["endpoint", "reason"],
        )
    return _notion_retries_total


def get_notion_breaker_events_total() -> Counter:
    """Return (and lazily create) the Notion circuit-breaker events counter."""
    global _notion_breaker_events_total
    if _notion_breaker_events_total is None:
        _notion_breaker_events_total = Counter(
            "notion_breaker_events_total",
            "Total Notion circuit breaker state transitions.",
            ["endpoint", "state"],
        )
    return _notion_breaker_events_total


def get_notion_decode_errors_total() -> Counter:
    """Return (and lazily create) the response decode failure counter."""
    global _notion_decode_errors_total
    if _notion_decode_errors_total is None:
        _notion_decode_errors_total = Counter(
            "notion_decode_errors_total",
            "Notion responses that failed to decode into entities.",
            ["operation", "kind"],
        )
    return _notion_decode_errors_total
