# Copyright (c)
# SPDX-License-Identifier: MIT
"""OpenTelemetry span helper.

Provides ``traced(name, **attrs)``, an async context manager that wraps one
operation in an OTEL span. Without a configured SDK the API's default tracer
provider hands out non-recording spans, so the helper costs next to nothing.
Exporter and provider setup belong to the host application.

Layer:
    infrastructure/observability
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Span

_TRACER = trace.get_tracer("arche_notion")


@asynccontextmanager
async def traced(span_name: str, **attrs: Any) -> AsyncIterator[Span]:
    """Open a span named ``span_name`` for the duration of the block.

    Args:
        span_name: Logical span name, e.g. ``"notion.request"``.
        **attrs: Span attributes; ``None`` values are skipped.

    Yields:
        The active span, so callers can add attributes (status code, bytes).
    """
    with _TRACER.start_as_current_span(span_name) as span:
        for key, value in attrs.items():
            if value is not None:
                span.set_attribute(key, value)
        yield span
