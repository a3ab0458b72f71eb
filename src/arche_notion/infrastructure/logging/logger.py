# src/arche_notion/infrastructure/logging/logger.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""JSON-lines logging for the Notion client.

Every record becomes a single JSON object with the keys ``ts``, ``level``,
``logger`` and ``message``. Correlation ids come from the record itself, then
from the task context set by :func:`set_request_context`, then from the
environment (request id) or the active OpenTelemetry span (trace id).

Structured fields travel as ``extra={"extra": {...}}`` and are merged into the
top level of the payload. Anything shaped like a Notion integration token is
masked before the line is written.

Typical usage:
    configure_root_logging()
    log = get_json_logger(__name__)
    log.warning("notion.decode_failed", extra={"extra": {"operation": "pages.retrieve"}})
"""

from __future__ import annotations

import json
import logging
import os
import re
from collections.abc import Mapping
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

from opentelemetry import trace as otel_trace

__all__ = [
    "configure_root_logging",
    "get_json_logger",
    "get_request_id",
    "get_trace_id",
    "redact_tokens",
    "set_request_context",
]

_ENV_REQUEST_ID = "REQUEST_ID"
_ENV_LOG_LEVEL = "LOG_LEVEL"
_DEFAULT_LEVEL = "INFO"

# Internal integration tokens: legacy ``secret_`` and current ``ntn_`` prefixes.
_TOKEN_RE = re.compile(r"\b(?:secret|ntn)_[A-Za-z0-9]{16,}")
_MASK = "***"

_REQUEST_ID_CTX: ContextVar[str | None] = ContextVar("arche_notion_request_id", default=None)
_TRACE_ID_CTX: ContextVar[str | None] = ContextVar("arche_notion_trace_id", default=None)


def set_request_context(*, request_id: str | None = None, trace_id: str | None = None) -> None:
    """Bind correlation ids to the running task.

    Only the ids that are passed change; a call with ``trace_id`` alone keeps
    whatever request id an outer caller already bound.
    """
    if request_id is not None:
        _REQUEST_ID_CTX.set(request_id)
    if trace_id is not None:
        _TRACE_ID_CTX.set(trace_id)


def get_request_id() -> str | None:
    """Request id bound to the running task."""
    return _REQUEST_ID_CTX.get()


def get_trace_id() -> str | None:
    """Trace id bound to the running task."""
    return _TRACE_ID_CTX.get()


def redact_tokens(text: str) -> str:
    """Mask Notion integration tokens inside ``text``."""
    return _TOKEN_RE.sub(_MASK, text)


def _span_trace_id() -> str | None:
    ctx = otel_trace.get_current_span().get_span_context()
    if not ctx.is_valid:
        return None
    return format(ctx.trace_id, "032x")


def _scrub(value: Any) -> Any:
    if isinstance(value, str):
        return redact_tokens(value)
    if isinstance(value, Mapping):
        return {k: _scrub(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [_scrub(v) for v in value]
    return value


class _JsonFormatter(logging.Formatter):
    """Render log records as compact JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_tokens(record.getMessage()),
        }
        payload.update(self._correlation(record))
        payload.update(self._exception(record))

        fields = getattr(record, "extra", None)
        if isinstance(fields, dict):
            payload.update(_scrub(fields))

        # Decimal and enum values fall back to str().
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)

    @staticmethod
    def _correlation(record: logging.LogRecord) -> dict[str, str]:
        ids: dict[str, str] = {}
        request_id = (
            getattr(record, "request_id", None)
            or _REQUEST_ID_CTX.get()
            or os.getenv(_ENV_REQUEST_ID)
        )
        if request_id:
            ids["request_id"] = request_id
        trace_id = getattr(record, "trace_id", None) or _TRACE_ID_CTX.get() or _span_trace_id()
        if trace_id:
            ids["trace_id"] = trace_id
        return ids

    @staticmethod
    def _exception(record: logging.LogRecord) -> dict[str, str]:
        if not record.exc_info:
            return {}
        exc_type, exc, _ = record.exc_info
        fields: dict[str, str] = {}
        if exc_type is not None:
            fields["exc_type"] = exc_type.__name__
        if exc is not None:
            fields["exc_message"] = redact_tokens(str(exc))
        return fields


def _resolve_level(level: str | int | None) -> str | int:
    if level is not None:
        return level
    return (os.getenv(_ENV_LOG_LEVEL) or _DEFAULT_LEVEL).upper()


def configure_root_logging(level: str | int | None = None) -> None:
    """Attach a JSON stream handler to the root logger.

    Args:
        level: Level or level name. Defaults to ``$LOG_LEVEL``, then ``INFO``.

    The level is applied on every call. A handler is added only when the root
    logger has none, so repeated calls never duplicate output.
    """
    root = logging.getLogger()
    root.setLevel(_resolve_level(level))
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        root.addHandler(handler)


def get_json_logger(name: str) -> logging.Logger:
    """Named logger that relies on the root handler installed by :func:`configure_root_logging`."""
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
