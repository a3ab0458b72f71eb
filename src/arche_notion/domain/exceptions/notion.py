# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Notion API Domain Exceptions

Purpose:
    Exceptions representing error conditions reported by (or while talking to)
    the Notion API. The transport maps HTTP statuses and the Notion error body
    (``{"object": "error", "status", "code", "message"}``) onto these types;
    httpx exceptions never cross the client boundary.

Layer: domain/exceptions
"""
from __future__ import annotations

from typing import Any

from .base import DomainError


class NotionAPIError(DomainError):
    """Base class for failures reported by the Notion API.

    Args:
        message: Human-readable message (Notion's ``message`` when available).
        status: HTTP status code, if a response was received.
        api_code: Notion error code (e.g. ``"validation_error"``).
        details: Optional machine-readable diagnostic payload.
    """

    code = "NOTION_API_ERROR"

    def __init__(
        self,
        message: str = "",
        *,
        status: int | None = None,
        api_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.status = status
        self.api_code = api_code


class NotionBadRequest(NotionAPIError):
    """Request was rejected as invalid (400)."""

    code = "NOTION_BAD_REQUEST"


class NotionUnauthorized(NotionAPIError):
    """Bearer token is missing or invalid (401)."""

    code = "NOTION_UNAUTHORIZED"


class NotionRestricted(NotionAPIError):
    """Integration lacks capability for the resource (403)."""

    code = "NOTION_RESTRICTED"


class NotionNotFound(NotionAPIError):
    """Object does not exist or is not shared with the integration (404)."""

    code = "NOTION_NOT_FOUND"


class NotionConflict(NotionAPIError):
    """Transaction conflicted with a concurrent edit (409)."""

    code = "NOTION_CONFLICT"


class NotionRateLimited(NotionAPIError):
    """Rate limit exceeded (429); retryable."""

    code = "NOTION_RATE_LIMITED"


class NotionUnavailable(NotionAPIError):
    """Notion is unavailable, timed out, or the circuit is open; retryable."""

    code = "NOTION_UNAVAILABLE"


class NotionResponseError(NotionAPIError):
    """Response body was not a JSON object."""

    code = "NOTION_RESPONSE_ERROR"
