# Copyright (c)
# SPDX-License-Identifier: MIT
"""Application-level Notion transport interface.

Synopsis:
    The one call gateways need from the HTTP layer: send a JSON body, get a
    JSON object back. ``NotionClient`` in
    ``infrastructure/external_apis/notion/client.py`` implements it; tests may
    substitute any object with the same coroutine.

Layer:
    application/interfaces
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class NotionTransport(Protocol):
    """Send one Notion API call and return the decoded-from-wire JSON object."""

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        endpoint: str,
    ) -> Mapping[str, Any]:
        """Perform the call.

        Args:
            method: HTTP method.
            path: Path relative to the API base URL.
            json: JSON-compatible request body.
            params: Query parameters.
            endpoint: Logical operation name, e.g. ``"pages.retrieve"``.

        Returns:
            The response body as a mapping.
        """
        ...
