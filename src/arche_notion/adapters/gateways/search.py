# Copyright (c)
# SPDX-License-Identifier: MIT
"""Search gateway."""

from __future__ import annotations

from arche_notion.adapters.gateways.base import NotionGateway
from arche_notion.application.schemas.search import SearchRequest
from arche_notion.domain.entities.responses import SearchResponse


class SearchGateway(NotionGateway):
    """``POST /search``; call the gateway directly: ``await api.search(request)``."""

    async def __call__(self, request: SearchRequest | None = None) -> SearchResponse:
        """Search pages and data sources shared with the integration by title."""
        response: SearchResponse = await self._call("search", body=request or SearchRequest())
        return response
