# Copyright (c)
# SPDX-License-Identifier: MIT
"""
NotionAPI facade.

Purpose:
    Composition root wiring settings, the resilient transport and one gateway
    per resource behind a single object.

Typical usage:
    async with NotionAPI.from_env() as api:
        page = await api.pages.retrieve("59833787-2cf9-4fdf-8782-e53db20768a5")
        results = await api.data_sources.query(
            QueryDataSourceRequest(data_source_id=ds_id, filter=TitleFilter("Name", contains="q3"))
        )
"""

from __future__ import annotations

from typing import Any

import httpx

from arche_notion.adapters.gateways.blocks import BlocksGateway
from arche_notion.adapters.gateways.comments import CommentsGateway
from arche_notion.adapters.gateways.data_sources import DataSourcesGateway
from arche_notion.adapters.gateways.databases import DatabasesGateway
from arche_notion.adapters.gateways.pages import PagesGateway
from arche_notion.adapters.gateways.search import SearchGateway
from arche_notion.adapters.gateways.users import UsersGateway
from arche_notion.application.interfaces.notion_transport import NotionTransport
from arche_notion.infrastructure.external_apis.notion.client import NotionClient
from arche_notion.infrastructure.external_apis.notion.settings import NotionSettings


class NotionAPI:
    """Typed Notion API client.

    Attributes:
        pages: ``/pages`` operations.
        databases: ``/databases`` operations.
        data_sources: ``/data_sources`` operations, including ``query``.
        blocks: ``/blocks`` operations; ``blocks.children`` lists and appends.
        users: ``/users`` operations.
        search: Callable ``POST /search``.
        comments: ``/comments`` operations.
    """

    def __init__(self, transport: NotionTransport) -> None:
        """Initialize the facade over any transport (usually ``NotionClient``)."""
        self._transport = transport
        self.pages = PagesGateway(transport)
        self.databases = DatabasesGateway(transport)
        self.data_sources = DataSourcesGateway(transport)
        self.blocks = BlocksGateway(transport)
        self.users = UsersGateway(transport)
        self.search = SearchGateway(transport)
        self.comments = CommentsGateway(transport)

    @classmethod
    def from_settings(
        cls,
        settings: NotionSettings,
        *,
        http: httpx.AsyncClient | None = None,
    ) -> NotionAPI:
        """Build the facade with a ``NotionClient`` for ``settings``."""
        return cls(NotionClient(settings, http=http))

    @classmethod
    def from_env(cls, **overrides: Any) -> NotionAPI:
        """Build the facade from ``NOTION_*`` environment variables.

        Args:
            **overrides: Explicit settings values, e.g. ``token="secret_..."``.
        """
        return cls.from_settings(NotionSettings(**overrides))

    async def aclose(self) -> None:
        """Close the transport if it holds resources."""
        if isinstance(self._transport, NotionClient):
            await self._transport.aclose()

    async def __aenter__(self) -> NotionAPI:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


__all__ = ["NotionAPI"]
