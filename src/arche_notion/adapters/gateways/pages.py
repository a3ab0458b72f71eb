# Copyright (c)
# SPDX-License-Identifier: MIT
"""Pages gateway."""

from __future__ import annotations

from arche_notion.adapters.gateways.base import NotionGateway
from arche_notion.application.schemas.pages import PagesCreateParameters, PagesUpdateParameters
from arche_notion.domain.entities.pages import Page


class PagesGateway(NotionGateway):
    """``/pages`` endpoints."""

    async def create(self, parameters: PagesCreateParameters) -> Page:
        """Create a page under a data source, page or the workspace."""
        page: Page = await self._call("pages.create", body=parameters)
        return page

    async def retrieve(self, page_id: str) -> Page:
        """Retrieve a page and its property values."""
        page: Page = await self._call("pages.retrieve", ids={"page_id": page_id})
        return page

    async def update(self, parameters: PagesUpdateParameters) -> Page:
        """Update properties, icon, cover, lock or trash state of a page."""
        page: Page = await self._call("pages.update", body=parameters)
        return page
