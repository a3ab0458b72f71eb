# Copyright (c)
# SPDX-License-Identifier: MIT
"""Databases gateway."""

from __future__ import annotations

from arche_notion.adapters.gateways.base import NotionGateway
from arche_notion.application.schemas.databases import (
    DatabasesCreateRequest,
    DatabasesUpdateRequest,
)
from arche_notion.domain.entities.databases import Database


class DatabasesGateway(NotionGateway):
    """``/databases`` endpoints (containers of data sources)."""

    async def create(self, request: DatabasesCreateRequest) -> Database:
        database: Database = await self._call("databases.create", body=request)
        return database

    async def retrieve(self, database_id: str) -> Database:
        database: Database = await self._call(
            "databases.retrieve", ids={"database_id": database_id}
        )
        return database

    async def update(self, request: DatabasesUpdateRequest) -> Database:
        database: Database = await self._call("databases.update", body=request)
        return database
