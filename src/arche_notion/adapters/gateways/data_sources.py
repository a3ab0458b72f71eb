# Copyright (c)
# SPDX-License-Identifier: MIT
"""Data sources gateway.

Query responses mix pages and data sources in ``results``; each element is
decoded through the ``query_data_source_result`` union on its ``object`` key.
"""

from __future__ import annotations

from arche_notion.adapters.gateways.base import NotionGateway
from arche_notion.application.schemas.data_sources import (
    CreateDataSourceRequest,
    QueryDataSourceRequest,
    RetrieveDataSourceRequest,
    UpdateDataSourceRequest,
)
from arche_notion.domain.entities.data_sources import DataSource
from arche_notion.domain.entities.responses import QueryDataSourceResponse


class DataSourcesGateway(NotionGateway):
    """``/data_sources`` endpoints."""

    async def create(self, request: CreateDataSourceRequest) -> DataSource:
        data_source: DataSource = await self._call("data_sources.create", body=request)
        return data_source

    async def retrieve(self, request: RetrieveDataSourceRequest | str) -> DataSource:
        """Retrieve a data source schema; accepts a request object or a bare id."""
        if isinstance(request, str):
            request = RetrieveDataSourceRequest(data_source_id=request)
        data_source: DataSource = await self._call(
            "data_sources.retrieve", ids={"data_source_id": request.data_source_id}
        )
        return data_source

    async def update(self, request: UpdateDataSourceRequest) -> DataSource:
        data_source: DataSource = await self._call("data_sources.update", body=request)
        return data_source

    async def query(self, request: QueryDataSourceRequest) -> QueryDataSourceResponse:
        """Run a filtered, sorted query; returns one page of results."""
        response: QueryDataSourceResponse = await self._call("data_sources.query", body=request)
        return response
