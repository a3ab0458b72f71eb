# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Request parameters for the data source endpoints.

Purpose:
    Create, retrieve, update and query data sources (the tables inside a
    database, API version 2025-09-03).

Layer:
    application/schemas

Notes:
    - In ``UpdateDataSourceRequest.properties`` a ``None`` entry is sent as
      JSON ``null``, which removes that property from the schema.
    - Query results mix pages and data sources; the response decodes them
      through the ``query_data_source_result`` union.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from arche_notion.application.schemas._common import check_page_size, path_param
from arche_notion.application.schemas.filters import Filter
from arche_notion.application.schemas.sorts import Sort
from arche_notion.domain.codec.encoder import encode
from arche_notion.domain.entities.files import Icon
from arche_notion.domain.entities.parents import Parent
from arche_notion.domain.entities.property_configs import PropertyConfig
from arche_notion.domain.entities.rich_text import RichText


@dataclass(frozen=True, slots=True, kw_only=True)
class CreateDataSourceRequest:
    """Body of ``POST /data_sources``; ``parent`` is a ``DatabaseParent``."""

    parent: Parent
    properties: dict[str, PropertyConfig]
    title: tuple[RichText, ...] | None = None
    icon: Icon | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class RetrieveDataSourceRequest:
    """Path of ``GET /data_sources/{data_source_id}``."""

    data_source_id: str = path_param()


@dataclass(frozen=True, slots=True, kw_only=True)
class UpdatePropertyConfiguration:
    """Rename and/or retype one existing property.

    ``config`` carries the new type and its settings; ``name`` renames the
    property. At least one of the two is required.
    """

    name: str | None = None
    config: PropertyConfig | None = None

    def __post_init__(self) -> None:
        if self.name is None and self.config is None:
            raise ValueError("UpdatePropertyConfiguration needs a name or a config")

    def to_json(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.config is not None:
            encoded = encode(self.config)
            assert isinstance(encoded, dict)
            body.update(encoded)
        if self.name is not None:
            body["name"] = self.name
        return body


@dataclass(frozen=True, slots=True, kw_only=True)
class UpdateDataSourceRequest:
    """Body of ``PATCH /data_sources/{data_source_id}``."""

    data_source_id: str = path_param()
    title: tuple[RichText, ...] | None = None
    icon: Icon | None = None
    properties: dict[str, UpdatePropertyConfiguration | None] | None = None
    in_trash: bool | None = None
    parent: Parent | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class QueryDataSourceRequest:
    """Body of ``POST /data_sources/{data_source_id}/query``."""

    data_source_id: str = path_param()
    filter: Filter | None = None
    sorts: tuple[Sort, ...] | None = None
    start_cursor: str | None = None
    page_size: int | None = None

    def __post_init__(self) -> None:
        check_page_size(self.page_size)


__all__ = [
    "CreateDataSourceRequest",
    "QueryDataSourceRequest",
    "RetrieveDataSourceRequest",
    "UpdateDataSourceRequest",
    "UpdatePropertyConfiguration",
]
