# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Data source entity.

Purpose:
    A data source: the table inside a database, owning the property schema
    (``properties``: name -> ``property_config`` union) and the rows (pages).
    Data sources are query results of wiki-style sources and search hits.

Layer:
    domain/entities
"""

from __future__ import annotations

from dataclasses import dataclass

from arche_notion.domain.codec.registry import variant
from arche_notion.domain.entities.files import FileObject, Icon
from arche_notion.domain.entities.objects import NotionObject, QueryDataSourceResult, SearchResult
from arche_notion.domain.entities.parents import Parent
from arche_notion.domain.entities.property_configs import PropertyConfig
from arche_notion.domain.entities.rich_text import RichText
from arche_notion.domain.entities.users import PartialUser
from arche_notion.domain.enums.object_type import ObjectType


@variant("search_result", ObjectType.DATA_SOURCE)
@variant("query_data_source_result", ObjectType.DATA_SOURCE)
@variant("notion_object", ObjectType.DATA_SOURCE)
@dataclass(frozen=True, slots=True, kw_only=True)
class DataSource(NotionObject, QueryDataSourceResult, SearchResult):
    """A Notion data source."""

    id: str
    title: tuple[RichText, ...] | None = None
    description: tuple[RichText, ...] | None = None
    properties: dict[str, PropertyConfig] | None = None
    parent: Parent | None = None
    database_parent: Parent | None = None
    created_time: str | None = None
    created_by: PartialUser | None = None
    last_edited_time: str | None = None
    last_edited_by: PartialUser | None = None
    icon: Icon | None = None
    cover: FileObject | None = None
    archived: bool | None = None
    in_trash: bool | None = None
    is_inline: bool | None = None
    url: str | None = None
    public_url: str | None = None
