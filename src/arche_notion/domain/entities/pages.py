# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Page entity.

Purpose:
    A Notion page: metadata plus the ``properties`` map of property name to
    ``property_value`` union. Pages appear as standalone objects, as data source
    query results and as search hits.

Layer:
    domain/entities
"""

from __future__ import annotations

from dataclasses import dataclass

from arche_notion.domain.codec.registry import variant
from arche_notion.domain.entities.files import FileObject, Icon
from arche_notion.domain.entities.objects import NotionObject, QueryDataSourceResult, SearchResult
from arche_notion.domain.entities.parents import Parent
from arche_notion.domain.entities.property_values import PropertyValue, TitlePropertyValue
from arche_notion.domain.entities.users import PartialUser
from arche_notion.domain.enums.object_type import ObjectType


@variant("search_result", ObjectType.PAGE)
@variant("query_data_source_result", ObjectType.PAGE)
@variant("notion_object", ObjectType.PAGE)
@dataclass(frozen=True, slots=True, kw_only=True)
class Page(NotionObject, QueryDataSourceResult, SearchResult):
    """A Notion page."""

    id: str
    properties: dict[str, PropertyValue] | None = None
    parent: Parent | None = None
    created_time: str | None = None
    created_by: PartialUser | None = None
    last_edited_time: str | None = None
    last_edited_by: PartialUser | None = None
    icon: Icon | None = None
    cover: FileObject | None = None
    archived: bool | None = None
    in_trash: bool | None = None
    is_locked: bool | None = None
    url: str | None = None
    public_url: str | None = None

    @property
    def title(self) -> str | None:
        """Plain text of the page's title property, if it has one."""
        for value in (self.properties or {}).values():
            if isinstance(value, TitlePropertyValue):
                return value.text
        return None
