# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Database entity.

Purpose:
    A database container. Since API version 2025-09-03 the schema lives on its
    data sources; the database lists them by id and name.

Layer:
    domain/entities
"""

from __future__ import annotations

from dataclasses import dataclass

from arche_notion.domain.codec.registry import variant
from arche_notion.domain.entities.base import BaseEntity
from arche_notion.domain.entities.files import FileObject, Icon
from arche_notion.domain.entities.objects import NotionObject
from arche_notion.domain.entities.parents import Parent
from arche_notion.domain.entities.rich_text import RichText
from arche_notion.domain.entities.users import PartialUser
from arche_notion.domain.enums.object_type import ObjectType


@dataclass(frozen=True, slots=True, kw_only=True)
class DataSourceReference(BaseEntity):
    """Entry of ``Database.data_sources``."""

    id: str
    name: str | None = None


@variant("notion_object", ObjectType.DATABASE)
@dataclass(frozen=True, slots=True, kw_only=True)
class Database(NotionObject):
    """A Notion database."""

    id: str
    title: tuple[RichText, ...] | None = None
    description: tuple[RichText, ...] | None = None
    parent: Parent | None = None
    data_sources: tuple[DataSourceReference, ...] | None = None
    is_inline: bool | None = None
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
