# Copyright (c)
# SPDX-License-Identifier: MIT
"""Comment entity (page or block discussion entry)."""

from __future__ import annotations

from dataclasses import dataclass

from arche_notion.domain.codec.registry import variant
from arche_notion.domain.entities.objects import NotionObject
from arche_notion.domain.entities.parents import Parent
from arche_notion.domain.entities.rich_text import RichText
from arche_notion.domain.entities.users import PartialUser
from arche_notion.domain.enums.object_type import ObjectType


@variant("notion_object", ObjectType.COMMENT)
@dataclass(frozen=True, slots=True, kw_only=True)
class Comment(NotionObject):
    id: str
    rich_text: tuple[RichText, ...]
    parent: Parent | None = None
    discussion_id: str | None = None
    created_time: str | None = None
    last_edited_time: str | None = None
    created_by: PartialUser | None = None
