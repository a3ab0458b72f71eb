# Copyright (c)
# SPDX-License-Identifier: MIT
"""Request parameters for the pages endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from arche_notion.application.schemas._common import path_param
from arche_notion.domain.entities.blocks import Block
from arche_notion.domain.entities.files import FileObject, Icon
from arche_notion.domain.entities.parents import Parent
from arche_notion.domain.entities.property_values import PropertyValue


@dataclass(frozen=True, slots=True, kw_only=True)
class PagesCreateParameters:
    """Body of ``POST /pages``.

    Attributes:
        parent: Where the page lives (a data source, page or the workspace).
        properties: Property values keyed by property name. For a page in a
            data source these must match its schema; otherwise only ``title``.
        children: Initial content blocks (at most 100).
        icon: Page icon.
        cover: Cover image; only external files are accepted by Notion.
    """

    parent: Parent
    properties: dict[str, PropertyValue] | None = None
    children: tuple[Block, ...] | None = None
    icon: Icon | None = None
    cover: FileObject | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PagesUpdateParameters:
    """Body of ``PATCH /pages/{page_id}``; only set fields are sent."""

    page_id: str = path_param()
    properties: dict[str, PropertyValue] | None = None
    in_trash: bool | None = None
    is_locked: bool | None = None
    icon: Icon | None = None
    cover: FileObject | None = None


__all__ = ["PagesCreateParameters", "PagesUpdateParameters"]
