# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Parent entities.

Purpose:
    The ``parent`` union describing where a page, database, data source, block
    or comment lives. The same shapes are sent on create requests.

Layer:
    domain/entities
"""

from __future__ import annotations

from dataclasses import dataclass

from arche_notion.domain.codec.registry import union, variant
from arche_notion.domain.entities.base import BaseEntity


@union("parent", key="type")
@dataclass(frozen=True, slots=True, kw_only=True)
class Parent(BaseEntity):
    """Location of an object; concrete shape selected by ``type``."""


@variant("parent", "database_id")
@dataclass(frozen=True, slots=True, kw_only=True)
class DatabaseParent(Parent):
    database_id: str


@variant("parent", "data_source_id")
@dataclass(frozen=True, slots=True, kw_only=True)
class DataSourceParent(Parent):
    """Page inside a data source; responses also name the owning database."""

    data_source_id: str
    database_id: str | None = None


@variant("parent", "page_id")
@dataclass(frozen=True, slots=True, kw_only=True)
class PageParent(Parent):
    page_id: str


@variant("parent", "block_id")
@dataclass(frozen=True, slots=True, kw_only=True)
class BlockParent(Parent):
    block_id: str


@variant("parent", "workspace")
@dataclass(frozen=True, slots=True, kw_only=True)
class WorkspaceParent(Parent):
    workspace: bool = True
