# Copyright (c)
# SPDX-License-Identifier: MIT
"""Request parameters for the databases endpoints.

Since API version 2025-09-03 a database is a container of data sources; the
property schema lives on the data source, so creating a database takes the
schema of its first data source.
"""

from __future__ import annotations

from dataclasses import dataclass

from arche_notion.application.schemas._common import path_param
from arche_notion.domain.entities.files import FileObject, Icon
from arche_notion.domain.entities.parents import Parent
from arche_notion.domain.entities.property_configs import PropertyConfig
from arche_notion.domain.entities.rich_text import RichText


@dataclass(frozen=True, slots=True, kw_only=True)
class InitialDataSourceRequest:
    """Schema of the data source created together with a database."""

    properties: dict[str, PropertyConfig]


@dataclass(frozen=True, slots=True, kw_only=True)
class DatabasesCreateRequest:
    """Body of ``POST /databases``."""

    parent: Parent
    title: tuple[RichText, ...] | None = None
    description: tuple[RichText, ...] | None = None
    initial_data_source: InitialDataSourceRequest | None = None
    is_inline: bool | None = None
    icon: Icon | None = None
    cover: FileObject | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class DatabasesUpdateRequest:
    """Body of ``PATCH /databases/{database_id}``."""

    database_id: str = path_param()
    parent: Parent | None = None
    title: tuple[RichText, ...] | None = None
    description: tuple[RichText, ...] | None = None
    is_inline: bool | None = None
    is_locked: bool | None = None
    in_trash: bool | None = None
    icon: Icon | None = None
    cover: FileObject | None = None


__all__ = ["DatabasesCreateRequest", "DatabasesUpdateRequest", "InitialDataSourceRequest"]
