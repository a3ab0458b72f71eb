# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Top-level object unions.

Purpose:
    Unions keyed on the ``"object"`` discriminator:

    * ``notion_object``: any object the API returns (page, database, data
      source, block, user, comment). Blocks and users dispatch a second time on
      their own ``"type"`` key.
    * ``query_data_source_result``: rows of a data source query (pages, or
      data sources for wiki-style sources).
    * ``search_result``: hits of ``POST /search``.

Layer:
    domain/entities
"""

from __future__ import annotations

from dataclasses import dataclass

from arche_notion.domain.codec.registry import union
from arche_notion.domain.entities.base import BaseEntity


@union("notion_object", key="object")
@dataclass(frozen=True, slots=True, kw_only=True)
class NotionObject(BaseEntity):
    """Any object returned by the API, selected by its ``"object"`` key."""


@union("query_data_source_result", key="object")
class QueryDataSourceResult:
    """Marker for results of a data source query."""

    __slots__ = ()


@union("search_result", key="object")
class SearchResult:
    """Marker for results of a search."""

    __slots__ = ()
