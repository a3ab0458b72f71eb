# Copyright (c)
# SPDX-License-Identifier: MIT
"""Request parameters for ``POST /search``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from arche_notion.application.schemas._common import check_page_size
from arche_notion.application.schemas.sorts import Direction


class SearchObjectType(str, Enum):
    """Object kinds that search can be narrowed to."""

    PAGE = "page"
    DATA_SOURCE = "data_source"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class SearchFilter:
    """Restrict results to pages or to data sources."""

    value: SearchObjectType

    def to_json(self) -> dict[str, Any]:
        return {"property": "object", "value": self.value.value}


@dataclass(frozen=True, slots=True)
class SearchSort:
    """Search only sorts by ``last_edited_time``."""

    direction: Direction = Direction.DESCENDING

    def to_json(self) -> dict[str, Any]:
        return {"timestamp": "last_edited_time", "direction": self.direction.value}


@dataclass(frozen=True, slots=True, kw_only=True)
class SearchRequest:
    """Body of ``POST /search``; an empty request lists everything shared."""

    query: str | None = None
    filter: SearchFilter | None = None
    sort: SearchSort | None = None
    start_cursor: str | None = None
    page_size: int | None = None

    def __post_init__(self) -> None:
        check_page_size(self.page_size)


__all__ = ["SearchFilter", "SearchObjectType", "SearchRequest", "SearchSort"]
