# Copyright (c)
# SPDX-License-Identifier: MIT
"""
List responses.

Purpose:
    ``"object": "list"`` envelopes returned by paginated endpoints. Each one
    fixes the union its ``results`` decode into.

Layer:
    domain/entities

Notes:
    Cursor iteration is left to callers: pass ``next_cursor`` back as
    ``start_cursor`` while ``has_more`` is true.
"""

from __future__ import annotations

from dataclasses import dataclass

from arche_notion.domain.entities.base import BaseEntity
from arche_notion.domain.entities.blocks import Block
from arche_notion.domain.entities.comments import Comment
from arche_notion.domain.entities.objects import QueryDataSourceResult, SearchResult
from arche_notion.domain.entities.users import User


@dataclass(frozen=True, slots=True, kw_only=True)
class ListResponse(BaseEntity):
    """Pagination fields shared by every list response."""

    has_more: bool = False
    next_cursor: str | None = None
    request_id: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class QueryDataSourceResponse(ListResponse):
    results: tuple[QueryDataSourceResult, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class SearchResponse(ListResponse):
    results: tuple[SearchResult, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class BlockChildrenResponse(ListResponse):
    results: tuple[Block, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class UserListResponse(ListResponse):
    results: tuple[User, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class CommentListResponse(ListResponse):
    results: tuple[Comment, ...]
