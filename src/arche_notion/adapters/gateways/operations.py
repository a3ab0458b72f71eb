# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Operation table.

Purpose:
    Fixed, read-only mapping from operation name to HTTP method, path template
    and the entity type its response decodes into. Gateways look operations up
    here instead of hard-coding routes.

Layer:
    adapters/gateways
"""

from __future__ import annotations

import string
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final
from urllib.parse import quote

from arche_notion.domain.entities.blocks import Block
from arche_notion.domain.entities.comments import Comment
from arche_notion.domain.entities.data_sources import DataSource
from arche_notion.domain.entities.databases import Database
from arche_notion.domain.entities.pages import Page
from arche_notion.domain.entities.responses import (
    BlockChildrenResponse,
    CommentListResponse,
    QueryDataSourceResponse,
    SearchResponse,
    UserListResponse,
)
from arche_notion.domain.entities.users import User


@dataclass(frozen=True, slots=True)
class Operation:
    """One API operation.

    Attributes:
        name: Dotted operation name, also the metrics/span ``endpoint`` label.
        method: HTTP method.
        path: Path template with ``{name}`` placeholders for identifiers.
        response_type: Entity (or union root) the response decodes into.
    """

    name: str
    method: str
    path: str
    response_type: type

    @property
    def path_params(self) -> tuple[str, ...]:
        """Placeholder names in ``path``, in order."""
        return tuple(
            name for _, name, _, _ in string.Formatter().parse(self.path) if name is not None
        )

    def render_path(self, **ids: str) -> str:
        """Fill the path template; identifiers are percent-encoded.

        Raises:
            ValueError: If an identifier is missing or empty.
        """
        missing = [name for name in self.path_params if not ids.get(name)]
        if missing:
            raise ValueError(f"{self.name} requires path parameter(s): {', '.join(missing)}")
        return self.path.format(**{name: quote(ids[name], safe="") for name in self.path_params})


def _op(name: str, method: str, path: str, response_type: type) -> tuple[str, Operation]:
    return name, Operation(name=name, method=method, path=path, response_type=response_type)


OPERATIONS: Final[Mapping[str, Operation]] = MappingProxyType(
    dict(
        [
            _op("pages.create", "POST", "/pages", Page),
            _op("pages.retrieve", "GET", "/pages/{page_id}", Page),
            _op("pages.update", "PATCH", "/pages/{page_id}", Page),
            _op("databases.create", "POST", "/databases", Database),
            _op("databases.retrieve", "GET", "/databases/{database_id}", Database),
            _op("databases.update", "PATCH", "/databases/{database_id}", Database),
            _op("data_sources.create", "POST", "/data_sources", DataSource),
            _op("data_sources.retrieve", "GET", "/data_sources/{data_source_id}", DataSource),
            _op("data_sources.update", "PATCH", "/data_sources/{data_source_id}", DataSource),
            _op(
                "data_sources.query",
                "POST",
                "/data_sources/{data_source_id}/query",
                QueryDataSourceResponse,
            ),
            _op("blocks.retrieve", "GET", "/blocks/{block_id}", Block),
            _op("blocks.update", "PATCH", "/blocks/{block_id}", Block),
            _op("blocks.delete", "DELETE", "/blocks/{block_id}", Block),
            _op("blocks.children.list", "GET", "/blocks/{block_id}/children", BlockChildrenResponse),
            _op(
                "blocks.children.append",
                "PATCH",
                "/blocks/{block_id}/children",
                BlockChildrenResponse,
            ),
            _op("users.me", "GET", "/users/me", User),
            _op("users.retrieve", "GET", "/users/{user_id}", User),
            _op("users.list", "GET", "/users", UserListResponse),
            _op("search", "POST", "/search", SearchResponse),
            _op("comments.create", "POST", "/comments", Comment),
            _op("comments.list", "GET", "/comments", CommentListResponse),
        ]
    )
)


__all__ = ["OPERATIONS", "Operation"]
