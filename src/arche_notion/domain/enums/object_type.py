# src/arche_notion/domain/enums/object_type.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Notion object types.

Purpose:
    Values of the top-level ``"object"`` discriminator carried by every object
    the API returns.

Layer:
    domain
"""

from __future__ import annotations

from enum import Enum


class ObjectType(str, Enum):
    """Values of the ``"object"`` key on Notion API objects."""

    PAGE = "page"
    DATABASE = "database"
    DATA_SOURCE = "data_source"
    BLOCK = "block"
    USER = "user"
    COMMENT = "comment"
    LIST = "list"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return the wire value."""
        return self.value
