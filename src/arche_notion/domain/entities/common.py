# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Shared value shapes.

Purpose:
    Small value objects reused across property values, mentions and blocks.

Layer:
    domain/entities
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from arche_notion.domain.entities.base import BaseEntity

# Numbers keep whatever representation the JSON loader produced.
type Number = int | float | Decimal


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectReference(BaseEntity):
    """Reference to another object by id (relations, page/database mentions)."""

    id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class DateValue(BaseEntity):
    """Date or date range; ``start``/``end`` are the API's ISO strings, unparsed."""

    start: str
    end: str | None = None
    time_zone: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SelectOption(BaseEntity):
    """Select, multi-select or status option."""

    name: str
    id: str | None = None
    color: str | None = None
    description: str | None = None
