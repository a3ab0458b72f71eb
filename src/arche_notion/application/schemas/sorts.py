# Copyright (c)
# SPDX-License-Identifier: MIT
"""Sort criteria for data source queries and search."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Direction(str, Enum):
    """Sort direction."""

    ASCENDING = "ascending"
    DESCENDING = "descending"

    def __str__(self) -> str:
        return self.value


class Timestamp(str, Enum):
    """Page timestamps usable as sort or filter keys."""

    CREATED_TIME = "created_time"
    LAST_EDITED_TIME = "last_edited_time"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Sort(ABC):
    """Base class for query sorts."""

    @abstractmethod
    def to_json(self) -> dict[str, Any]:
        """Return the wire form of this sort."""


@dataclass(frozen=True)
class PropertySort(Sort):
    """Sort by a property value."""

    property: str
    direction: Direction = Direction.ASCENDING

    def to_json(self) -> dict[str, Any]:
        return {"property": self.property, "direction": self.direction.value}


@dataclass(frozen=True)
class TimestampSort(Sort):
    """Sort by when a page was created or last edited."""

    timestamp: Timestamp = Timestamp.LAST_EDITED_TIME
    direction: Direction = Direction.DESCENDING

    def to_json(self) -> dict[str, Any]:
        return {"timestamp": self.timestamp.value, "direction": self.direction.value}


__all__ = ["Direction", "PropertySort", "Sort", "Timestamp", "TimestampSort"]
