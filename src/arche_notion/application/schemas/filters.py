# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Data source query filters (request side).

Purpose:
    Typed builders for the ``filter`` body of ``POST
    /data_sources/{id}/query``. Filters are only ever sent, never returned, so
    they encode themselves via ``to_json()`` instead of going through the
    variant registry.

Layer:
    application/schemas

Wire shapes:
    * property filter:  ``{"property": "Name", "title": {"starts_with": "he"}}``
    * timestamp filter: ``{"timestamp": "created_time", "created_time": {...}}``
    * compound filter:  ``{"and": [...]}`` / ``{"or": [...]}``

Typical usage:
    TitleFilter("Name", starts_with="he")
    AndFilter((CheckboxFilter("Done", equals=False), DateFilter("Due", past_week=True)))
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar

# Relative date conditions are sent as an empty object (``"past_week": {}``).
_RELATIVE_DATE_CONDITIONS = frozenset(
    {"past_week", "past_month", "past_year", "this_week", "next_week", "next_month", "next_year"}
)

type NumberLike = int | float | Decimal


@dataclass(frozen=True)
class Filter(ABC):
    """Base class for query filters."""

    @abstractmethod
    def to_json(self) -> dict[str, Any]:
        """Return the wire form of this filter."""


def _conditions(obj: Filter, *, skip: frozenset[str]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for f in dataclasses.fields(obj):
        if f.name in skip:
            continue
        value = getattr(obj, f.name)
        if value is None or value is False and f.name in _RELATIVE_DATE_CONDITIONS:
            continue
        out[f.name] = {} if f.name in _RELATIVE_DATE_CONDITIONS else value
    return out


@dataclass(frozen=True)
class PropertyFilter(Filter):
    """Filter on one property; subclasses set ``FILTER_TYPE`` and declare conditions."""

    FILTER_TYPE: ClassVar[str]

    property: str

    def __post_init__(self) -> None:
        if not _conditions(self, skip=frozenset({"property"})):
            raise ValueError(f"{type(self).__name__} requires at least one condition")

    def to_json(self) -> dict[str, Any]:
        return {
            "property": self.property,
            self.FILTER_TYPE: _conditions(self, skip=frozenset({"property"})),
        }


@dataclass(frozen=True)
class _TextConditions(PropertyFilter):
    equals: str | None = None
    does_not_equal: str | None = None
    contains: str | None = None
    does_not_contain: str | None = None
    starts_with: str | None = None
    ends_with: str | None = None
    is_empty: bool | None = None
    is_not_empty: bool | None = None


@dataclass(frozen=True)
class TitleFilter(_TextConditions):
    FILTER_TYPE: ClassVar[str] = "title"


@dataclass(frozen=True)
class RichTextFilter(_TextConditions):
    FILTER_TYPE: ClassVar[str] = "rich_text"


@dataclass(frozen=True)
class UrlFilter(_TextConditions):
    FILTER_TYPE: ClassVar[str] = "url"


@dataclass(frozen=True)
class EmailFilter(_TextConditions):
    FILTER_TYPE: ClassVar[str] = "email"


@dataclass(frozen=True)
class PhoneNumberFilter(_TextConditions):
    FILTER_TYPE: ClassVar[str] = "phone_number"


@dataclass(frozen=True)
class _NumericConditions(PropertyFilter):
    equals: NumberLike | None = None
    does_not_equal: NumberLike | None = None
    greater_than: NumberLike | None = None
    less_than: NumberLike | None = None
    greater_than_or_equal_to: NumberLike | None = None
    less_than_or_equal_to: NumberLike | None = None


@dataclass(frozen=True)
class NumberFilter(_NumericConditions):
    FILTER_TYPE: ClassVar[str] = "number"

    is_empty: bool | None = None
    is_not_empty: bool | None = None


@dataclass(frozen=True)
class UniqueIdFilter(_NumericConditions):
    FILTER_TYPE: ClassVar[str] = "unique_id"


@dataclass(frozen=True)
class CheckboxFilter(PropertyFilter):
    FILTER_TYPE: ClassVar[str] = "checkbox"

    equals: bool | None = None
    does_not_equal: bool | None = None


@dataclass(frozen=True)
class _OptionConditions(PropertyFilter):
    equals: str | None = None
    does_not_equal: str | None = None
    is_empty: bool | None = None
    is_not_empty: bool | None = None


@dataclass(frozen=True)
class SelectFilter(_OptionConditions):
    FILTER_TYPE: ClassVar[str] = "select"


@dataclass(frozen=True)
class StatusFilter(_OptionConditions):
    FILTER_TYPE: ClassVar[str] = "status"


@dataclass(frozen=True)
class _ContainsConditions(PropertyFilter):
    contains: str | None = None
    does_not_contain: str | None = None
    is_empty: bool | None = None
    is_not_empty: bool | None = None


@dataclass(frozen=True)
class MultiSelectFilter(_ContainsConditions):
    FILTER_TYPE: ClassVar[str] = "multi_select"


@dataclass(frozen=True)
class PeopleFilter(_ContainsConditions):
    FILTER_TYPE: ClassVar[str] = "people"


@dataclass(frozen=True)
class RelationFilter(_ContainsConditions):
    FILTER_TYPE: ClassVar[str] = "relation"


@dataclass(frozen=True)
class FilesFilter(PropertyFilter):
    FILTER_TYPE: ClassVar[str] = "files"

    is_empty: bool | None = None
    is_not_empty: bool | None = None


@dataclass(frozen=True)
class _DateConditions:
    """Date conditions; values are ISO 8601 strings sent as-is."""

    equals: str | None = None
    before: str | None = None
    after: str | None = None
    on_or_before: str | None = None
    on_or_after: str | None = None
    is_empty: bool | None = None
    is_not_empty: bool | None = None
    past_week: bool = False
    past_month: bool = False
    past_year: bool = False
    this_week: bool = False
    next_week: bool = False
    next_month: bool = False
    next_year: bool = False


@dataclass(frozen=True)
class DateFilter(_DateConditions, PropertyFilter):
    FILTER_TYPE: ClassVar[str] = "date"


@dataclass(frozen=True)
class TimestampFilter(Filter):
    """Filter on a page timestamp rather than a property."""

    TIMESTAMP: ClassVar[str]

    def __post_init__(self) -> None:
        if not _conditions(self, skip=frozenset()):
            raise ValueError(f"{type(self).__name__} requires at least one condition")

    def to_json(self) -> dict[str, Any]:
        return {"timestamp": self.TIMESTAMP, self.TIMESTAMP: _conditions(self, skip=frozenset())}


@dataclass(frozen=True)
class CreatedTimeFilter(_DateConditions, TimestampFilter):
    TIMESTAMP: ClassVar[str] = "created_time"


@dataclass(frozen=True)
class LastEditedTimeFilter(_DateConditions, TimestampFilter):
    TIMESTAMP: ClassVar[str] = "last_edited_time"


@dataclass(frozen=True)
class _CompoundFilter(Filter):
    OPERATOR: ClassVar[str]

    filters: tuple[Filter, ...]

    def __post_init__(self) -> None:
        if not self.filters:
            raise ValueError(f"{type(self).__name__} requires at least one filter")

    def to_json(self) -> dict[str, Any]:
        return {self.OPERATOR: [f.to_json() for f in self.filters]}


@dataclass(frozen=True)
class AndFilter(_CompoundFilter):
    OPERATOR: ClassVar[str] = "and"


@dataclass(frozen=True)
class OrFilter(_CompoundFilter):
    OPERATOR: ClassVar[str] = "or"


__all__ = [
    "AndFilter",
    "CheckboxFilter",
    "CreatedTimeFilter",
    "DateFilter",
    "EmailFilter",
    "FilesFilter",
    "Filter",
    "LastEditedTimeFilter",
    "MultiSelectFilter",
    "NumberFilter",
    "OrFilter",
    "PeopleFilter",
    "PhoneNumberFilter",
    "PropertyFilter",
    "RelationFilter",
    "RichTextFilter",
    "SelectFilter",
    "StatusFilter",
    "TimestampFilter",
    "TitleFilter",
    "UniqueIdFilter",
    "UrlFilter",
]
