# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Page property values.

Purpose:
    The ``property_value`` union (one variant per property type) found in a
    page's ``properties`` map, plus the nested ``formula`` and ``rollup`` result
    unions. The same shapes are sent when creating or updating pages.

Layer:
    domain/entities

Notes:
    - Value-bearing keys that Notion reports as ``null`` when empty (``number``,
      ``select``, ``date``, ``url`` ...) are required but nullable: the key must
      be present, its value may be ``None``.
    - ``id`` is optional because request payloads and rollup array elements
      omit it.
    - Timestamps stay ISO strings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from arche_notion.domain.codec.registry import union, variant
from arche_notion.domain.entities.base import BaseEntity
from arche_notion.domain.entities.common import DateValue, Number, ObjectReference, SelectOption
from arche_notion.domain.entities.files import FileObject
from arche_notion.domain.entities.rich_text import RichText, plain_text
from arche_notion.domain.entities.users import PartialUser


@union("property_value", key="type")
@dataclass(frozen=True, slots=True, kw_only=True)
class PropertyValue(BaseEntity):
    """Value of one page property; concrete shape selected by ``type``."""

    id: str | None = None


@variant("property_value", "title")
@dataclass(frozen=True, slots=True, kw_only=True)
class TitlePropertyValue(PropertyValue):
    title: tuple[RichText, ...]

    @property
    def text(self) -> str:
        """Concatenated plain text of the title."""
        return plain_text(self.title)


@variant("property_value", "rich_text")
@dataclass(frozen=True, slots=True, kw_only=True)
class RichTextPropertyValue(PropertyValue):
    rich_text: tuple[RichText, ...]

    @property
    def text(self) -> str:
        """Concatenated plain text of the value."""
        return plain_text(self.rich_text)


@variant("property_value", "number")
@dataclass(frozen=True, slots=True, kw_only=True)
class NumberPropertyValue(PropertyValue):
    number: Number | None


@variant("property_value", "select")
@dataclass(frozen=True, slots=True, kw_only=True)
class SelectPropertyValue(PropertyValue):
    select: SelectOption | None


@variant("property_value", "multi_select")
@dataclass(frozen=True, slots=True, kw_only=True)
class MultiSelectPropertyValue(PropertyValue):
    multi_select: tuple[SelectOption, ...]


@variant("property_value", "status")
@dataclass(frozen=True, slots=True, kw_only=True)
class StatusPropertyValue(PropertyValue):
    status: SelectOption | None


@variant("property_value", "date")
@dataclass(frozen=True, slots=True, kw_only=True)
class DatePropertyValue(PropertyValue):
    date: DateValue | None


@variant("property_value", "people")
@dataclass(frozen=True, slots=True, kw_only=True)
class PeoplePropertyValue(PropertyValue):
    people: tuple[PartialUser, ...]


@variant("property_value", "files")
@dataclass(frozen=True, slots=True, kw_only=True)
class FilesPropertyValue(PropertyValue):
    files: tuple[FileObject, ...]


@variant("property_value", "checkbox")
@dataclass(frozen=True, slots=True, kw_only=True)
class CheckboxPropertyValue(PropertyValue):
    checkbox: bool


@variant("property_value", "url")
@dataclass(frozen=True, slots=True, kw_only=True)
class UrlPropertyValue(PropertyValue):
    url: str | None


@variant("property_value", "email")
@dataclass(frozen=True, slots=True, kw_only=True)
class EmailPropertyValue(PropertyValue):
    email: str | None


@variant("property_value", "phone_number")
@dataclass(frozen=True, slots=True, kw_only=True)
class PhoneNumberPropertyValue(PropertyValue):
    phone_number: str | None


@union("formula", key="type")
@dataclass(frozen=True, slots=True, kw_only=True)
class FormulaResult(BaseEntity):
    """Computed formula result; concrete shape selected by ``type``."""


@variant("formula", "string")
@dataclass(frozen=True, slots=True, kw_only=True)
class StringFormulaResult(FormulaResult):
    string: str | None


@variant("formula", "number")
@dataclass(frozen=True, slots=True, kw_only=True)
class NumberFormulaResult(FormulaResult):
    number: Number | None


@variant("formula", "boolean")
@dataclass(frozen=True, slots=True, kw_only=True)
class BooleanFormulaResult(FormulaResult):
    boolean: bool | None


@variant("formula", "date")
@dataclass(frozen=True, slots=True, kw_only=True)
class DateFormulaResult(FormulaResult):
    date: DateValue | None


@variant("property_value", "formula")
@dataclass(frozen=True, slots=True, kw_only=True)
class FormulaPropertyValue(PropertyValue):
    formula: FormulaResult


@variant("property_value", "relation")
@dataclass(frozen=True, slots=True, kw_only=True)
class RelationPropertyValue(PropertyValue):
    relation: tuple[ObjectReference, ...]
    has_more: bool | None = None


@union("rollup", key="type")
@dataclass(frozen=True, slots=True, kw_only=True)
class RollupResult(BaseEntity):
    """Rollup aggregate; concrete shape selected by ``type``."""

    function: str | None = None


@variant("rollup", "number")
@dataclass(frozen=True, slots=True, kw_only=True)
class NumberRollupResult(RollupResult):
    number: Number | None


@variant("rollup", "date")
@dataclass(frozen=True, slots=True, kw_only=True)
class DateRollupResult(RollupResult):
    date: DateValue | None


@variant("rollup", "array")
@dataclass(frozen=True, slots=True, kw_only=True)
class ArrayRollupResult(RollupResult):
    """Un-aggregated rollup; elements are property values of the rolled-up property."""

    array: tuple[PropertyValue, ...]


@variant("rollup", "incomplete")
@dataclass(frozen=True, slots=True, kw_only=True)
class IncompleteRollupResult(RollupResult):
    """Rollup Notion could not finish computing."""

    incomplete: dict[str, Any] = field(default_factory=dict)


@variant("rollup", "unsupported")
@dataclass(frozen=True, slots=True, kw_only=True)
class UnsupportedRollupResult(RollupResult):
    unsupported: dict[str, Any] = field(default_factory=dict)


@variant("property_value", "rollup")
@dataclass(frozen=True, slots=True, kw_only=True)
class RollupPropertyValue(PropertyValue):
    rollup: RollupResult


@variant("property_value", "created_time")
@dataclass(frozen=True, slots=True, kw_only=True)
class CreatedTimePropertyValue(PropertyValue):
    created_time: str


@variant("property_value", "created_by")
@dataclass(frozen=True, slots=True, kw_only=True)
class CreatedByPropertyValue(PropertyValue):
    created_by: PartialUser


@variant("property_value", "last_edited_time")
@dataclass(frozen=True, slots=True, kw_only=True)
class LastEditedTimePropertyValue(PropertyValue):
    last_edited_time: str


@variant("property_value", "last_edited_by")
@dataclass(frozen=True, slots=True, kw_only=True)
class LastEditedByPropertyValue(PropertyValue):
    last_edited_by: PartialUser


@dataclass(frozen=True, slots=True, kw_only=True)
class UniqueId(BaseEntity):
    number: int | None = None
    prefix: str | None = None


@variant("property_value", "unique_id")
@dataclass(frozen=True, slots=True, kw_only=True)
class UniqueIdPropertyValue(PropertyValue):
    unique_id: UniqueId


@variant("property_value", "button")
@dataclass(frozen=True, slots=True, kw_only=True)
class ButtonPropertyValue(PropertyValue):
    """Button column; carries no value."""

    button: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True, kw_only=True)
class Verification(BaseEntity):
    """Wiki page verification: ``verified``, ``unverified`` or ``expired``."""

    state: str
    verified_by: PartialUser | None = None
    date: DateValue | None = None


@variant("property_value", "verification")
@dataclass(frozen=True, slots=True, kw_only=True)
class VerificationPropertyValue(PropertyValue):
    verification: Verification | None
