# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Data source property schema.

Purpose:
    The ``property_config`` union describing a data source's columns (the
    schema, as opposed to page values), and the ``relation`` union that tells
    single-property from dual-property (synced) relations.

Layer:
    domain/entities

Notes:
    Types without settings are sent and returned as an empty object
    (``"title": {}``); they default to ``{}`` so request code can omit them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from arche_notion.domain.codec.registry import union, variant
from arche_notion.domain.entities.base import BaseEntity
from arche_notion.domain.entities.common import SelectOption


@union("property_config", key="type")
@dataclass(frozen=True, slots=True, kw_only=True)
class PropertyConfig(BaseEntity):
    """One column of a data source schema; concrete shape selected by ``type``."""

    id: str | None = None
    name: str | None = None
    description: str | None = None


@variant("property_config", "title")
@dataclass(frozen=True, slots=True, kw_only=True)
class TitlePropertyConfig(PropertyConfig):
    title: dict[str, Any] = field(default_factory=dict)


@variant("property_config", "rich_text")
@dataclass(frozen=True, slots=True, kw_only=True)
class RichTextPropertyConfig(PropertyConfig):
    rich_text: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True, kw_only=True)
class NumberFormat(BaseEntity):
    format: str = "number"


@variant("property_config", "number")
@dataclass(frozen=True, slots=True, kw_only=True)
class NumberPropertyConfig(PropertyConfig):
    number: NumberFormat = field(default_factory=NumberFormat)


@dataclass(frozen=True, slots=True, kw_only=True)
class SelectOptions(BaseEntity):
    options: tuple[SelectOption, ...] = ()


@variant("property_config", "select")
@dataclass(frozen=True, slots=True, kw_only=True)
class SelectPropertyConfig(PropertyConfig):
    select: SelectOptions = field(default_factory=SelectOptions)


@variant("property_config", "multi_select")
@dataclass(frozen=True, slots=True, kw_only=True)
class MultiSelectPropertyConfig(PropertyConfig):
    multi_select: SelectOptions = field(default_factory=SelectOptions)


@dataclass(frozen=True, slots=True, kw_only=True)
class StatusGroup(BaseEntity):
    name: str
    id: str | None = None
    color: str | None = None
    option_ids: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class StatusOptions(BaseEntity):
    options: tuple[SelectOption, ...] = ()
    groups: tuple[StatusGroup, ...] = ()


@variant("property_config", "status")
@dataclass(frozen=True, slots=True, kw_only=True)
class StatusPropertyConfig(PropertyConfig):
    status: StatusOptions = field(default_factory=StatusOptions)


@variant("property_config", "date")
@dataclass(frozen=True, slots=True, kw_only=True)
class DatePropertyConfig(PropertyConfig):
    date: dict[str, Any] = field(default_factory=dict)


@variant("property_config", "people")
@dataclass(frozen=True, slots=True, kw_only=True)
class PeoplePropertyConfig(PropertyConfig):
    people: dict[str, Any] = field(default_factory=dict)


@variant("property_config", "files")
@dataclass(frozen=True, slots=True, kw_only=True)
class FilesPropertyConfig(PropertyConfig):
    files: dict[str, Any] = field(default_factory=dict)


@variant("property_config", "checkbox")
@dataclass(frozen=True, slots=True, kw_only=True)
class CheckboxPropertyConfig(PropertyConfig):
    checkbox: dict[str, Any] = field(default_factory=dict)


@variant("property_config", "url")
@dataclass(frozen=True, slots=True, kw_only=True)
class UrlPropertyConfig(PropertyConfig):
    url: dict[str, Any] = field(default_factory=dict)


@variant("property_config", "email")
@dataclass(frozen=True, slots=True, kw_only=True)
class EmailPropertyConfig(PropertyConfig):
    email: dict[str, Any] = field(default_factory=dict)


@variant("property_config", "phone_number")
@dataclass(frozen=True, slots=True, kw_only=True)
class PhoneNumberPropertyConfig(PropertyConfig):
    phone_number: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True, kw_only=True)
class FormulaExpression(BaseEntity):
    expression: str


@variant("property_config", "formula")
@dataclass(frozen=True, slots=True, kw_only=True)
class FormulaPropertyConfig(PropertyConfig):
    formula: FormulaExpression


@union("relation", key="type")
@dataclass(frozen=True, slots=True, kw_only=True)
class RelationInfo(BaseEntity):
    """Relation target; concrete shape selected by ``type``."""

    data_source_id: str
    database_id: str | None = None


@variant("relation", "single_property")
@dataclass(frozen=True, slots=True, kw_only=True)
class SinglePropertyRelation(RelationInfo):
    single_property: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True, kw_only=True)
class DualPropertyDetails(BaseEntity):
    synced_property_id: str | None = None
    synced_property_name: str | None = None


@variant("relation", "dual_property")
@dataclass(frozen=True, slots=True, kw_only=True)
class DualPropertyRelation(RelationInfo):
    dual_property: DualPropertyDetails = field(default_factory=DualPropertyDetails)


@variant("property_config", "relation")
@dataclass(frozen=True, slots=True, kw_only=True)
class RelationPropertyConfig(PropertyConfig):
    relation: RelationInfo


@dataclass(frozen=True, slots=True, kw_only=True)
class RollupSpec(BaseEntity):
    function: str
    relation_property_name: str | None = None
    relation_property_id: str | None = None
    rollup_property_name: str | None = None
    rollup_property_id: str | None = None


@variant("property_config", "rollup")
@dataclass(frozen=True, slots=True, kw_only=True)
class RollupPropertyConfig(PropertyConfig):
    rollup: RollupSpec


@variant("property_config", "created_time")
@dataclass(frozen=True, slots=True, kw_only=True)
class CreatedTimePropertyConfig(PropertyConfig):
    created_time: dict[str, Any] = field(default_factory=dict)


@variant("property_config", "created_by")
@dataclass(frozen=True, slots=True, kw_only=True)
class CreatedByPropertyConfig(PropertyConfig):
    created_by: dict[str, Any] = field(default_factory=dict)


@variant("property_config", "last_edited_time")
@dataclass(frozen=True, slots=True, kw_only=True)
class LastEditedTimePropertyConfig(PropertyConfig):
    last_edited_time: dict[str, Any] = field(default_factory=dict)


@variant("property_config", "last_edited_by")
@dataclass(frozen=True, slots=True, kw_only=True)
class LastEditedByPropertyConfig(PropertyConfig):
    last_edited_by: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True, kw_only=True)
class UniqueIdFormat(BaseEntity):
    prefix: str | None = None


@variant("property_config", "unique_id")
@dataclass(frozen=True, slots=True, kw_only=True)
class UniqueIdPropertyConfig(PropertyConfig):
    unique_id: UniqueIdFormat = field(default_factory=UniqueIdFormat)


@variant("property_config", "button")
@dataclass(frozen=True, slots=True, kw_only=True)
class ButtonPropertyConfig(PropertyConfig):
    button: dict[str, Any] = field(default_factory=dict)


@variant("property_config", "verification")
@dataclass(frozen=True, slots=True, kw_only=True)
class VerificationPropertyConfig(PropertyConfig):
    verification: dict[str, Any] = field(default_factory=dict)
