from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

import pytest

from arche_notion.application.schemas import (
    AndFilter,
    CheckboxFilter,
    CreatedTimeFilter,
    DateFilter,
    Direction,
    FilesFilter,
    Filter,
    LastEditedTimeFilter,
    MultiSelectFilter,
    NumberFilter,
    OrFilter,
    PropertySort,
    QueryDataSourceRequest,
    Sort,
    StatusFilter,
    TimestampSort,
    TitleFilter,
)
from arche_notion.domain.codec.encoder import encode


def test_property_filter_wire_shape() -> None:
    assert TitleFilter("Name", starts_with="he").to_json() == {
        "property": "Name",
        "title": {"starts_with": "he"},
    }


def test_is_empty_flags_are_sent_as_given() -> None:
    assert FilesFilter("Attachments", is_empty=True).to_json() == {
        "property": "Attachments",
        "files": {"is_empty": True},
    }


def test_relative_date_conditions_encode_as_empty_objects() -> None:
    assert DateFilter("Due", past_week=True).to_json() == {
        "property": "Due",
        "date": {"past_week": {}},
    }
    assert DateFilter("Due", on_or_after="2025-01-01").to_json() == {
        "property": "Due",
        "date": {"on_or_after": "2025-01-01"},
    }


def test_timestamp_filters_name_the_timestamp_twice() -> None:
    assert CreatedTimeFilter(after="2025-09-01").to_json() == {
        "timestamp": "created_time",
        "created_time": {"after": "2025-09-01"},
    }
    assert LastEditedTimeFilter(this_week=True).to_json() == {
        "timestamp": "last_edited_time",
        "last_edited_time": {"this_week": {}},
    }


def test_compound_filters_nest() -> None:
    nested = AndFilter(
        (
            CheckboxFilter("Done", equals=False),
            OrFilter(
                (
                    StatusFilter("Stage", equals="Beta"),
                    MultiSelectFilter("Tags", contains="api"),
                )
            ),
        )
    )

    assert nested.to_json() == {
        "and": [
            {"property": "Done", "checkbox": {"equals": False}},
            {
                "or": [
                    {"property": "Stage", "status": {"equals": "Beta"}},
                    {"property": "Tags", "multi_select": {"contains": "api"}},
                ]
            },
        ]
    }


@pytest.mark.parametrize(
    "build",
    [
        lambda: TitleFilter("Name"),
        lambda: DateFilter("Due", past_week=False),
        lambda: CreatedTimeFilter(),
        lambda: AndFilter(()),
    ],
)
def test_filters_without_conditions_are_rejected(build: object) -> None:
    with pytest.raises(ValueError):
        build()  # type: ignore[operator]


def test_query_body_encodes_filter_sorts_and_decimal_numbers() -> None:
    request = QueryDataSourceRequest(
        data_source_id="ds1",
        filter=NumberFilter("Budget", greater_than=Decimal("1000"), less_than=Decimal("12.5")),
        sorts=(PropertySort("Budget", Direction.DESCENDING), TimestampSort()),
        page_size=50,
    )

    assert encode(request) == {
        "filter": {"property": "Budget", "number": {"greater_than": 1000, "less_than": 12.5}},
        "sorts": [
            {"property": "Budget", "direction": "descending"},
            {"timestamp": "last_edited_time", "direction": "descending"},
        ],
        "page_size": 50,
    }


def test_filter_and_sort_bases_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError):
        Filter()  # type: ignore[abstract]
    with pytest.raises(TypeError):
        Sort()  # type: ignore[abstract]


@dataclass(frozen=True)
class _RawFilter(Filter):
    body: dict[str, Any]

    def to_json(self) -> dict[str, Any]:
        return self.body


def test_custom_filter_subclass_nests_in_compounds() -> None:
    raw = _RawFilter({"property": "Tags", "multi_select": {"contains": "ops"}})
    assert AndFilter((raw, CheckboxFilter("Done", equals=True))).to_json() == {
        "and": [
            {"property": "Tags", "multi_select": {"contains": "ops"}},
            {"property": "Done", "checkbox": {"equals": True}},
        ]
    }
