from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Literal

import pytest

from arche_notion.domain.codec.decoder import Decoder, decode, decode_json
from arche_notion.domain.codec.registry import VariantRegistry
from arche_notion.domain.entities import (
    DataSource,
    DataSourceParent,
    EmojiIcon,
    NotionObject,
    NumberPropertyValue,
    Page,
    PropertyValue,
    QueryDataSourceResult,
    RichText,
    RichTextText,
    SearchResponse,
    TitlePropertyValue,
)
from arche_notion.domain.exceptions import (
    DecodeErrorKind,
    MalformedValue,
    MissingDiscriminator,
    MissingRequiredField,
    RegistryError,
    UnknownVariant,
    render_path,
)


def test_page_with_title_property_decodes_to_page(page_payload: dict[str, Any]) -> None:
    page = decode(QueryDataSourceResult, page_payload)

    assert isinstance(page, Page)
    assert page.id == "p1"
    assert page.properties is not None
    name = page.properties["Name"]
    assert isinstance(name, TitlePropertyValue)
    assert len(name.title) == 1
    span = name.title[0]
    assert isinstance(span, RichTextText)
    assert span.text.content == "Hello"
    assert page.title == "Hello"
    assert isinstance(page.parent, DataSourceParent)
    assert page.parent.data_source_id == "ds1"
    assert isinstance(page.icon, EmojiIcon)
    assert page.cover is None


def test_unknown_object_tag_in_query_results_is_unknown_variant() -> None:
    with pytest.raises(UnknownVariant) as info:
        decode(QueryDataSourceResult, {"object": "unknown_type", "id": "x"})

    err = info.value
    assert err.kind is DecodeErrorKind.UNKNOWN_VARIANT
    assert err.union == "query_data_source_result"
    assert err.discriminator_key == "object"
    assert err.discriminator_value == "unknown_type"
    assert err.path == ()


def test_tags_are_case_sensitive() -> None:
    with pytest.raises(UnknownVariant):
        decode(NotionObject, {"object": "Page", "id": "x"})


def test_missing_discriminator_is_reported_with_absent_value() -> None:
    with pytest.raises(MissingDiscriminator) as info:
        decode(QueryDataSourceResult, {"id": "x"})

    err = info.value
    assert err.discriminator_key == "object"
    assert err.discriminator_value is None
    assert err.details["discriminator_value"] == "absent"


def test_nested_failure_reports_innermost_union_and_full_path(
    page_payload: dict[str, Any],
) -> None:
    del page_payload["properties"]["Name"]["title"][0]["type"]

    with pytest.raises(MissingDiscriminator) as info:
        decode(NotionObject, page_payload)

    err = info.value
    assert err.union == "rich_text"
    assert err.discriminator_key == "type"
    assert err.path == ("properties", "Name", "title", 0)
    assert render_path(err.path) == "$.properties.Name.title[0]"


def test_unknown_property_type_names_the_property_value_union(
    page_payload: dict[str, Any],
) -> None:
    page_payload["properties"]["Score"] = {"id": "x", "type": "sparkline", "sparkline": {}}

    with pytest.raises(UnknownVariant) as info:
        decode(Page, page_payload)

    assert info.value.union == "property_value"
    assert info.value.discriminator_value == "sparkline"
    assert info.value.path == ("properties", "Score")


def test_missing_required_field_names_field_and_type() -> None:
    with pytest.raises(MissingRequiredField) as info:
        decode(NotionObject, {"object": "page"})

    err = info.value
    assert err.field == "id"
    assert err.type_name == "Page"
    assert err.path == ("id",)
    assert err.discriminator_value == "page"


def test_required_nullable_key_must_be_present() -> None:
    assert decode(PropertyValue, {"type": "number", "number": None}) == NumberPropertyValue(
        number=None
    )
    with pytest.raises(MissingRequiredField):
        decode(PropertyValue, {"type": "number"})


@pytest.mark.parametrize(
    ("payload", "fragment"),
    [
        ({"type": "number", "number": "12"}, "expected"),
        ({"type": "number", "number": True}, "expected"),
        ({"type": "checkbox", "checkbox": None}, "null"),
        ({"type": "title", "title": {"type": "text"}}, "array"),
        ({"type": "select", "select": "Done"}, "object"),
    ],
)
def test_wrong_json_types_are_malformed(payload: dict[str, Any], fragment: str) -> None:
    with pytest.raises(MalformedValue, match=fragment):
        decode(PropertyValue, payload)


def test_non_string_discriminator_is_malformed() -> None:
    with pytest.raises(MalformedValue) as info:
        decode(NotionObject, {"object": 7, "id": "x"})
    assert info.value.path == ("object",)


def test_union_value_must_be_an_object() -> None:
    with pytest.raises(MalformedValue):
        decode(QueryDataSourceResult, ["page"])


def test_unknown_keys_are_ignored(page_payload: dict[str, Any]) -> None:
    page_payload["brand_new_field"] = {"nested": [1, 2, 3]}
    assert decode(Page, page_payload).id == "p1"


def test_decoding_twice_yields_equal_objects(page_payload: dict[str, Any]) -> None:
    first = decode(NotionObject, page_payload)
    second = decode(NotionObject, page_payload)
    assert first == second
    assert first is not second


def test_decode_json_keeps_exact_numbers() -> None:
    value = decode_json(PropertyValue, '{"type": "number", "number": 0.1}')
    assert isinstance(value, NumberPropertyValue)
    assert value.number == Decimal("0.1")

    whole = decode_json(PropertyValue, '{"type": "number", "number": 42}')
    assert isinstance(whole, NumberPropertyValue)
    assert whole.number == 42
    assert isinstance(whole.number, int)


def test_decode_json_rejects_invalid_json() -> None:
    with pytest.raises(MalformedValue, match="invalid JSON"):
        decode_json(Page, "{not json")


def test_top_level_sequence_of_union_members() -> None:
    spans = decode(
        tuple[RichText, ...],
        [
            {"type": "text", "text": {"content": "a"}, "plain_text": "a"},
            {"type": "equation", "equation": {"expression": "x^2"}, "plain_text": "x^2"},
        ],
    )
    assert [s.plain_text for s in spans] == ["a", "x^2"]


def test_mixed_query_results_dispatch_per_element(page_payload: dict[str, Any]) -> None:
    response = decode(
        SearchResponse,
        {
            "object": "list",
            "results": [page_payload, {"object": "data_source", "id": "ds1"}],
            "next_cursor": None,
            "has_more": False,
            "type": "page_or_data_source",
        },
    )
    assert [type(r) for r in response.results] == [Page, DataSource]


def test_unsealed_registry_refuses_to_decode() -> None:
    with pytest.raises(RegistryError, match="sealed"):
        Decoder(VariantRegistry()).decode(Page, {"object": "page", "id": "x"})


def test_concurrent_decodes_agree(page_payload: dict[str, Any]) -> None:
    expected = decode(NotionObject, page_payload)
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: decode(NotionObject, page_payload), range(64)))
    assert all(r == expected for r in results)


@dataclass(frozen=True)
class _Verdict:
    state: Literal["verified", "unverified", "expired"]
    level: Literal[1, 2] | None = None


def test_literal_fields_accept_only_listed_values() -> None:
    assert decode(_Verdict, {"state": "expired", "level": 2}) == _Verdict(state="expired", level=2)
    assert decode(_Verdict, {"state": "verified", "level": None}).level is None

    with pytest.raises(MalformedValue, match="expected one of") as info:
        decode(_Verdict, {"state": "pending"})
    assert info.value.path == ("state",)


def test_literal_matching_is_type_strict() -> None:
    with pytest.raises(MalformedValue):
        decode(_Verdict, {"state": "verified", "level": True})
    with pytest.raises(MalformedValue):
        decode(Literal[1, 2], "1")
