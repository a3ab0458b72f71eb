from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

import pytest

from arche_notion.domain.codec.decoder import decode, decode_json
from arche_notion.domain.entities import (
    ArrayRollupResult,
    CheckboxPropertyValue,
    CreatedByPropertyValue,
    CreatedTimePropertyValue,
    DatePropertyValue,
    EmailPropertyValue,
    ExternalFile,
    FilesPropertyValue,
    FormulaPropertyValue,
    HostedFile,
    LastEditedByPropertyValue,
    LastEditedTimePropertyValue,
    MultiSelectPropertyValue,
    NumberFormulaResult,
    NumberPropertyValue,
    Page,
    PageMention,
    PeoplePropertyValue,
    PhoneNumberPropertyValue,
    RelationPropertyValue,
    RichTextMention,
    RichTextPropertyValue,
    RollupPropertyValue,
    SelectPropertyValue,
    StatusPropertyValue,
    TitlePropertyValue,
    UniqueIdPropertyValue,
    UrlPropertyValue,
)
from arche_notion.domain.exceptions import UnknownVariant

_USER = {"object": "user", "id": "u1"}


def _text(content: str) -> dict[str, Any]:
    return {
        "type": "text",
        "text": {"content": content, "link": None},
        "annotations": {
            "bold": False,
            "italic": False,
            "strikethrough": False,
            "underline": False,
            "code": False,
            "color": "default",
        },
        "plain_text": content,
        "href": None,
    }


_PROPERTIES: dict[str, tuple[dict[str, Any], type]] = {
    "Name": ({"id": "title", "type": "title", "title": [_text("Launch")]}, TitlePropertyValue),
    "Notes": (
        {
            "id": "n%3Ab",
            "type": "rich_text",
            "rich_text": [
                _text("See "),
                {
                    "type": "mention",
                    "mention": {"type": "page", "page": {"id": "p2"}},
                    "plain_text": "Spec",
                    "href": "https://www.notion.so/p2",
                },
            ],
        },
        RichTextPropertyValue,
    ),
    "Budget": ({"id": "b", "type": "number", "number": 1250.75}, NumberPropertyValue),
    "Stage": (
        {"id": "s", "type": "select", "select": {"id": "o1", "name": "Beta", "color": "blue"}},
        SelectPropertyValue,
    ),
    "Tags": (
        {
            "id": "t",
            "type": "multi_select",
            "multi_select": [{"id": "a", "name": "api"}, {"id": "b", "name": "sdk"}],
        },
        MultiSelectPropertyValue,
    ),
    "Status": (
        {"id": "st", "type": "status", "status": {"id": "d", "name": "Done", "color": "green"}},
        StatusPropertyValue,
    ),
    "Due": (
        {"id": "d", "type": "date", "date": {"start": "2025-10-01", "end": None, "time_zone": None}},
        DatePropertyValue,
    ),
    "Owners": ({"id": "o", "type": "people", "people": [_USER]}, PeoplePropertyValue),
    "Attachments": (
        {
            "id": "f",
            "type": "files",
            "files": [
                {"name": "spec.pdf", "type": "file", "file": {"url": "https://s3/x", "expiry_time": "2025-10-01T00:00:00.000Z"}},
                {"name": "site", "type": "external", "external": {"url": "https://example.com"}},
            ],
        },
        FilesPropertyValue,
    ),
    "Shipped": ({"id": "c", "type": "checkbox", "checkbox": True}, CheckboxPropertyValue),
    "Site": ({"id": "u", "type": "url", "url": "https://example.com"}, UrlPropertyValue),
    "Contact": ({"id": "e", "type": "email", "email": "team@example.com"}, EmailPropertyValue),
    "Phone": ({"id": "ph", "type": "phone_number", "phone_number": None}, PhoneNumberPropertyValue),
    "Score": (
        {"id": "fx", "type": "formula", "formula": {"type": "number", "number": 42}},
        FormulaPropertyValue,
    ),
    "Related": (
        {"id": "r", "type": "relation", "relation": [{"id": "p3"}], "has_more": False},
        RelationPropertyValue,
    ),
    "Rolled": (
        {
            "id": "ro",
            "type": "rollup",
            "rollup": {
                "type": "array",
                "function": "show_original",
                "array": [{"type": "title", "title": [_text("Child")]}],
            },
        },
        RollupPropertyValue,
    ),
    "Created": (
        {"id": "ct", "type": "created_time", "created_time": "2025-09-01T10:00:00.000Z"},
        CreatedTimePropertyValue,
    ),
    "Creator": ({"id": "cb", "type": "created_by", "created_by": _USER}, CreatedByPropertyValue),
    "Edited": (
        {"id": "et", "type": "last_edited_time", "last_edited_time": "2025-09-02T10:00:00.000Z"},
        LastEditedTimePropertyValue,
    ),
    "Editor": (
        {"id": "eb", "type": "last_edited_by", "last_edited_by": _USER},
        LastEditedByPropertyValue,
    ),
    "Ticket": (
        {"id": "id", "type": "unique_id", "unique_id": {"number": 17, "prefix": "ENG"}},
        UniqueIdPropertyValue,
    ),
}


@pytest.fixture
def full_page(page_payload: dict[str, Any]) -> dict[str, Any]:
    page_payload["properties"] = {name: body for name, (body, _) in _PROPERTIES.items()}
    return page_payload


def test_every_property_value_variant_decodes_independently(full_page: dict[str, Any]) -> None:
    page = decode(Page, full_page)

    assert page.properties is not None
    assert set(page.properties) == set(_PROPERTIES)
    for name, (_, expected_type) in _PROPERTIES.items():
        assert type(page.properties[name]) is expected_type, name


def test_property_payload_details(full_page: dict[str, Any]) -> None:
    props = decode(Page, full_page).properties
    assert props is not None

    notes = props["Notes"]
    assert isinstance(notes, RichTextPropertyValue)
    assert notes.text == "See Spec"
    mention = notes.rich_text[1]
    assert isinstance(mention, RichTextMention)
    assert isinstance(mention.mention, PageMention)
    assert mention.mention.page.id == "p2"

    files = props["Attachments"]
    assert isinstance(files, FilesPropertyValue)
    assert [type(f) for f in files.files] == [HostedFile, ExternalFile]

    score = props["Score"]
    assert isinstance(score, FormulaPropertyValue)
    assert isinstance(score.formula, NumberFormulaResult)
    assert score.formula.number == 42

    rolled = props["Rolled"]
    assert isinstance(rolled, RollupPropertyValue)
    assert isinstance(rolled.rollup, ArrayRollupResult)
    child = rolled.rollup.array[0]
    assert isinstance(child, TitlePropertyValue)
    assert child.text == "Child"

    ticket = props["Ticket"]
    assert isinstance(ticket, UniqueIdPropertyValue)
    assert (ticket.unique_id.prefix, ticket.unique_id.number) == ("ENG", 17)

    phone = props["Phone"]
    assert isinstance(phone, PhoneNumberPropertyValue)
    assert phone.phone_number is None


def test_property_names_with_spaces_render_quoted_in_error_paths(
    page_payload: dict[str, Any],
) -> None:
    page_payload["properties"]["Due date"] = {"id": "x", "type": "date", "date": {"start": "2025-01-01"}}
    page_payload["properties"]["AI summary"] = {"id": "w", "type": "ai_summary"}

    with pytest.raises(UnknownVariant) as info:
        decode(Page, page_payload)

    assert info.value.path == ("properties", "AI summary")
    assert str(info.value).startswith('UnknownVariant at $.properties["AI summary"]:')


def test_numbers_from_raw_json_keep_decimal_precision(full_page: dict[str, Any]) -> None:
    page = decode_json(Page, json.dumps(full_page))
    budget = page.properties["Budget"] if page.properties else None
    assert isinstance(budget, NumberPropertyValue)
    assert budget.number == Decimal("1250.75")
