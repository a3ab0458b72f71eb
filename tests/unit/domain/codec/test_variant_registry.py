from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pytest

from arche_notion.domain.codec.registry import REGISTRY, VariantRegistry
from arche_notion.domain.entities.blocks import Block, ParagraphBlock
from arche_notion.domain.entities.data_sources import DataSource
from arche_notion.domain.entities.pages import Page
from arche_notion.domain.exceptions import RegistryError


class _Kind(str, Enum):
    CIRCLE = "circle"


def _fresh() -> tuple[VariantRegistry, type, type]:
    registry = VariantRegistry()

    @registry.union("shape", key="kind")
    @dataclass(frozen=True)
    class Shape:
        pass

    @registry.variant("shape", _Kind.CIRCLE)
    @dataclass(frozen=True)
    class Circle(Shape):
        radius: int

    return registry, Shape, Circle


def test_enum_tags_are_normalized_to_their_value() -> None:
    registry, _, circle = _fresh()
    assert registry.resolve("shape", "circle") is circle
    assert registry.tags_for(circle) == (("kind", "circle"),)


def test_duplicate_tag_is_rejected() -> None:
    registry, shape, _ = _fresh()

    with pytest.raises(RegistryError, match="already registered"):

        @registry.variant("shape", "circle")
        class Other(shape):  # type: ignore[misc, valid-type]
            pass


def test_variant_must_subclass_union_root() -> None:
    registry, _, _ = _fresh()

    with pytest.raises(RegistryError, match="does not subclass"):

        @registry.variant("shape", "square")
        class Square:
            pass


def test_unknown_union_is_rejected() -> None:
    registry, _, _ = _fresh()
    with pytest.raises(RegistryError, match="unknown union"):
        registry.variant("nope", "x")(type("X", (), {}))
    with pytest.raises(RegistryError):
        registry.spec("nope")


def test_registration_after_seal_fails() -> None:
    registry, shape, _ = _fresh()
    registry.seal()
    assert registry.sealed

    with pytest.raises(RegistryError, match="sealed"):

        @registry.variant("shape", "square")
        class Square(shape):  # type: ignore[misc, valid-type]
            pass

    with pytest.raises(RegistryError, match="sealed"):
        registry.union("other", key="type")(type("Other", (), {}))


def test_variants_view_is_read_only() -> None:
    registry, _, circle = _fresh()
    view = registry.variants("shape")
    assert dict(view) == {"circle": circle}
    with pytest.raises(TypeError):
        view["square"] = circle  # type: ignore[index]


def test_process_registry_is_sealed_after_package_import() -> None:
    assert REGISTRY.sealed


def test_page_and_data_source_belong_to_three_object_unions() -> None:
    for name in ("notion_object", "query_data_source_result", "search_result"):
        assert REGISTRY.resolve(name, "page") is Page
        assert REGISTRY.resolve(name, "data_source") is DataSource


def test_tags_for_walks_the_mro_for_nested_unions() -> None:
    assert dict(REGISTRY.tags_for(ParagraphBlock)) == {"type": "paragraph", "object": "block"}
    assert REGISTRY.spec_for(Block) is not None
    assert REGISTRY.spec_for(ParagraphBlock) is None


def test_registered_tags_match_notion_names() -> None:
    assert set(REGISTRY.variants("parent")) == {
        "database_id",
        "data_source_id",
        "page_id",
        "block_id",
        "workspace",
    }
    assert set(REGISTRY.variants("query_data_source_result")) == {"page", "data_source"}
    assert {"to_do", "heading_1", "table_row", "unsupported"} <= set(REGISTRY.variants("block"))
