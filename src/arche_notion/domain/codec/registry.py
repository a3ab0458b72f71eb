# src/arche_notion/domain/codec/registry.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Variant registry.

Purpose:
    Map ``(union name, discriminator value)`` to the concrete entity class that
    decodes it. Entity modules register themselves with the ``union`` and
    ``variant`` decorators at import time; the decoder only ever asks the
    registry, so adding a block or property type never touches the decoder.

Layer:
    domain/codec

Notes:
    - ``arche_notion.domain.entities`` imports every entity module and then
      seals the process-wide ``REGISTRY``. After sealing the registry is
      read-only and safe to share across threads and tasks without locking.
    - A class may be a variant of several unions (a page is both a search result
      and a query result), and a variant may itself be the root of another
      union (``notion_object`` -> ``block`` -> ``paragraph``).

Typical usage:
    @union("block", key="type")
    @dataclass(frozen=True, slots=True, kw_only=True)
    class Block(BaseEntity): ...

    @variant("block", "paragraph")
    @dataclass(frozen=True, slots=True, kw_only=True)
    class ParagraphBlock(Block): ...
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TypeVar

from arche_notion.domain.exceptions.base import RegistryError

T = TypeVar("T", bound=type)


@dataclass(frozen=True, slots=True)
class UnionSpec:
    """Declaration of a discriminated union.

    Attributes:
        name: Union identifier used in registrations and error reports.
        key: JSON key holding the discriminator (``"object"``, ``"type"``).
        root: Base class every variant must subclass.
    """

    name: str
    key: str
    root: type


def _normalize_tag(tag: str | Enum) -> str:
    """Return the plain string form of a tag (``str`` enums use their value)."""
    if isinstance(tag, Enum):
        return str(tag.value)
    return tag


class VariantRegistry:
    """Registry of unions and their variants."""

    def __init__(self) -> None:
        self._by_root: dict[type, UnionSpec] = {}
        self._by_name: dict[str, UnionSpec] = {}
        self._variants: dict[str, dict[str, type]] = {}
        self._tags: dict[type, list[tuple[str, str]]] = {}
        self._sealed = False

    # ------------------------------------------------------------------ #
    # Registration
    # ------------------------------------------------------------------ #

    def union(self, name: str, *, key: str) -> Callable[[T], T]:
        """Declare ``cls`` as the root of union ``name`` keyed on ``key``."""

        def _register(cls: T) -> T:
            self._check_open(f"union {name!r}")
            if name in self._by_name:
                raise RegistryError(
                    f"union {name!r} is already registered",
                    details={"union": name},
                )
            spec = UnionSpec(name=name, key=key, root=cls)
            self._by_root[cls] = spec
            self._by_name[name] = spec
            self._variants[name] = {}
            return cls

        return _register

    def variant(self, union_name: str, tag: str | Enum) -> Callable[[T], T]:
        """Register ``cls`` as the variant of ``union_name`` selected by ``tag``."""
        value = _normalize_tag(tag)

        def _register(cls: T) -> T:
            self._check_open(f"variant {union_name}:{value}")
            spec = self._by_name.get(union_name)
            if spec is None:
                raise RegistryError(
                    f"unknown union {union_name!r}",
                    details={"union": union_name, "tag": value},
                )
            if not issubclass(cls, spec.root):
                raise RegistryError(
                    f"{cls.__name__} does not subclass {spec.root.__name__}",
                    details={"union": union_name, "tag": value},
                )
            variants = self._variants[union_name]
            if value in variants:
                raise RegistryError(
                    f"tag {value!r} already registered in union {union_name!r}",
                    details={"union": union_name, "tag": value},
                )
            variants[value] = cls
            self._tags.setdefault(cls, []).append((spec.key, value))
            return cls

        return _register

    def seal(self) -> None:
        """Make the registry read-only. Idempotent."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        """Whether registration is closed and lookups are safe."""
        return self._sealed

    def _check_open(self, what: str) -> None:
        if self._sealed:
            raise RegistryError(
                f"cannot register {what}: registry is sealed",
                details={"registration": what},
            )

    # ------------------------------------------------------------------ #
    # Lookup
    # ------------------------------------------------------------------ #

    def spec_for(self, cls: object) -> UnionSpec | None:
        """Return the union rooted exactly at ``cls`` (subclasses do not count)."""
        if not isinstance(cls, type):
            return None
        return self._by_root.get(cls)

    def spec(self, name: str) -> UnionSpec:
        """Return the union called ``name``."""
        try:
            return self._by_name[name]
        except KeyError:
            raise RegistryError(f"unknown union {name!r}", details={"union": name}) from None

    def resolve(self, union_name: str, tag: str) -> type | None:
        """Return the variant class for ``tag`` (exact, case-sensitive) or ``None``."""
        return self._variants.get(union_name, {}).get(tag)

    def variants(self, union_name: str) -> Mapping[str, type]:
        """Return a read-only ``tag -> class`` view of a union."""
        self.spec(union_name)
        return MappingProxyType(self._variants[union_name])

    def unions(self) -> tuple[UnionSpec, ...]:
        """Return all declared unions in registration order."""
        return tuple(self._by_name.values())

    def tags_for(self, cls: type) -> tuple[tuple[str, str], ...]:
        """Return every ``(key, tag)`` pair that identifies ``cls`` on the wire.

        Walks the MRO, so a ``ParagraphBlock`` reports both ``("type",
        "paragraph")`` and the ``("object", "block")`` inherited from ``Block``.
        The first pair for a given key wins.
        """
        seen: dict[str, str] = {}
        for klass in cls.__mro__:
            for key, tag in self._tags.get(klass, ()):
                seen.setdefault(key, tag)
        return tuple(seen.items())


REGISTRY = VariantRegistry()

union = REGISTRY.union
variant = REGISTRY.variant

__all__ = ["REGISTRY", "UnionSpec", "VariantRegistry", "union", "variant"]
