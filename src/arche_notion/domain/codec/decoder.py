# src/arche_notion/domain/codec/decoder.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Polymorphic JSON decoder.

Materializes Notion JSON into frozen entity dataclasses, driven entirely by
type hints and the variant registry:

* A union root reads its discriminator key and dispatches to the registered
  variant; the variant may itself be a union root (nested dispatch).
* Dataclasses decode field by field; fields without a default are required.
* ``tuple[X, ...]`` / ``list[X]`` keep source order; ``dict[str, X]`` keeps
  every key.
* ``X | None`` accepts JSON ``null`` and absent keys decode to the field
  default (``None``).
* ``Literal[...]`` accepts exactly the listed values; ``1`` does not match
  ``True``.
* Primitive values pass through untouched: no trimming, no date parsing, and
  numbers keep the representation the JSON loader produced.

Decoding is pure: it reads the sealed registry and a memoized per-class field
plan, and builds objects bottom-up, so a failure never exposes a partially
built entity.
"""

from __future__ import annotations

import dataclasses
import functools
import json
import types
from collections.abc import Mapping
from decimal import Decimal
from typing import (
    Any,
    Final,
    Literal,
    TypeAliasType,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from arche_notion.domain.codec.registry import REGISTRY, UnionSpec, VariantRegistry
from arche_notion.domain.exceptions.base import RegistryError
from arche_notion.domain.exceptions.decoding import (
    DecodeError,
    MalformedValue,
    MissingDiscriminator,
    MissingRequiredField,
    PathSegment,
    UnknownVariant,
)

T = TypeVar("T")

_PRIMITIVES: Final[frozenset[type]] = frozenset({str, int, float, bool, Decimal})
_UNION_ORIGINS: Final[tuple[Any, ...]] = (Union, types.UnionType)


@dataclasses.dataclass(frozen=True, slots=True)
class _Frame:
    """Decode position: JSON path plus the innermost enclosing union."""

    path: tuple[PathSegment, ...] = ()
    union: str | None = None
    key: str | None = None
    tag: str | None = None

    def child(self, segment: PathSegment) -> _Frame:
        return dataclasses.replace(self, path=(*self.path, segment))

    def within(self, spec: UnionSpec, tag: str | None) -> _Frame:
        return dataclasses.replace(self, union=spec.name, key=spec.key, tag=tag)

    def error(self, exc_type: type[DecodeError], reason: str, **kwargs: Any) -> DecodeError:
        return exc_type(
            reason,
            path=self.path,
            union=self.union,
            discriminator_key=self.key,
            discriminator_value=self.tag,
            **kwargs,
        )


@dataclasses.dataclass(frozen=True, slots=True)
class _FieldPlan:
    name: str
    json_key: str
    hint: Any
    required: bool


@functools.cache
def _field_plan(cls: type) -> tuple[_FieldPlan, ...]:
    """Resolve (once per class) the JSON key, type hint and requiredness of each field."""
    hints = get_type_hints(cls)
    plans: list[_FieldPlan] = []
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        required = f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        plans.append(
            _FieldPlan(
                name=f.name,
                json_key=f.metadata.get("json", f.name),
                hint=hints[f.name],
                required=required,
            )
        )
    return tuple(plans)


def _flatten_union(hint: Any) -> list[Any]:
    """Return the members of a (possibly nested, possibly aliased) union hint."""
    members: list[Any] = []
    for arg in get_args(hint):
        if isinstance(arg, TypeAliasType):
            arg = arg.__value__
        if get_origin(arg) in _UNION_ORIGINS:
            members.extend(_flatten_union(arg))
        else:
            members.append(arg)
    return members


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float, Decimal)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


class Decoder:
    """Decode JSON values into typed entities using a sealed variant registry."""

    def __init__(self, registry: VariantRegistry | None = None) -> None:
        """Initialize the decoder.

        Args:
            registry: Registry to resolve unions against. Defaults to the
                process-wide registry populated by ``arche_notion.domain.entities``.
        """
        self._registry = registry if registry is not None else REGISTRY

    def decode(self, target: type[T], data: Any) -> T:
        """Decode ``data`` (already-parsed JSON) into ``target``.

        Args:
            target: A union root, an entity dataclass, or a typing form such as
                ``tuple[Block, ...]``.
            data: Parsed JSON value.

        Returns:
            A fully constructed instance of the concrete variant.

        Raises:
            MissingDiscriminator: A union's discriminator key is absent.
            UnknownVariant: A discriminator value has no registered variant.
            MissingRequiredField: A required field is absent.
            MalformedValue: A value has the wrong JSON type.
            RegistryError: The registry has not been sealed yet.
        """
        if not self._registry.sealed:
            raise RegistryError("variant registry must be sealed before decoding")
        result: T = self._decode(target, data, _Frame())
        return result

    def decode_json(self, target: type[T], raw: str | bytes) -> T:
        """Parse JSON text and decode it; JSON floats are kept as ``Decimal``."""
        try:
            data = json.loads(raw, parse_float=Decimal)
        except ValueError as exc:
            raise MalformedValue(f"invalid JSON: {exc}") from exc
        return self.decode(target, data)

    # ------------------------------------------------------------------ #
    # Dispatch
    # ------------------------------------------------------------------ #

    def _decode(self, hint: Any, value: Any, frame: _Frame) -> Any:  # noqa: C901
        if isinstance(hint, TypeAliasType):
            return self._decode(hint.__value__, value, frame)
        if hint is Any:
            return value

        spec = self._registry.spec_for(hint)
        if spec is not None:
            return self._decode_union(spec, value, frame)

        origin = get_origin(hint)
        if origin in _UNION_ORIGINS:
            return self._decode_optional(hint, value, frame)
        if origin is Literal:
            return self._decode_literal(get_args(hint), value, frame)
        if origin in (tuple, list):
            return self._decode_sequence(hint, origin, value, frame)
        if origin is dict:
            return self._decode_mapping(hint, value, frame)
        if isinstance(hint, type) and dataclasses.is_dataclass(hint):
            return self._decode_dataclass(hint, value, frame)
        if hint in _PRIMITIVES:
            return self._decode_primitive((hint,), value, frame)
        raise TypeError(f"unsupported type hint for decoding: {hint!r}")

    def _decode_union(self, spec: UnionSpec, value: Any, frame: _Frame) -> Any:
        if not isinstance(value, Mapping):
            raise frame.within(spec, None).error(
                MalformedValue,
                f"expected object for union {spec.name!r}, got {_json_type(value)}",
                type_name=spec.root.__name__,
            )
        if spec.key not in value:
            raise frame.within(spec, None).error(
                MissingDiscriminator,
                f"discriminator {spec.key!r} is absent for union {spec.name!r}",
                type_name=spec.root.__name__,
            )
        tag = value[spec.key]
        if not isinstance(tag, str):
            raise frame.within(spec, None).child(spec.key).error(
                MalformedValue,
                f"discriminator {spec.key!r} must be a string, got {_json_type(tag)}",
                type_name=spec.root.__name__,
            )
        inner = frame.within(spec, tag)
        cls = self._registry.resolve(spec.name, tag)
        if cls is None:
            raise inner.error(
                UnknownVariant,
                f"{tag!r} is not a registered variant of union {spec.name!r}",
                type_name=spec.root.__name__,
            )
        return self._decode(cls, value, inner)

    def _decode_dataclass(self, cls: type, value: Any, frame: _Frame) -> Any:
        if not isinstance(value, Mapping):
            raise frame.error(
                MalformedValue,
                f"expected object for {cls.__name__}, got {_json_type(value)}",
                type_name=cls.__name__,
            )
        kwargs: dict[str, Any] = {}
        for plan in _field_plan(cls):
            if plan.json_key not in value:
                if plan.required:
                    raise frame.child(plan.json_key).error(
                        MissingRequiredField,
                        f"required field {plan.json_key!r} of {cls.__name__} is absent",
                        field=plan.json_key,
                        type_name=cls.__name__,
                    )
                continue
            kwargs[plan.name] = self._decode(
                plan.hint, value[plan.json_key], frame.child(plan.json_key)
            )
        try:
            return cls(**kwargs)
        except (TypeError, ValueError) as exc:
            raise frame.error(MalformedValue, str(exc), type_name=cls.__name__) from exc

    def _decode_optional(self, hint: Any, value: Any, frame: _Frame) -> Any:
        members = _flatten_union(hint)
        non_none = [m for m in members if m is not types.NoneType]
        if value is None:
            if len(non_none) < len(members):
                return None
            raise frame.error(MalformedValue, "null is not allowed here")
        if len(non_none) == 1:
            return self._decode(non_none[0], value, frame)
        if all(m in _PRIMITIVES for m in non_none):
            return self._decode_primitive(tuple(non_none), value, frame)
        raise TypeError(f"unsupported union hint for decoding: {hint!r}")

    def _decode_sequence(self, hint: Any, origin: type, value: Any, frame: _Frame) -> Any:
        if not isinstance(value, list):
            raise frame.error(MalformedValue, f"expected array, got {_json_type(value)}")
        args = get_args(hint)
        item_hint = args[0] if args else Any
        items = [self._decode(item_hint, item, frame.child(i)) for i, item in enumerate(value)]
        return tuple(items) if origin is tuple else items

    def _decode_mapping(self, hint: Any, value: Any, frame: _Frame) -> dict[str, Any]:
        if not isinstance(value, Mapping):
            raise frame.error(MalformedValue, f"expected object, got {_json_type(value)}")
        args = get_args(hint)
        value_hint = args[1] if len(args) == 2 else Any
        return {
            key: self._decode(value_hint, item, frame.child(key)) for key, item in value.items()
        }

    @staticmethod
    def _decode_literal(allowed: tuple[Any, ...], value: Any, frame: _Frame) -> Any:
        for option in allowed:
            if type(value) is type(option) and value == option:
                return value
        expected = ", ".join(repr(option) for option in allowed)
        raise frame.error(MalformedValue, f"expected one of {expected}, got {value!r}")

    @staticmethod
    def _decode_primitive(kinds: tuple[type, ...], value: Any, frame: _Frame) -> Any:
        if isinstance(value, bool):
            ok = bool in kinds
        elif isinstance(value, int):
            ok = any(k in kinds for k in (int, float, Decimal))
        elif isinstance(value, (float, Decimal)):
            ok = float in kinds or Decimal in kinds
        elif isinstance(value, str):
            ok = str in kinds
        else:
            ok = False
        if not ok:
            expected = " | ".join(k.__name__ for k in kinds)
            raise frame.error(MalformedValue, f"expected {expected}, got {_json_type(value)}")
        return value


_DECODER: Final[Decoder] = Decoder()


def decode(target: type[T], data: Any) -> T:
    """Decode parsed JSON with the process-wide registry."""
    return _DECODER.decode(target, data)


def decode_json(target: type[T], raw: str | bytes) -> T:
    """Parse and decode JSON text with the process-wide registry."""
    return _DECODER.decode_json(target, raw)


__all__ = ["Decoder", "decode", "decode_json"]
