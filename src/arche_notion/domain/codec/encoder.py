# src/arche_notion/domain/codec/encoder.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Structural JSON encoder (entities and request objects -> JSON values).

The caller always knows the concrete type being sent, so encoding needs no
lookup beyond asking the registry which ``(key, tag)`` pairs identify the
object's class. ``None`` is omitted for fields that default to ``None``
and sent as ``null`` for required nullable fields such as
``NumberPropertyValue.number``, which is how a property is cleared.
Objects that define ``to_json()`` (filters, sorts, property updates)
encode themselves. Fields marked ``metadata={"path": True}`` are URL path
parameters and never appear in a body.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Final

from arche_notion.domain.codec.registry import REGISTRY, VariantRegistry
from arche_notion.types import JsonValue


class Encoder:
    """Encode dataclass graphs into JSON-compatible values."""

    def __init__(self, registry: VariantRegistry | None = None) -> None:
        self._registry = registry if registry is not None else REGISTRY

    def encode(self, obj: Any) -> JsonValue:  # noqa: C901
        """Return the JSON value for ``obj``.

        Raises:
            TypeError: If ``obj`` contains a value with no JSON form.
        """
        if obj is None or isinstance(obj, (bool, int, float, str)):
            return obj
        if isinstance(obj, Decimal):
            # JSON has no decimal type; integral values stay exact.
            return int(obj) if obj == obj.to_integral_value() else float(obj)
        to_json = getattr(obj, "to_json", None)
        if callable(to_json):
            return self.encode(to_json())
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return self._encode_dataclass(obj)
        if isinstance(obj, Mapping):
            return {str(k): self.encode(v) for k, v in obj.items()}
        if isinstance(obj, (list, tuple)):
            return [self.encode(item) for item in obj]
        raise TypeError(f"cannot encode {type(obj).__name__} as JSON")

    def _encode_dataclass(self, obj: Any) -> dict[str, JsonValue]:
        out: dict[str, JsonValue] = {}
        for key, tag in self._registry.tags_for(type(obj)):
            out[key] = tag
        for f in dataclasses.fields(obj):
            value = getattr(obj, f.name)
            if f.metadata.get("path") or (value is None and f.default is None):
                continue
            out[f.metadata.get("json", f.name)] = self.encode(value)
        return out


_ENCODER: Final[Encoder] = Encoder()


def encode(obj: Any) -> JsonValue:
    """Encode with the process-wide registry."""
    return _ENCODER.encode(obj)


__all__ = ["Encoder", "encode"]
