# src/arche_notion/domain/exceptions/decoding.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Decode exceptions.

Purpose:
    Typed failures raised while turning Notion JSON into entities. Every error
    carries the innermost enclosing union (name, discriminator key, value found)
    and the JSON path from the decode root, so failures deep inside a page's
    property map or a block tree can be located without re-running the call.

Layer:
    domain/exceptions

Notes:
    - Decoding builds objects bottom-up, so raising one of these never leaves a
      half-populated entity visible to the caller.
    - ``discriminator_value`` is ``None`` when the key was absent; it renders as
      ``"absent"``.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any

from .base import DomainError

type PathSegment = str | int

ABSENT = "absent"


class DecodeErrorKind(str, Enum):
    """Decode failure taxonomy."""

    MISSING_DISCRIMINATOR = "MissingDiscriminator"
    UNKNOWN_VARIANT = "UnknownVariant"
    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    MALFORMED_VALUE = "MalformedValue"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


def render_path(path: Sequence[PathSegment]) -> str:
    """Render a decode path as ``$.properties["Due date"].title[0]``.

    Identifier-like keys use dot notation; anything else (spaces, punctuation,
    the empty string) is quoted in brackets.
    """
    out = "$"
    for segment in path:
        if isinstance(segment, int):
            out += f"[{segment}]"
        elif segment.isidentifier():
            out += f".{segment}"
        else:
            escaped = segment.replace("\\", "\\\\").replace('"', '\\"')
            out += f'["{escaped}"]'
    return out


class DecodeError(DomainError):
    """Base class for decode failures.

    Attributes:
        kind: Failure kind.
        path: Segments from the decode root to the failure point.
        union: Innermost enclosing union name, if any.
        discriminator_key: Key that union dispatches on.
        discriminator_value: Value found under that key (``None`` if absent).
        field: Offending field name, when the failure is field-level.
        type_name: Enclosing (or expected) type name.
    """

    code = "DECODE_ERROR"
    kind: DecodeErrorKind

    def __init__(
        self,
        reason: str,
        *,
        path: Sequence[PathSegment] = (),
        union: str | None = None,
        discriminator_key: str | None = None,
        discriminator_value: str | None = None,
        field: str | None = None,
        type_name: str | None = None,
    ) -> None:
        self.reason = reason
        self.path: tuple[PathSegment, ...] = tuple(path)
        self.union = union
        self.discriminator_key = discriminator_key
        self.discriminator_value = discriminator_value
        self.field = field
        self.type_name = type_name
        details: dict[str, Any] = {
            "kind": self.kind.value,
            "path": render_path(self.path),
            "union": union,
            "discriminator_key": discriminator_key,
            "discriminator_value": (
                discriminator_value if discriminator_value is not None else ABSENT
            ),
        }
        if field is not None:
            details["field"] = field
        if type_name is not None:
            details["type"] = type_name
        super().__init__(f"{self.kind.value} at {render_path(self.path)}: {reason}", details=details)


class MissingDiscriminator(DecodeError):
    """The union's discriminator key is not present in the JSON object."""

    code = "DECODE_MISSING_DISCRIMINATOR"
    kind = DecodeErrorKind.MISSING_DISCRIMINATOR


class UnknownVariant(DecodeError):
    """The discriminator value has no registered variant in the union."""

    code = "DECODE_UNKNOWN_VARIANT"
    kind = DecodeErrorKind.UNKNOWN_VARIANT


class MissingRequiredField(DecodeError):
    """A field without a default is absent from the JSON object."""

    code = "DECODE_MISSING_REQUIRED_FIELD"
    kind = DecodeErrorKind.MISSING_REQUIRED_FIELD


class MalformedValue(DecodeError):
    """A JSON value does not have the shape its declared type requires."""

    code = "DECODE_MALFORMED_VALUE"
    kind = DecodeErrorKind.MALFORMED_VALUE
