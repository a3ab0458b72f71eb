# Copyright (c)
# SPDX-License-Identifier: MIT
"""Project-wide JSON typing helpers.

These aliases model values that cross the wire: what the transport hands to the
decoder and what the encoder hands back to the transport.
"""

from __future__ import annotations

from decimal import Decimal

type JsonPrimitive = None | bool | int | float | Decimal | str
type JsonValue = JsonPrimitive | list[JsonValue] | dict[str, JsonValue]
type JsonObject = dict[str, JsonValue]

__all__ = ["JsonObject", "JsonPrimitive", "JsonValue"]
