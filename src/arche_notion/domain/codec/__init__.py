# Copyright (c)
# SPDX-License-Identifier: MIT
"""Discriminated-union codec.

Purpose:
    Group the pieces that move Notion JSON in and out of typed entities:

    * registry: union/variant declarations (``union``, ``variant``, ``REGISTRY``).
    * decoder: JSON -> entities, dispatching on discriminator keys.
    * encoder: entities and request objects -> JSON.
"""

from __future__ import annotations

from .decoder import Decoder, decode, decode_json
from .encoder import Encoder, encode
from .registry import REGISTRY, UnionSpec, VariantRegistry, union, variant

__all__ = [
    "REGISTRY",
    "Decoder",
    "Encoder",
    "UnionSpec",
    "VariantRegistry",
    "decode",
    "decode_json",
    "encode",
    "union",
    "variant",
]
