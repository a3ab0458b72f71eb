# Copyright (c)
# SPDX-License-Identifier: MIT
"""Base Entity (Domain Layer).

Purpose:
    Mixin for immutable Notion entities. Provides frozen, slotted,
    keyword-only dataclass semantics and a small validation hook for
    invariants.

Layer:
    domain/entities
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class BaseEntity:
    """Base mixin for domain entities.

    Concrete entities subclass this and declare their own fields. Fields are
    keyword-only so that optional fields on a union root can precede required
    fields on its variants.
    """

    def __post_init__(self) -> None:  # noqa: D401
        """Hook for subclasses to extend with invariant checks.

        Subclasses are slotted dataclasses, so overrides should not rely on
        zero-argument ``super()``. Raise ``ValueError`` to reject a value; the
        decoder reports it as a malformed value at the object's path.
        """
        return
