# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Base Domain Exceptions.

Summary:
    Canonical base class for library exceptions so callers can catch a single
    type and still inspect a stable ``code`` and structured ``details``.

Layer:
    domain/exceptions
"""
from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base class for all arche-notion exceptions."""

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str = "", *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = details or {}


class RegistryError(DomainError):
    """Variant registry was misused (duplicate tag, late registration, unsealed)."""

    code = "REGISTRY_ERROR"
