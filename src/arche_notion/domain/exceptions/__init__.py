# Copyright (c)
# SPDX-License-Identifier: MIT
"""Domain exception types (decoding and Notion API failures)."""

from __future__ import annotations

from .base import DomainError, RegistryError
from .decoding import (
    DecodeError,
    DecodeErrorKind,
    MalformedValue,
    MissingDiscriminator,
    MissingRequiredField,
    UnknownVariant,
    render_path,
)
from .notion import (
    NotionAPIError,
    NotionBadRequest,
    NotionConflict,
    NotionNotFound,
    NotionRateLimited,
    NotionResponseError,
    NotionRestricted,
    NotionUnauthorized,
    NotionUnavailable,
)

__all__ = [
    "DecodeError",
    "DecodeErrorKind",
    "DomainError",
    "MalformedValue",
    "MissingDiscriminator",
    "MissingRequiredField",
    "NotionAPIError",
    "NotionBadRequest",
    "NotionConflict",
    "NotionNotFound",
    "NotionRateLimited",
    "NotionResponseError",
    "NotionRestricted",
    "NotionUnauthorized",
    "NotionUnavailable",
    "RegistryError",
    "UnknownVariant",
    "render_path",
]
