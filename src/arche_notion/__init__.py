# Copyright (c)
# SPDX-License-Identifier: MIT
"""arche-notion: typed async client for the Notion API.

Importing the package registers and seals every entity variant, so decoding
is ready as soon as the import returns.
"""

from arche_notion.domain import entities as entities  # noqa: I001  (seals the registry)
from arche_notion.client import NotionAPI
from arche_notion.domain.codec import Decoder, Encoder, decode, decode_json, encode
from arche_notion.domain.exceptions import (
    DecodeError,
    DecodeErrorKind,
    DomainError,
    MalformedValue,
    MissingDiscriminator,
    MissingRequiredField,
    NotionAPIError,
    NotionBadRequest,
    NotionConflict,
    NotionNotFound,
    NotionRateLimited,
    NotionResponseError,
    NotionRestricted,
    NotionUnauthorized,
    NotionUnavailable,
    RegistryError,
    UnknownVariant,
)
from arche_notion.infrastructure.external_apis.notion import NotionClient, NotionSettings

__all__ = [
    "DecodeError",
    "DecodeErrorKind",
    "Decoder",
    "DomainError",
    "Encoder",
    "MalformedValue",
    "MissingDiscriminator",
    "MissingRequiredField",
    "NotionAPI",
    "NotionAPIError",
    "NotionBadRequest",
    "NotionClient",
    "NotionConflict",
    "NotionNotFound",
    "NotionRateLimited",
    "NotionResponseError",
    "NotionRestricted",
    "NotionSettings",
    "NotionUnauthorized",
    "NotionUnavailable",
    "RegistryError",
    "UnknownVariant",
    "decode",
    "decode_json",
    "encode",
    "entities",
]
