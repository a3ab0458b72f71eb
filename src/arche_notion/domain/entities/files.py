# Copyright (c)
# SPDX-License-Identifier: MIT
"""
File and icon entities.

Purpose:
    File objects (covers, media blocks, files properties) and page/database
    icons. Both are unions keyed on ``type``.

Layer:
    domain/entities

Notes:
    Notion-hosted ``file`` URLs expire; ``expiry_time`` is kept as the API's
    ISO string.
"""

from __future__ import annotations

from dataclasses import dataclass

from arche_notion.domain.codec.registry import union, variant
from arche_notion.domain.entities.base import BaseEntity
from arche_notion.domain.entities.rich_text import RichText


@dataclass(frozen=True, slots=True, kw_only=True)
class ExternalFileData(BaseEntity):
    url: str


@dataclass(frozen=True, slots=True, kw_only=True)
class HostedFileData(BaseEntity):
    url: str
    expiry_time: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class FileUploadReference(BaseEntity):
    id: str


@union("file", key="type")
@dataclass(frozen=True, slots=True, kw_only=True)
class FileObject(BaseEntity):
    """A file; concrete shape selected by ``type``."""

    name: str | None = None
    caption: tuple[RichText, ...] | None = None


@variant("file", "external")
@dataclass(frozen=True, slots=True, kw_only=True)
class ExternalFile(FileObject):
    external: ExternalFileData


@variant("file", "file")
@dataclass(frozen=True, slots=True, kw_only=True)
class HostedFile(FileObject):
    file: HostedFileData


@variant("file", "file_upload")
@dataclass(frozen=True, slots=True, kw_only=True)
class UploadedFile(FileObject):
    file_upload: FileUploadReference


@dataclass(frozen=True, slots=True, kw_only=True)
class CustomEmoji(BaseEntity):
    id: str
    name: str | None = None
    url: str | None = None


@union("icon", key="type")
@dataclass(frozen=True, slots=True, kw_only=True)
class Icon(BaseEntity):
    """Page, database or callout icon; concrete shape selected by ``type``."""


@variant("icon", "emoji")
@dataclass(frozen=True, slots=True, kw_only=True)
class EmojiIcon(Icon):
    emoji: str


@variant("icon", "external")
@dataclass(frozen=True, slots=True, kw_only=True)
class ExternalIcon(Icon):
    external: ExternalFileData


@variant("icon", "file")
@dataclass(frozen=True, slots=True, kw_only=True)
class HostedFileIcon(Icon):
    file: HostedFileData


@variant("icon", "custom_emoji")
@dataclass(frozen=True, slots=True, kw_only=True)
class CustomEmojiIcon(Icon):
    custom_emoji: CustomEmoji
