# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Block entities.

Purpose:
    The ``block`` union: one variant per block type, each carrying its payload
    under a key equal to its tag (``{"type": "to_do", "to_do": {...}}``).

Layer:
    domain/entities

Notes:
    - Blocks are also ``notion_object`` members (``"object": "block"``), so a
      generic object decode dispatches twice: first on ``object``, then on
      ``type``.
    - ``children`` inside a payload only appears on append requests; responses
      report ``has_children`` and children are listed separately.
    - ``unsupported`` is Notion's own catch-all for block types the API does
      not expose.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from arche_notion.domain.codec.registry import union, variant
from arche_notion.domain.entities.base import BaseEntity
from arche_notion.domain.entities.files import FileObject, Icon
from arche_notion.domain.entities.objects import NotionObject
from arche_notion.domain.entities.parents import Parent
from arche_notion.domain.entities.rich_text import RichText
from arche_notion.domain.entities.users import PartialUser
from arche_notion.domain.enums.object_type import ObjectType


@variant("notion_object", ObjectType.BLOCK)
@union("block", key="type")
@dataclass(frozen=True, slots=True, kw_only=True)
class Block(NotionObject):
    """A content block; concrete shape selected by ``type``."""

    id: str | None = None
    parent: Parent | None = None
    created_time: str | None = None
    created_by: PartialUser | None = None
    last_edited_time: str | None = None
    last_edited_by: PartialUser | None = None
    has_children: bool | None = None
    archived: bool | None = None
    in_trash: bool | None = None


# --------------------------------------------------------------------------- #
# Payloads
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True, kw_only=True)
class TextBlockContent(BaseEntity):
    """Payload shared by paragraph, list items, quote and toggle."""

    rich_text: tuple[RichText, ...]
    color: str | None = None
    children: tuple[Block, ...] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class HeadingContent(BaseEntity):
    rich_text: tuple[RichText, ...]
    color: str | None = None
    is_toggleable: bool | None = None
    children: tuple[Block, ...] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ToDoContent(BaseEntity):
    rich_text: tuple[RichText, ...]
    checked: bool = False
    color: str | None = None
    children: tuple[Block, ...] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CalloutContent(BaseEntity):
    rich_text: tuple[RichText, ...]
    icon: Icon | None = None
    color: str | None = None
    children: tuple[Block, ...] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CodeContent(BaseEntity):
    rich_text: tuple[RichText, ...]
    language: str
    caption: tuple[RichText, ...] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class EquationBlockContent(BaseEntity):
    expression: str


@dataclass(frozen=True, slots=True, kw_only=True)
class TitleContent(BaseEntity):
    """Payload of ``child_page`` / ``child_database``."""

    title: str


@dataclass(frozen=True, slots=True, kw_only=True)
class UrlContent(BaseEntity):
    """Payload of ``bookmark``, ``embed`` and ``link_preview``."""

    url: str
    caption: tuple[RichText, ...] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class TableOfContentsContent(BaseEntity):
    color: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SyncedFrom(BaseEntity):
    block_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class SyncedBlockContent(BaseEntity):
    """``synced_from`` is ``None`` on the original block, set on duplicates."""

    synced_from: SyncedFrom | None = None
    children: tuple[Block, ...] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ContainerContent(BaseEntity):
    """Payload of ``column_list`` (children are columns on append)."""

    children: tuple[Block, ...] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ColumnContent(BaseEntity):
    width_ratio: float | None = None
    children: tuple[Block, ...] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class TableContent(BaseEntity):
    table_width: int
    has_column_header: bool = False
    has_row_header: bool = False
    children: tuple[Block, ...] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class TableRowContent(BaseEntity):
    """One row of a table; each cell is a rich text sequence."""

    cells: tuple[tuple[RichText, ...], ...]


# --------------------------------------------------------------------------- #
# Variants
# --------------------------------------------------------------------------- #


@variant("block", "paragraph")
@dataclass(frozen=True, slots=True, kw_only=True)
class ParagraphBlock(Block):
    paragraph: TextBlockContent


@variant("block", "heading_1")
@dataclass(frozen=True, slots=True, kw_only=True)
class Heading1Block(Block):
    heading_1: HeadingContent


@variant("block", "heading_2")
@dataclass(frozen=True, slots=True, kw_only=True)
class Heading2Block(Block):
    heading_2: HeadingContent


@variant("block", "heading_3")
@dataclass(frozen=True, slots=True, kw_only=True)
class Heading3Block(Block):
    heading_3: HeadingContent


@variant("block", "bulleted_list_item")
@dataclass(frozen=True, slots=True, kw_only=True)
class BulletedListItemBlock(Block):
    bulleted_list_item: TextBlockContent


@variant("block", "numbered_list_item")
@dataclass(frozen=True, slots=True, kw_only=True)
class NumberedListItemBlock(Block):
    numbered_list_item: TextBlockContent


@variant("block", "to_do")
@dataclass(frozen=True, slots=True, kw_only=True)
class ToDoBlock(Block):
    to_do: ToDoContent


@variant("block", "toggle")
@dataclass(frozen=True, slots=True, kw_only=True)
class ToggleBlock(Block):
    toggle: TextBlockContent


@variant("block", "quote")
@dataclass(frozen=True, slots=True, kw_only=True)
class QuoteBlock(Block):
    quote: TextBlockContent


@variant("block", "callout")
@dataclass(frozen=True, slots=True, kw_only=True)
class CalloutBlock(Block):
    callout: CalloutContent


@variant("block", "code")
@dataclass(frozen=True, slots=True, kw_only=True)
class CodeBlock(Block):
    code: CodeContent


@variant("block", "equation")
@dataclass(frozen=True, slots=True, kw_only=True)
class EquationBlock(Block):
    equation: EquationBlockContent


@variant("block", "divider")
@dataclass(frozen=True, slots=True, kw_only=True)
class DividerBlock(Block):
    divider: dict[str, Any] = field(default_factory=dict)


@variant("block", "breadcrumb")
@dataclass(frozen=True, slots=True, kw_only=True)
class BreadcrumbBlock(Block):
    breadcrumb: dict[str, Any] = field(default_factory=dict)


@variant("block", "table_of_contents")
@dataclass(frozen=True, slots=True, kw_only=True)
class TableOfContentsBlock(Block):
    table_of_contents: TableOfContentsContent = field(default_factory=TableOfContentsContent)


@variant("block", "child_page")
@dataclass(frozen=True, slots=True, kw_only=True)
class ChildPageBlock(Block):
    child_page: TitleContent


@variant("block", "child_database")
@dataclass(frozen=True, slots=True, kw_only=True)
class ChildDatabaseBlock(Block):
    child_database: TitleContent


@variant("block", "bookmark")
@dataclass(frozen=True, slots=True, kw_only=True)
class BookmarkBlock(Block):
    bookmark: UrlContent


@variant("block", "embed")
@dataclass(frozen=True, slots=True, kw_only=True)
class EmbedBlock(Block):
    embed: UrlContent


@variant("block", "image")
@dataclass(frozen=True, slots=True, kw_only=True)
class ImageBlock(Block):
    image: FileObject


@variant("block", "video")
@dataclass(frozen=True, slots=True, kw_only=True)
class VideoBlock(Block):
    video: FileObject


@variant("block", "file")
@dataclass(frozen=True, slots=True, kw_only=True)
class FileBlock(Block):
    file: FileObject


@variant("block", "pdf")
@dataclass(frozen=True, slots=True, kw_only=True)
class PdfBlock(Block):
    pdf: FileObject


@variant("block", "audio")
@dataclass(frozen=True, slots=True, kw_only=True)
class AudioBlock(Block):
    audio: FileObject


@variant("block", "link_to_page")
@dataclass(frozen=True, slots=True, kw_only=True)
class LinkToPageBlock(Block):
    """Link to a page or database; the target uses the ``parent`` shapes."""

    link_to_page: Parent


@variant("block", "synced_block")
@dataclass(frozen=True, slots=True, kw_only=True)
class SyncedBlock(Block):
    synced_block: SyncedBlockContent


@variant("block", "column_list")
@dataclass(frozen=True, slots=True, kw_only=True)
class ColumnListBlock(Block):
    column_list: ContainerContent = field(default_factory=ContainerContent)


@variant("block", "column")
@dataclass(frozen=True, slots=True, kw_only=True)
class ColumnBlock(Block):
    column: ColumnContent = field(default_factory=ColumnContent)


@variant("block", "table")
@dataclass(frozen=True, slots=True, kw_only=True)
class TableBlock(Block):
    table: TableContent


@variant("block", "table_row")
@dataclass(frozen=True, slots=True, kw_only=True)
class TableRowBlock(Block):
    table_row: TableRowContent


@variant("block", "link_preview")
@dataclass(frozen=True, slots=True, kw_only=True)
class LinkPreviewBlock(Block):
    """Unfurled link; read-only, the API rejects it on append."""

    link_preview: UrlContent


@variant("block", "template")
@dataclass(frozen=True, slots=True, kw_only=True)
class TemplateBlock(Block):
    """Legacy template button; its children are the blocks it duplicates."""

    template: TextBlockContent


@variant("block", "unsupported")
@dataclass(frozen=True, slots=True, kw_only=True)
class UnsupportedBlock(Block):
    unsupported: dict[str, Any] = field(default_factory=dict)
