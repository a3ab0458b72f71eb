# Copyright (c)
# SPDX-License-Identifier: MIT
"""Notion domain entities.

Importing this package registers every union and variant with the
process-wide registry and then seals it, so the registry is complete before
any decode can run.
"""

from __future__ import annotations

from arche_notion.domain.codec.registry import REGISTRY

from .base import BaseEntity
from .blocks import (
    AudioBlock,
    Block,
    BookmarkBlock,
    BreadcrumbBlock,
    BulletedListItemBlock,
    CalloutBlock,
    CalloutContent,
    ChildDatabaseBlock,
    ChildPageBlock,
    CodeBlock,
    CodeContent,
    ColumnBlock,
    ColumnContent,
    ColumnListBlock,
    ContainerContent,
    DividerBlock,
    EmbedBlock,
    EquationBlock,
    EquationBlockContent,
    FileBlock,
    Heading1Block,
    Heading2Block,
    Heading3Block,
    HeadingContent,
    ImageBlock,
    LinkPreviewBlock,
    LinkToPageBlock,
    NumberedListItemBlock,
    ParagraphBlock,
    PdfBlock,
    QuoteBlock,
    SyncedBlock,
    SyncedBlockContent,
    SyncedFrom,
    TableBlock,
    TableContent,
    TableOfContentsBlock,
    TableOfContentsContent,
    TableRowBlock,
    TableRowContent,
    TemplateBlock,
    TextBlockContent,
    TitleContent,
    ToDoBlock,
    ToDoContent,
    ToggleBlock,
    UnsupportedBlock,
    UrlContent,
    VideoBlock,
)
from .comments import Comment
from .common import DateValue, Number, ObjectReference, SelectOption
from .data_sources import DataSource
from .databases import Database, DataSourceReference
from .files import (
    CustomEmoji,
    CustomEmojiIcon,
    EmojiIcon,
    ExternalFile,
    ExternalFileData,
    ExternalIcon,
    FileObject,
    FileUploadReference,
    HostedFile,
    HostedFileData,
    HostedFileIcon,
    Icon,
    UploadedFile,
)
from .objects import NotionObject, QueryDataSourceResult, SearchResult
from .pages import Page
from .parents import (
    BlockParent,
    DatabaseParent,
    DataSourceParent,
    PageParent,
    Parent,
    WorkspaceParent,
)
from .property_configs import (
    ButtonPropertyConfig,
    CheckboxPropertyConfig,
    CreatedByPropertyConfig,
    CreatedTimePropertyConfig,
    DatePropertyConfig,
    DualPropertyDetails,
    DualPropertyRelation,
    EmailPropertyConfig,
    FilesPropertyConfig,
    FormulaExpression,
    FormulaPropertyConfig,
    LastEditedByPropertyConfig,
    LastEditedTimePropertyConfig,
    MultiSelectPropertyConfig,
    NumberFormat,
    NumberPropertyConfig,
    PeoplePropertyConfig,
    PhoneNumberPropertyConfig,
    PropertyConfig,
    RelationInfo,
    RelationPropertyConfig,
    RichTextPropertyConfig,
    RollupPropertyConfig,
    RollupSpec,
    SelectOptions,
    SelectPropertyConfig,
    SinglePropertyRelation,
    StatusGroup,
    StatusOptions,
    StatusPropertyConfig,
    TitlePropertyConfig,
    UniqueIdFormat,
    UniqueIdPropertyConfig,
    UrlPropertyConfig,
    VerificationPropertyConfig,
)
from .property_values import (
    ArrayRollupResult,
    BooleanFormulaResult,
    ButtonPropertyValue,
    CheckboxPropertyValue,
    CreatedByPropertyValue,
    CreatedTimePropertyValue,
    DateFormulaResult,
    DatePropertyValue,
    DateRollupResult,
    EmailPropertyValue,
    FilesPropertyValue,
    FormulaPropertyValue,
    FormulaResult,
    IncompleteRollupResult,
    LastEditedByPropertyValue,
    LastEditedTimePropertyValue,
    MultiSelectPropertyValue,
    NumberFormulaResult,
    NumberPropertyValue,
    NumberRollupResult,
    PeoplePropertyValue,
    PhoneNumberPropertyValue,
    PropertyValue,
    RelationPropertyValue,
    RichTextPropertyValue,
    RollupPropertyValue,
    RollupResult,
    SelectPropertyValue,
    StatusPropertyValue,
    StringFormulaResult,
    TitlePropertyValue,
    UniqueId,
    UniqueIdPropertyValue,
    UnsupportedRollupResult,
    UrlPropertyValue,
    Verification,
    VerificationPropertyValue,
)
from .responses import (
    BlockChildrenResponse,
    CommentListResponse,
    ListResponse,
    QueryDataSourceResponse,
    SearchResponse,
    UserListResponse,
)
from .rich_text import (
    Annotations,
    DatabaseMention,
    DateMention,
    EquationContent,
    Link,
    LinkMention,
    LinkMentionDetails,
    LinkPreview,
    LinkPreviewMention,
    Mention,
    PageMention,
    RichText,
    RichTextEquation,
    RichTextMention,
    RichTextText,
    TemplateMention,
    TemplateMentionDate,
    TemplateMentionMention,
    TemplateMentionUser,
    TextContent,
    UserMention,
    plain_text,
)
from .users import (
    BotDetails,
    BotOwner,
    BotUser,
    PartialUser,
    PersonDetails,
    PersonUser,
    User,
    UserBotOwner,
    WorkspaceBotOwner,
)

REGISTRY.seal()

