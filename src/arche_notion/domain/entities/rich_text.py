# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Rich text entities.

Purpose:
    Rich text spans (``text``, ``mention``, ``equation``) used by titles,
    paragraph content, captions and comments, plus the nested ``mention`` union.

Layer:
    domain/entities

Notes:
    - ``plain_text`` and ``annotations`` are present on responses but optional
      on requests, so they are optional here.
    - Content strings are kept exactly as sent (no trimming).
"""

from __future__ import annotations

from dataclasses import dataclass

from arche_notion.domain.codec.registry import union, variant
from arche_notion.domain.entities.base import BaseEntity
from arche_notion.domain.entities.common import DateValue, ObjectReference
from arche_notion.domain.entities.users import PartialUser


@dataclass(frozen=True, slots=True, kw_only=True)
class Annotations(BaseEntity):
    """Styling applied to a rich text span."""

    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False
    color: str = "default"


@dataclass(frozen=True, slots=True, kw_only=True)
class Link(BaseEntity):
    """Inline hyperlink target."""

    url: str


@dataclass(frozen=True, slots=True, kw_only=True)
class TextContent(BaseEntity):
    """Payload of a ``text`` span."""

    content: str
    link: Link | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class EquationContent(BaseEntity):
    """KaTeX expression."""

    expression: str


@union("rich_text", key="type")
@dataclass(frozen=True, slots=True, kw_only=True)
class RichText(BaseEntity):
    """A rich text span; concrete shape selected by ``type``."""

    plain_text: str | None = None
    href: str | None = None
    annotations: Annotations | None = None


@variant("rich_text", "text")
@dataclass(frozen=True, slots=True, kw_only=True)
class RichTextText(RichText):
    """Literal text span."""

    text: TextContent

    @classmethod
    def of(cls, content: str, *, link: str | None = None) -> RichTextText:
        """Build a request-side text span."""
        return cls(text=TextContent(content=content, link=Link(url=link) if link else None))


@variant("rich_text", "equation")
@dataclass(frozen=True, slots=True, kw_only=True)
class RichTextEquation(RichText):
    """Inline equation span."""

    equation: EquationContent


@union("mention", key="type")
@dataclass(frozen=True, slots=True, kw_only=True)
class Mention(BaseEntity):
    """Inline mention; concrete shape selected by ``type``."""


@variant("mention", "user")
@dataclass(frozen=True, slots=True, kw_only=True)
class UserMention(Mention):
    user: PartialUser


@variant("mention", "page")
@dataclass(frozen=True, slots=True, kw_only=True)
class PageMention(Mention):
    page: ObjectReference


@variant("mention", "database")
@dataclass(frozen=True, slots=True, kw_only=True)
class DatabaseMention(Mention):
    database: ObjectReference


@variant("mention", "date")
@dataclass(frozen=True, slots=True, kw_only=True)
class DateMention(Mention):
    date: DateValue


@dataclass(frozen=True, slots=True, kw_only=True)
class LinkPreview(BaseEntity):
    url: str


@variant("mention", "link_preview")
@dataclass(frozen=True, slots=True, kw_only=True)
class LinkPreviewMention(Mention):
    link_preview: LinkPreview


@dataclass(frozen=True, slots=True, kw_only=True)
class LinkMentionDetails(BaseEntity):
    """Unfurled web link; everything but ``href`` depends on what the site exposes."""

    href: str
    title: str | None = None
    description: str | None = None
    link_author: str | None = None
    link_provider: str | None = None
    icon_url: str | None = None
    thumbnail_url: str | None = None


@variant("mention", "link_mention")
@dataclass(frozen=True, slots=True, kw_only=True)
class LinkMention(Mention):
    link_mention: LinkMentionDetails


@union("template_mention", key="type")
@dataclass(frozen=True, slots=True, kw_only=True)
class TemplateMention(BaseEntity):
    """Placeholder inside a template block, resolved when the template is used."""


@variant("template_mention", "template_mention_date")
@dataclass(frozen=True, slots=True, kw_only=True)
class TemplateMentionDate(TemplateMention):
    template_mention_date: str  # "today" or "now"


@variant("template_mention", "template_mention_user")
@dataclass(frozen=True, slots=True, kw_only=True)
class TemplateMentionUser(TemplateMention):
    template_mention_user: str  # "me"


@variant("mention", "template_mention")
@dataclass(frozen=True, slots=True, kw_only=True)
class TemplateMentionMention(Mention):
    template_mention: TemplateMention


@variant("rich_text", "mention")
@dataclass(frozen=True, slots=True, kw_only=True)
class RichTextMention(RichText):
    """Mention span; the target kind is in ``mention``."""

    mention: Mention


def plain_text(spans: tuple[RichText, ...] | None) -> str:
    """Concatenate the plain text of ``spans`` (text content as fallback)."""
    if not spans:
        return ""
    parts: list[str] = []
    for span in spans:
        if span.plain_text is not None:
            parts.append(span.plain_text)
        elif isinstance(span, RichTextText):
            parts.append(span.text.content)
        elif isinstance(span, RichTextEquation):
            parts.append(span.equation.expression)
    return "".join(parts)
