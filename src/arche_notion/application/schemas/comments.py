# Copyright (c)
# SPDX-License-Identifier: MIT
"""Request parameters for ``POST /comments``."""

from __future__ import annotations

from dataclasses import dataclass

from arche_notion.domain.entities.parents import Parent
from arche_notion.domain.entities.rich_text import RichText


@dataclass(frozen=True, slots=True, kw_only=True)
class CommentCreateRequest:
    """A new comment on a page (``parent``) or a reply in a discussion.

    Exactly one of ``parent`` and ``discussion_id`` must be set.
    """

    rich_text: tuple[RichText, ...]
    parent: Parent | None = None
    discussion_id: str | None = None

    def __post_init__(self) -> None:
        if (self.parent is None) == (self.discussion_id is None):
            raise ValueError("exactly one of parent or discussion_id is required")


__all__ = ["CommentCreateRequest"]
