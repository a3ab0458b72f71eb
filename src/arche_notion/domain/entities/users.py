# Copyright (c)
# SPDX-License-Identifier: MIT
"""
User entities.

Purpose:
    Full users (``person`` / ``bot``) as returned by the users endpoints, and
    the partial ``{"object": "user", "id": ...}`` references embedded in
    ``created_by``, people properties and user mentions.

Layer:
    domain/entities

Notes:
    Partial users carry no ``type`` key, so they are a plain entity rather than
    a member of the ``user`` union.
"""

from __future__ import annotations

from dataclasses import dataclass

from arche_notion.domain.codec.registry import union, variant
from arche_notion.domain.entities.base import BaseEntity
from arche_notion.domain.entities.objects import NotionObject
from arche_notion.domain.enums.object_type import ObjectType


@dataclass(frozen=True, slots=True, kw_only=True)
class PartialUser(BaseEntity):
    """User reference carrying only an id."""

    id: str


@variant("notion_object", ObjectType.USER)
@union("user", key="type")
@dataclass(frozen=True, slots=True, kw_only=True)
class User(NotionObject):
    """A Notion user; concrete shape selected by ``type``."""

    id: str
    name: str | None = None
    avatar_url: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PersonDetails(BaseEntity):
    """Person-specific data (email requires the user-information capability)."""

    email: str | None = None


@variant("user", "person")
@dataclass(frozen=True, slots=True, kw_only=True)
class PersonUser(User):
    """Human member or guest of the workspace."""

    person: PersonDetails


@union("bot_owner", key="type")
@dataclass(frozen=True, slots=True, kw_only=True)
class BotOwner(BaseEntity):
    """Owner of a bot user."""


@variant("bot_owner", "workspace")
@dataclass(frozen=True, slots=True, kw_only=True)
class WorkspaceBotOwner(BotOwner):
    """Bot owned by the workspace (internal integrations)."""

    workspace: bool


@variant("bot_owner", "user")
@dataclass(frozen=True, slots=True, kw_only=True)
class UserBotOwner(BotOwner):
    """Bot owned by a user (public integrations)."""

    user: PartialUser


@dataclass(frozen=True, slots=True, kw_only=True)
class BotDetails(BaseEntity):
    """Bot-specific data; empty for bots other than the caller."""

    owner: BotOwner | None = None
    workspace_name: str | None = None


@variant("user", "bot")
@dataclass(frozen=True, slots=True, kw_only=True)
class BotUser(User):
    """Integration user."""

    bot: BotDetails
