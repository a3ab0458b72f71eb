# Copyright (c)
# SPDX-License-Identifier: MIT
"""Users gateway."""

from __future__ import annotations

from arche_notion.adapters.gateways.base import NotionGateway
from arche_notion.application.schemas._common import check_page_size
from arche_notion.domain.entities.responses import UserListResponse
from arche_notion.domain.entities.users import User


class UsersGateway(NotionGateway):
    """``/users`` endpoints."""

    async def me(self) -> User:
        """Return the bot user behind the current token."""
        user: User = await self._call("users.me")
        return user

    async def retrieve(self, user_id: str) -> User:
        user: User = await self._call("users.retrieve", ids={"user_id": user_id})
        return user

    async def list(
        self,
        *,
        start_cursor: str | None = None,
        page_size: int | None = None,
    ) -> UserListResponse:
        """List one page of workspace members (people and bots)."""
        check_page_size(page_size)
        response: UserListResponse = await self._call(
            "users.list", params={"start_cursor": start_cursor, "page_size": page_size}
        )
        return response
