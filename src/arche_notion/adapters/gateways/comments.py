# Copyright (c)
# SPDX-License-Identifier: MIT
"""Comments gateway."""

from __future__ import annotations

from arche_notion.adapters.gateways.base import NotionGateway
from arche_notion.application.schemas._common import check_page_size
from arche_notion.application.schemas.comments import CommentCreateRequest
from arche_notion.domain.entities.comments import Comment
from arche_notion.domain.entities.responses import CommentListResponse


class CommentsGateway(NotionGateway):
    """``/comments`` endpoints."""

    async def create(self, request: CommentCreateRequest) -> Comment:
        comment: Comment = await self._call("comments.create", body=request)
        return comment

    async def list(
        self,
        block_id: str,
        *,
        start_cursor: str | None = None,
        page_size: int | None = None,
    ) -> CommentListResponse:
        """List unresolved comments on a page or block."""
        check_page_size(page_size)
        response: CommentListResponse = await self._call(
            "comments.list",
            params={"block_id": block_id, "start_cursor": start_cursor, "page_size": page_size},
        )
        return response
