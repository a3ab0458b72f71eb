# Copyright (c)
# SPDX-License-Identifier: MIT
"""Blocks gateway (``/blocks`` and ``/blocks/{id}/children``)."""

from __future__ import annotations

from arche_notion.adapters.gateways.base import NotionGateway
from arche_notion.application.interfaces.notion_transport import NotionTransport
from arche_notion.application.schemas._common import check_page_size
from arche_notion.application.schemas.blocks import (
    BlocksAppendChildrenRequest,
    BlocksUpdateRequest,
)
from arche_notion.domain.codec.decoder import Decoder
from arche_notion.domain.codec.encoder import Encoder
from arche_notion.domain.entities.blocks import Block
from arche_notion.domain.entities.responses import BlockChildrenResponse


class BlockChildrenGateway(NotionGateway):
    """``/blocks/{block_id}/children`` endpoints."""

    async def list(
        self,
        block_id: str,
        *,
        start_cursor: str | None = None,
        page_size: int | None = None,
    ) -> BlockChildrenResponse:
        """List one page of a block's direct children."""
        check_page_size(page_size)
        response: BlockChildrenResponse = await self._call(
            "blocks.children.list",
            ids={"block_id": block_id},
            params={"start_cursor": start_cursor, "page_size": page_size},
        )
        return response

    async def append(self, request: BlocksAppendChildrenRequest) -> BlockChildrenResponse:
        """Append up to 100 blocks; returns the created children."""
        response: BlockChildrenResponse = await self._call("blocks.children.append", body=request)
        return response


class BlocksGateway(NotionGateway):
    """``/blocks/{block_id}`` endpoints; children live under ``.children``."""

    def __init__(
        self,
        transport: NotionTransport,
        *,
        decoder: Decoder | None = None,
        encoder: Encoder | None = None,
    ) -> None:
        super().__init__(transport, decoder=decoder, encoder=encoder)
        self.children = BlockChildrenGateway(transport, decoder=decoder, encoder=encoder)

    async def retrieve(self, block_id: str) -> Block:
        block: Block = await self._call("blocks.retrieve", ids={"block_id": block_id})
        return block

    async def update(self, request: BlocksUpdateRequest) -> Block:
        block: Block = await self._call("blocks.update", body=request)
        return block

    async def delete(self, block_id: str) -> Block:
        """Move a block to the trash; returns it with ``in_trash`` set."""
        block: Block = await self._call("blocks.delete", ids={"block_id": block_id})
        return block
