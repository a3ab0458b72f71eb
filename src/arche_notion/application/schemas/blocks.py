# Copyright (c)
# SPDX-License-Identifier: MIT
"""Request parameters for the blocks endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final

from arche_notion.application.schemas._common import MAX_PAGE_SIZE, path_param
from arche_notion.domain.codec.encoder import encode
from arche_notion.domain.entities.blocks import Block

# Read-only block fields that Notion rejects in an update body.
_READ_ONLY_BLOCK_KEYS: Final[frozenset[str]] = frozenset(
    {
        "object",
        "id",
        "parent",
        "created_time",
        "created_by",
        "last_edited_time",
        "last_edited_by",
        "has_children",
        "archived",
        "in_trash",
    }
)


@dataclass(frozen=True, slots=True, kw_only=True)
class BlocksAppendChildrenRequest:
    """Body of ``PATCH /blocks/{block_id}/children``.

    Attributes:
        block_id: Parent block (or page) receiving the children.
        children: Blocks to append, 1..100 per request.
        after: Insert after this child block instead of at the end.
    """

    block_id: str = path_param()
    children: tuple[Block, ...]
    after: str | None = None

    def __post_init__(self) -> None:
        if not 1 <= len(self.children) <= MAX_PAGE_SIZE:
            raise ValueError(
                f"children must hold between 1 and {MAX_PAGE_SIZE} blocks, got {len(self.children)}"
            )


@dataclass(frozen=True, slots=True, kw_only=True)
class BlocksUpdateRequest:
    """Body of ``PATCH /blocks/{block_id}``.

    ``block`` supplies the new type payload (its ``type`` must match the
    stored block); ``in_trash`` moves the block to or from the trash.
    """

    block_id: str = path_param()
    block: Block | None = None
    in_trash: bool | None = None

    def __post_init__(self) -> None:
        if self.block is None and self.in_trash is None:
            raise ValueError("BlocksUpdateRequest needs a block or in_trash")

    def to_json(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.block is not None:
            encoded = encode(self.block)
            assert isinstance(encoded, dict)
            body.update((k, v) for k, v in encoded.items() if k not in _READ_ONLY_BLOCK_KEYS)
        if self.in_trash is not None:
            body["in_trash"] = self.in_trash
        return body


__all__ = ["BlocksAppendChildrenRequest", "BlocksUpdateRequest"]
