# Copyright (c)
# SPDX-License-Identifier: MIT
"""Adapter Gateway base: operation lookup, encode, transport call, decode.

Every resource gateway funnels through :meth:`NotionGateway._call`, which:

* looks the operation up in ``OPERATIONS`` and fills its path from the
  request's path fields (or explicit ids),
* encodes the request body with the structural encoder,
* calls the transport,
* decodes the response into the operation's response type.

Decode failures are logged (JSON logger, ``warning``), counted in
``notion_decode_errors_total`` and re-raised unchanged.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from arche_notion.application.interfaces.notion_transport import NotionTransport
from arche_notion.adapters.gateways.operations import OPERATIONS
from arche_notion.domain.codec.decoder import Decoder
from arche_notion.domain.codec.encoder import Encoder
from arche_notion.domain.exceptions.decoding import DecodeError, render_path
from arche_notion.infrastructure.logging.logger import get_json_logger
from arche_notion.infrastructure.observability.metrics_notion import (
    get_notion_decode_errors_total,
)

logger = get_json_logger(__name__)


def _path_ids(request: Any) -> dict[str, str]:
    """Collect fields marked as path parameters on a request dataclass."""
    if request is None or not dataclasses.is_dataclass(request):
        return {}
    return {
        f.name: getattr(request, f.name)
        for f in dataclasses.fields(request)
        if f.metadata.get("path")
    }


class NotionGateway:
    """Base class for resource gateways."""

    def __init__(
        self,
        transport: NotionTransport,
        *,
        decoder: Decoder | None = None,
        encoder: Encoder | None = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            transport: Object exposing ``request(...)``, usually ``NotionClient``.
            decoder: Response decoder; defaults to the process-wide registry.
            encoder: Request encoder; defaults to the process-wide registry.
        """
        self._transport = transport
        self._decoder = decoder or Decoder()
        self._encoder = encoder or Encoder()

    async def _call(
        self,
        operation: str,
        *,
        body: Any = None,
        ids: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        op = OPERATIONS[operation]
        path = op.render_path(**{**_path_ids(body), **(ids or {})})

        payload: Any = None
        if body is not None:
            payload = self._encoder.encode(body)
            if not isinstance(payload, dict):
                raise TypeError(f"{op.name} body must encode to a JSON object")

        raw = await self._transport.request(
            op.method,
            path,
            json=payload,
            params=params,
            endpoint=op.name,
        )
        try:
            return self._decoder.decode(op.response_type, raw)
        except DecodeError as exc:
            logger.warning(
                "notion.decode_failed",
                extra={
                    "extra": {
                        "operation": op.name,
                        "kind": exc.kind.value,
                        "path": render_path(exc.path),
                        "union": exc.union,
                        "discriminator_value": exc.discriminator_value,
                    }
                },
            )
            get_notion_decode_errors_total().labels(op.name, exc.kind.value).inc()
            raise


__all__ = ["NotionGateway"]
