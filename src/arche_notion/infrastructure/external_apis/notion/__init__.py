# Copyright (c)
# SPDX-License-Identifier: MIT
"""Notion HTTP transport."""

from .client import NotionClient
from .settings import NotionSettings

__all__ = ["NotionClient", "NotionSettings"]
