# Copyright (c)
# SPDX-License-Identifier: MIT
"""Notion transport client settings.

Purpose:
    Pydantic-based configuration for the Notion HTTP client: base URL,
    integration token, API version, timeouts and retry budget.

Layer:
    infrastructure

Notes:
    - Values are sourced from environment variables prefixed with ``NOTION_``.
    - The token is a ``SecretStr`` so it never shows up in reprs or logs.
"""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class NotionSettings(BaseSettings):
    """Configuration for the Notion HTTP client.

    Environment variables (with ``model_config.env_prefix``):

    * ``NOTION_BASE_URL``
    * ``NOTION_TOKEN``
    * ``NOTION_NOTION_VERSION``
    * ``NOTION_USER_AGENT``
    * ``NOTION_TIMEOUT_S``
    * ``NOTION_MAX_RETRIES``
    """

    base_url: str = Field(
        "https://api.notion.com/v1",
        description="Base URL of the Notion public API.",
    )
    token: SecretStr = Field(
        ...,
        description="Integration token (internal integration secret or OAuth access token).",
    )
    notion_version: str = Field(
        "2025-09-03",
        description="Value of the Notion-Version header; selects the API contract.",
    )
    user_agent: str = Field(
        "arche-notion/0.1",
        description="User agent string sent with every request.",
    )
    timeout_s: float = Field(
        8.0,
        description="Per-request timeout in seconds for the transport client.",
    )
    max_retries: int = Field(
        4,
        description="Maximum number of retry attempts for rate-limited or unavailable responses.",
    )

    model_config: SettingsConfigDict = SettingsConfigDict(
        env_prefix="NOTION_",
        env_nested_delimiter="__",
        extra="ignore",
    )
