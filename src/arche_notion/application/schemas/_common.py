# Copyright (c)
# SPDX-License-Identifier: MIT
"""Shared helpers for request schemas."""

from __future__ import annotations

from dataclasses import field
from typing import Any, Final

MAX_PAGE_SIZE: Final[int] = 100


def path_param() -> Any:
    """Declare a required field that fills the URL path instead of the body."""
    return field(metadata={"path": True})


def check_page_size(page_size: int | None) -> None:
    """Raise ``ValueError`` unless ``page_size`` is ``None`` or within 1..100."""
    if page_size is not None and not 1 <= page_size <= MAX_PAGE_SIZE:
        raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}, got {page_size}")
