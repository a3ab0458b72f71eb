# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest

import arche_notion  # noqa: F401  (registers and seals entity variants)
from arche_notion.infrastructure.external_apis.notion.settings import NotionSettings
from arche_notion.infrastructure.logging.logger import _REQUEST_ID_CTX, _TRACE_ID_CTX
from arche_notion.infrastructure.resilience.retry import RetryPolicy


@pytest.fixture(autouse=True)
def _reset_request_context() -> Iterator[None]:
    """Keep correlation ids from leaking between tests."""
    rid = _REQUEST_ID_CTX.set(None)
    tid = _TRACE_ID_CTX.set(None)
    yield
    _REQUEST_ID_CTX.reset(rid)
    _TRACE_ID_CTX.reset(tid)


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> NotionSettings:
    """Settings with a fixed token and defaults for everything else."""
    for key in ("NOTION_BASE_URL", "NOTION_NOTION_VERSION", "NOTION_TIMEOUT_S"):
        monkeypatch.delenv(key, raising=False)
    return NotionSettings(token="secret_test_token")


@pytest.fixture
def fast_retry() -> RetryPolicy:
    """Retry policy that never sleeps."""
    return RetryPolicy(total=2, base=0.0, cap=0.0, jitter=False)


def make_page_payload(**overrides: Any) -> dict[str, Any]:
    """Page JSON as returned by ``GET /pages/{id}``."""
    payload: dict[str, Any] = {
        "object": "page",
        "id": "p1",
        "created_time": "2025-09-01T10:00:00.000Z",
        "last_edited_time": "2025-09-02T11:30:00.000Z",
        "created_by": {"object": "user", "id": "u1"},
        "last_edited_by": {"object": "user", "id": "u1"},
        "parent": {"type": "data_source_id", "data_source_id": "ds1", "database_id": "db1"},
        "archived": False,
        "in_trash": False,
        "icon": {"type": "emoji", "emoji": "📝"},
        "cover": None,
        "url": "https://www.notion.so/p1",
        "public_url": None,
        "properties": {
            "Name": {
                "id": "title",
                "type": "title",
                "title": [
                    {
                        "type": "text",
                        "text": {"content": "Hello", "link": None},
                        "plain_text": "Hello",
                        "href": None,
                    }
                ],
            }
        },
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def page_payload() -> dict[str, Any]:
    return make_page_payload()


@pytest.fixture
def page_factory() -> Callable[..., dict[str, Any]]:
    """Builder for page JSON with top-level overrides."""
    return make_page_payload
