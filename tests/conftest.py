"""Shared fixtures.

The CMS is never contacted for real: tests that go through ``CMSClient`` mock
it at the httpx transport layer with ``respx``.
"""

from __future__ import annotations

from typing import Any, Callable

import pytest

from cmsproxy.config import Settings

CMS_URL = "http://cms.test"
CMS_API = f"{CMS_URL}/api"
CMS_TOKEN = "service-token"


def _paragraphs(*texts: str) -> list[dict[str, Any]]:
    return [
        {"type": "paragraph", "children": [{"text": text, "type": "text"}]}
        for text in texts
    ]


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(
        cms_url=CMS_URL,
        cms_api_token=CMS_TOKEN,
        request_timeout=5.0,
        jwt_secret="test-secret",
        log_level="DEBUG",
        log_format="text",
    )


@pytest.fixture()
def cms_article() -> Callable[..., dict[str, Any]]:
    """Factory for CMS-shaped article objects."""

    def _make(
        id: int = 1,
        title: str = "First Article",
        content: list[dict[str, Any]] | None = None,
        published_at: str | None = "2025-07-12T18:30:48.519Z",
    ) -> dict[str, Any]:
        return {
            "id": id,
            "documentId": f"doc{id:04d}",
            "title": title,
            "content": content if content is not None else _paragraphs(
                "Some random text for the first article"
            ),
            "createdAt": "2025-07-12T18:30:48.478Z",
            "updatedAt": "2025-07-12T18:30:48.478Z",
            "publishedAt": published_at,
        }

    return _make


@pytest.fixture()
def cms_auth_payload() -> dict[str, Any]:
    return {
        "jwt": "cms-user-jwt",
        "user": {
            "id": 7,
            "username": "jane",
            "email": "jane@example.com",
            "confirmed": True,
            "blocked": False,
            "role": {"id": 1, "name": "Authenticated", "type": "authenticated"},
        },
    }
