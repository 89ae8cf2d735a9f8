"""Translate between CMS article payloads and the public DTOs.

Pure functions only; nothing here performs I/O.

CMS article shape::

    {
        "id": 2,
        "documentId": "l0xk4c...",
        "title": "First Article",
        "content": [{"type": "paragraph", "children": [{"type": "text", "text": "..."}]}],
        "createdAt": "2025-07-12T18:30:48.478Z",
        "updatedAt": "2025-07-12T18:30:48.478Z",
        "publishedAt": "2025-07-12T18:30:48.519Z"
    }

Collection responses wrap a list of these as ``{"data": [...], "meta":
{"pagination": {...}}}``; single-item responses use the same envelope with one
object under ``data``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from cmsproxy.articles.schemas import (
    Article,
    ArticlesMeta,
    CreateArticleInput,
    PaginatedArticles,
    Pagination,
    UpdateArticleInput,
)
from cmsproxy.errors import UpstreamError


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"expected an ISO-8601 string, got {type(value).__name__}")
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _format_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat().replace("+00:00", "Z")


# ---------------------------------------------------------------------------
# Articles
# ---------------------------------------------------------------------------

def to_article(raw: dict[str, Any]) -> Article:
    """Map one CMS article object onto :class:`Article`.

    Identity fields, title and content are copied verbatim; the three
    timestamps are parsed from ISO-8601 strings.

    Raises:
        UpstreamError: If the payload is missing required fields or carries
            values that cannot be parsed.
    """
    try:
        return Article(
            id=raw["id"],
            document_id=raw.get("documentId"),
            title=raw["title"],
            content=raw.get("content") or [],
            created_at=_parse_timestamp(raw["createdAt"]),
            updated_at=_parse_timestamp(raw["updatedAt"]),
            published_at=_parse_timestamp(raw.get("publishedAt")),
        )
    except (KeyError, TypeError, ValueError, PydanticValidationError) as exc:
        raise UpstreamError("CMS returned a malformed article", detail=str(exc)) from exc


def to_upstream_article(article: Article) -> dict[str, Any]:
    """Inverse of :func:`to_article`: back to the CMS's camelCase shape."""
    return {
        "id": article.id,
        "documentId": article.document_id,
        "title": article.title,
        "content": list(article.content),
        "createdAt": _format_timestamp(article.created_at),
        "updatedAt": _format_timestamp(article.updated_at),
        "publishedAt": _format_timestamp(article.published_at),
    }


def unwrap_article(response: Any) -> Article:
    """Map a single-item ``{"data": {...}}`` envelope."""
    if not isinstance(response, dict) or not isinstance(response.get("data"), dict):
        raise UpstreamError("CMS response has no article under 'data'")
    return to_article(response["data"])


def to_upstream_payload(data: Union[CreateArticleInput, UpdateArticleInput]) -> dict[str, Any]:
    """Request body for create / update.  Unset update fields are left out."""
    return {"data": data.model_dump(exclude_none=True)}


def _node_text(node: Any) -> str:
    if not isinstance(node, dict):
        return ""
    if isinstance(node.get("text"), str):
        return node["text"]
    return "".join(_node_text(child) for child in node.get("children") or [])


def article_plain_text(article: Article) -> str:
    """Flatten the rich-text tree: one line per top-level block, runs concatenated.

    Nested children (list items, links, quotes) are walked depth-first.
    """
    return "\n".join(_node_text(block) for block in article.content)


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------

def to_pagination(
    meta: Optional[dict[str, Any]],
    page: int,
    page_size: int,
    count: int,
) -> Pagination:
    """Pass the CMS pagination block through, or synthesise a single page.

    The fallback reports the requested ``page`` / ``page_size``, a page count
    of 1 and ``count`` (the number of items actually returned) as the total.
    """
    upstream = (meta or {}).get("pagination")
    if upstream:
        try:
            return Pagination.model_validate(upstream)
        except PydanticValidationError as exc:
            raise UpstreamError("CMS returned malformed pagination", detail=str(exc)) from exc
    return Pagination(page=page, page_size=page_size, page_count=1, total=count)


def to_paginated_articles(response: Any, page: int, page_size: int) -> PaginatedArticles:
    if not isinstance(response, dict) or not isinstance(response.get("data"), list):
        raise UpstreamError("CMS response has no article list under 'data'")
    articles = [to_article(item) for item in response["data"]]
    return PaginatedArticles(
        data=articles,
        meta=ArticlesMeta(
            pagination=to_pagination(response.get("meta"), page, page_size, len(articles)),
        ),
    )
