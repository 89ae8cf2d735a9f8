"""Tests for the pure CMS <-> DTO mappers."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from cmsproxy.articles.mapper import (
    article_plain_text,
    to_article,
    to_paginated_articles,
    to_pagination,
    to_upstream_article,
    to_upstream_payload,
    unwrap_article,
)
from cmsproxy.articles.schemas import CreateArticleInput, UpdateArticleInput
from cmsproxy.auth.mapper import to_auth_result
from cmsproxy.errors import UpstreamError


# ---------------------------------------------------------------------------
# Articles
# ---------------------------------------------------------------------------

class TestToArticle:
    def test_copies_identity_and_title(self, cms_article) -> None:
        article = to_article(cms_article(id=2, title="Hello"))
        assert article.id == 2
        assert article.document_id == "doc0002"
        assert article.title == "Hello"

    def test_parses_timestamps(self, cms_article) -> None:
        article = to_article(cms_article())
        assert article.created_at == datetime(2025, 7, 12, 18, 30, 48, 478000, tzinfo=timezone.utc)
        assert article.published_at == datetime(2025, 7, 12, 18, 30, 48, 519000, tzinfo=timezone.utc)

    def test_unpublished_article_has_no_published_at(self, cms_article) -> None:
        assert to_article(cms_article(published_at=None)).published_at is None

    def test_content_copied_verbatim(self, cms_article) -> None:
        content = [
            {"type": "paragraph", "children": [
                {"text": "bold ", "type": "text", "bold": True},
                {"text": "plain", "type": "text"},
            ]},
            {"type": "paragraph", "children": [{"text": "second", "type": "text"}]},
        ]
        article = to_article(cms_article(content=content))
        assert article.content == content

    def test_missing_field_raises_upstream_error(self, cms_article) -> None:
        raw = cms_article()
        del raw["createdAt"]
        with pytest.raises(UpstreamError):
            to_article(raw)

    def test_bad_timestamp_raises_upstream_error(self, cms_article) -> None:
        raw = cms_article()
        raw["updatedAt"] = "yesterday"
        with pytest.raises(UpstreamError):
            to_article(raw)

    def test_non_paragraph_blocks_pass_through(self, cms_article) -> None:
        content = [
            {"type": "heading", "level": 2, "children": [{"type": "text", "text": "Intro"}]},
            {"type": "list", "format": "unordered", "children": [
                {"type": "list-item", "children": [{"type": "text", "text": "one"}]},
            ]},
            {"type": "paragraph", "children": [
                {"type": "link", "url": "https://example.com", "children": [{"type": "text", "text": "site"}]},
            ]},
        ]
        article = to_article(cms_article(content=content))
        assert article.content == content
        assert article_plain_text(article) == "Intro\none\nsite"

    def test_numeric_timestamp_raises_upstream_error(self, cms_article) -> None:
        raw = cms_article()
        raw["createdAt"] = 1752345048
        with pytest.raises(UpstreamError):
            to_article(raw)

    def test_malformed_message_keeps_parser_text_in_detail(self, cms_article) -> None:
        raw = cms_article()
        raw["id"] = "not-a-number"
        with pytest.raises(UpstreamError) as excinfo:
            to_article(raw)

        assert excinfo.value.message == "CMS returned a malformed article"
        assert "validation error" in excinfo.value.detail
        assert "validation error" not in str(excinfo.value.to_response())

    def test_round_trip_preserves_structure(self, cms_article) -> None:
        raw = cms_article(id=5, title="Round trip")
        back = to_upstream_article(to_article(raw))
        assert back["id"] == raw["id"]
        assert back["documentId"] == raw["documentId"]
        assert back["title"] == raw["title"]
        assert back["content"] == raw["content"]
        assert to_article(back) == to_article(raw)

    def test_unwrap_requires_data_object(self) -> None:
        with pytest.raises(UpstreamError):
            unwrap_article({"data": None})

    def test_plain_text_flattens_in_order(self, cms_article) -> None:
        content = [
            {"type": "paragraph", "children": [
                {"text": "Hello ", "type": "text"},
                {"text": "world", "type": "text"},
            ]},
            {"type": "paragraph", "children": [{"text": "Bye", "type": "text"}]},
        ]
        assert article_plain_text(to_article(cms_article(content=content))) == "Hello world\nBye"


class TestUpstreamPayload:
    def test_create_payload_wraps_in_data(self) -> None:
        data = CreateArticleInput(
            title="T",
            content=[{"type": "paragraph", "children": [{"type": "text", "text": "x"}]}],
        )
        assert to_upstream_payload(data) == {
            "data": {
                "title": "T",
                "content": [{"type": "paragraph", "children": [{"text": "x", "type": "text"}]}],
            }
        }

    def test_update_payload_leaves_out_unset_fields(self) -> None:
        assert to_upstream_payload(UpdateArticleInput(title="Only title")) == {
            "data": {"title": "Only title"}
        }


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------

class TestPagination:
    def test_passes_upstream_pagination_through(self) -> None:
        meta = {"pagination": {"page": 2, "pageSize": 5, "pageCount": 4, "total": 17}}
        pagination = to_pagination(meta, page=2, page_size=5, count=5)
        assert (pagination.page, pagination.page_size, pagination.page_count, pagination.total) == (2, 5, 4, 17)

    @pytest.mark.parametrize("meta", [None, {}, {"pagination": None}])
    def test_fallback_when_missing(self, meta) -> None:
        pagination = to_pagination(meta, page=3, page_size=7, count=2)
        assert (pagination.page, pagination.page_size, pagination.page_count, pagination.total) == (3, 7, 1, 2)

    def test_paginated_articles_fallback_total_is_data_length(self, cms_article) -> None:
        response = {"data": [cms_article(id=1), cms_article(id=2), cms_article(id=3)]}
        result = to_paginated_articles(response, page=1, page_size=10)
        assert [a.id for a in result.data] == [1, 2, 3]
        assert result.meta.pagination.page_count == 1
        assert result.meta.pagination.total == 3

    def test_paginated_articles_requires_list(self) -> None:
        with pytest.raises(UpstreamError):
            to_paginated_articles({"data": {"id": 1}}, page=1, page_size=10)


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------

class TestAuthMapping:
    def test_maps_jwt_and_user(self, cms_auth_payload) -> None:
        result = to_auth_result(cms_auth_payload)
        assert result.access_token == "cms-user-jwt"
        assert result.user.id == 7
        assert result.user.name == "jane"
        assert result.user.email == "jane@example.com"
        assert result.user.role == "Authenticated"

    @pytest.mark.parametrize("role", [None, {}, {"name": ""}])
    def test_role_defaults_to_user(self, cms_auth_payload, role) -> None:
        cms_auth_payload["user"]["role"] = role
        assert to_auth_result(cms_auth_payload).user.role == "user"

    def test_role_absent_defaults_to_user(self, cms_auth_payload) -> None:
        del cms_auth_payload["user"]["role"]
        assert to_auth_result(cms_auth_payload).user.role == "user"

    def test_serialises_camel_case(self, cms_auth_payload) -> None:
        dumped = to_auth_result(cms_auth_payload).model_dump(by_alias=True)
        assert dumped == {
            "accessToken": "cms-user-jwt",
            "user": {"id": 7, "name": "jane", "email": "jane@example.com", "role": "Authenticated"},
        }

    def test_missing_jwt_raises(self, cms_auth_payload) -> None:
        del cms_auth_payload["jwt"]
        with pytest.raises(UpstreamError):
            to_auth_result(cms_auth_payload)
