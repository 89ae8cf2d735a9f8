"""Article operations forwarded to the CMS ``/articles`` collection.

Failure policy
--------------
``create`` and ``list`` let :class:`~cmsproxy.errors.UpstreamError` propagate
(reported as 502).  ``get``, ``update`` and ``delete`` report *any* upstream
failure as :class:`~cmsproxy.errors.NotFoundError`, whether the CMS answered
404 or could not be reached at all.  Every failure is logged before it is
translated.
"""

from __future__ import annotations

import logging
from typing import Optional

from cmsproxy.articles.mapper import (
    to_paginated_articles,
    to_upstream_payload,
    unwrap_article,
)
from cmsproxy.articles.schemas import (
    Article,
    CreateArticleInput,
    PaginatedArticles,
    ParagraphNode,
    TextNode,
    UpdateArticleInput,
)
from cmsproxy.cms.client import CMSClient
from cmsproxy.errors import NotFoundError, UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

DEFAULT_ARTICLE = CreateArticleInput(
    title="First Article",
    content=[
        ParagraphNode(children=[TextNode(text="Some random text for the first article")]),
    ],
)


def _not_found(article_id: int) -> NotFoundError:
    return NotFoundError(f"Article with ID {article_id} not found")


class ArticleService:
    """CRUD over CMS articles.  Holds no state beyond the shared client."""

    def __init__(self, cms: CMSClient) -> None:
        self._cms = cms

    def create(self, data: CreateArticleInput) -> Article:
        try:
            response = self._cms.post("/articles", to_upstream_payload(data))
            return unwrap_article(response)
        except UpstreamError as exc:
            logger.error(
                "Error creating article %r: %s (detail: %s)", data.title, exc, exc.detail,
                extra={"endpoint": "articles.create"},
            )
            raise

    def list(self, page: int = DEFAULT_PAGE, page_size: int = DEFAULT_PAGE_SIZE) -> PaginatedArticles:
        params = {
            "pagination[page]": page,
            "pagination[pageSize]": page_size,
            "populate": "*",
        }
        try:
            response = self._cms.get("/articles", params)
            return to_paginated_articles(response, page, page_size)
        except UpstreamError as exc:
            logger.error(
                "Error fetching articles (page=%d, pageSize=%d): %s (detail: %s)",
                page, page_size, exc, exc.detail,
                extra={"endpoint": "articles.list"},
            )
            raise

    def get(self, article_id: int) -> Article:
        try:
            response = self._cms.get(f"/articles/{article_id}", {"populate": "*"})
            return unwrap_article(response)
        except UpstreamError as exc:
            logger.error(
                "Error fetching article %d: %s (detail: %s)", article_id, exc, exc.detail,
                extra={"endpoint": "articles.get", "article_id": article_id},
            )
            raise _not_found(article_id) from exc

    def update(self, article_id: int, data: UpdateArticleInput) -> Article:
        try:
            response = self._cms.put(f"/articles/{article_id}", to_upstream_payload(data))
            return unwrap_article(response)
        except UpstreamError as exc:
            logger.error(
                "Error updating article %d: %s (detail: %s)", article_id, exc, exc.detail,
                extra={"endpoint": "articles.update", "article_id": article_id},
            )
            raise _not_found(article_id) from exc

    def delete(self, article_id: int) -> None:
        try:
            self._cms.delete(f"/articles/{article_id}")
        except UpstreamError as exc:
            logger.error(
                "Error deleting article %d: %s (detail: %s)", article_id, exc, exc.detail,
                extra={"endpoint": "articles.delete", "article_id": article_id},
            )
            raise _not_found(article_id) from exc

    def ensure_default_article(self) -> Optional[Article]:
        """Create the starter article when the CMS has none.

        Returns the created article, or ``None`` if articles already exist.
        """
        existing = self.list(page=1, page_size=1)
        if existing.meta.pagination.total > 0 or existing.data:
            return None
        article = self.create(DEFAULT_ARTICLE)
        logger.info("Default article created: id=%d", article.id, extra={"article_id": article.id})
        return article
