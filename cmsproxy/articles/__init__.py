"""Articles package: DTOs, CMS mapping and the article service."""

from cmsproxy.articles.schemas import (
    Article,
    CreateArticleInput,
    PaginatedArticles,
    Pagination,
    ParagraphNode,
    TextNode,
    UpdateArticleInput,
)
from cmsproxy.articles.service import ArticleService

__all__ = [
    "Article",
    "ArticleService",
    "CreateArticleInput",
    "PaginatedArticles",
    "Pagination",
    "ParagraphNode",
    "TextNode",
    "UpdateArticleInput",
]
