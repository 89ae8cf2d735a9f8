"""Public DTOs for articles.

Field names are snake_case in Python and camelCase on the wire
(``documentId``, ``createdAt``, ``pageSize`` ...).  FastAPI serialises
response models by alias, and inputs accept either spelling.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Rich text
# ---------------------------------------------------------------------------

class TextNode(BaseModel):
    """A run of text.  Inline formatting keys (``bold``, ``italic`` ...) are kept."""

    model_config = ConfigDict(extra="allow")

    text: str
    type: Literal["text"] = "text"


class ParagraphNode(BaseModel):
    """Block accepted on create and update.  Only plain paragraphs are written."""

    type: Literal["paragraph"] = "paragraph"
    children: list[TextNode]


# ---------------------------------------------------------------------------
# Articles
# ---------------------------------------------------------------------------

class Article(_CamelModel):
    """An article as read from the CMS.

    ``content`` is the CMS rich-text block list exactly as received: headings,
    lists, quotes and links pass through alongside paragraphs.
    """

    id: int
    document_id: Optional[str] = None
    title: str
    content: list[dict[str, Any]] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
    published_at: Optional[datetime] = None


class CreateArticleInput(_CamelModel):
    title: str = Field(..., min_length=1)
    content: list[ParagraphNode]


class UpdateArticleInput(_CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    content: Optional[list[ParagraphNode]] = None


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------

class Pagination(_CamelModel):
    page: int
    page_size: int
    page_count: int
    total: int


class ArticlesMeta(BaseModel):
    pagination: Pagination


class PaginatedArticles(BaseModel):
    data: list[Article]
    meta: ArticlesMeta
