"""Article endpoints.

Routes
------
POST   /articles               Create an article
GET    /articles               List articles (?page=&pageSize=)
GET    /articles/{article_id}  Fetch one article
PATCH  /articles/{article_id}  Update title and/or content
DELETE /articles/{article_id}  Delete an article
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Path, Query, Request, Response

from cmsproxy.articles.schemas import (
    Article,
    CreateArticleInput,
    PaginatedArticles,
    UpdateArticleInput,
)
from cmsproxy.articles.service import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, ArticleService

router = APIRouter()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _service(request: Request) -> ArticleService:
    return ArticleService(request.app.state.cms)


def _positive_int(value: Optional[str], default: int) -> int:
    """Parse a query value; anything missing, malformed or < 1 yields *default*."""
    try:
        parsed = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("", response_model=Article, status_code=201)
def create(body: CreateArticleInput, request: Request) -> Article:
    """Create a new article in the CMS."""
    return _service(request).create(body)


@router.get("", response_model=PaginatedArticles)
def list_all(
    request: Request,
    page: Optional[str] = None,
    page_size: Optional[str] = Query(None, alias="pageSize"),
) -> PaginatedArticles:
    """Return one page of articles with pagination metadata."""
    return _service(request).list(
        page=_positive_int(page, DEFAULT_PAGE),
        page_size=_positive_int(page_size, DEFAULT_PAGE_SIZE),
    )


@router.get("/{article_id}", response_model=Article)
def get_one(request: Request, article_id: int = Path(..., gt=0)) -> Article:
    """Fetch a single article by its numeric ID."""
    return _service(request).get(article_id)


@router.patch("/{article_id}", response_model=Article)
def update(
    body: UpdateArticleInput,
    request: Request,
    article_id: int = Path(..., gt=0),
) -> Article:
    """Update one or more fields of an article."""
    return _service(request).update(article_id, body)


@router.delete("/{article_id}", status_code=204, response_class=Response, response_model=None)
def remove(request: Request, article_id: int = Path(..., gt=0)) -> Response:
    """Delete an article."""
    _service(request).delete(article_id)
    return Response(status_code=204)
