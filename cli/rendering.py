"""Plain-text rendering of articles and errors for the CLI."""

from __future__ import annotations

from typing import NoReturn

import typer

from cmsproxy.articles.mapper import article_plain_text
from cmsproxy.articles.schemas import Article, Pagination

PREVIEW_LENGTH = 150


def exit_with_error(exc: Exception) -> NoReturn:
    """Print *exc* (and any field details it carries) and exit with code 1."""
    typer.echo(f"❌ Error: {exc}")
    for detail in getattr(exc, "details", None) or []:
        typer.echo(f"   {detail['field']}: {detail['message']}")
    raise typer.Exit(code=1)


def preview(article: Article, length: int = PREVIEW_LENGTH) -> str:
    """First *length* characters of the body, on one line."""
    text = " ".join(article_plain_text(article).split())
    if len(text) > length:
        return text[:length] + "..."
    return text


def render_summary(article: Article) -> str:
    published = article.published_at.date().isoformat() if article.published_at else "draft"
    return f"  {article.id:>5}  {article.title!r}  ({published})"


def render_article(article: Article) -> str:
    lines = [
        f"ID          : {article.id}",
        f"Document ID : {article.document_id or '(none)'}",
        f"Title       : {article.title}",
        f"Created     : {article.created_at.isoformat()}",
        f"Updated     : {article.updated_at.isoformat()}",
        f"Published   : {article.published_at.isoformat() if article.published_at else 'draft'}",
        "",
        article_plain_text(article),
    ]
    return "\n".join(lines)


def render_pagination(pagination: Pagination) -> str:
    return (
        f"page {pagination.page}/{pagination.page_count}  "
        f"(page size {pagination.page_size}, {pagination.total} total)"
    )
