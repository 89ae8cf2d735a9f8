"""Article commands, run directly against the CMS (no proxy server needed)."""

from typing import List

import typer
from pydantic import ValidationError as PydanticValidationError

from cmsproxy.articles.schemas import CreateArticleInput
from cmsproxy.articles.service import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, ArticleService
from cmsproxy.cms.client import CMSClient
from cmsproxy.config import settings
from cmsproxy.errors import ProxyError, ValidationError

from cli.rendering import (
    exit_with_error,
    preview,
    render_article,
    render_pagination,
    render_summary,
)

articles_app = typer.Typer(help="List, read, create and delete CMS articles.")


@articles_app.command("list")
def articles_list(
    page: int = typer.Option(DEFAULT_PAGE, min=1, help="Page number."),
    page_size: int = typer.Option(DEFAULT_PAGE_SIZE, "--page-size", min=1, help="Articles per page."),
) -> None:
    """List one page of articles."""
    with CMSClient.from_settings(settings) as cms:
        try:
            result = ArticleService(cms).list(page=page, page_size=page_size)
        except ProxyError as exc:
            exit_with_error(exc)

    if not result.data:
        typer.echo("No articles found.")
        return
    for article in result.data:
        typer.echo(render_summary(article))
        typer.echo(f"         {preview(article)}")
    typer.echo(render_pagination(result.meta.pagination))


@articles_app.command("get")
def articles_get(
    article_id: int = typer.Argument(..., min=1, help="Article ID."),
) -> None:
    """Print a single article."""
    with CMSClient.from_settings(settings) as cms:
        try:
            article = ArticleService(cms).get(article_id)
        except ProxyError as exc:
            exit_with_error(exc)
    typer.echo(render_article(article))


@articles_app.command("create")
def articles_create(
    title: str = typer.Option(..., help="Article title."),
    text: List[str] = typer.Option(..., "--text", help="Paragraph text (repeat for more paragraphs)."),
) -> None:
    """Create an article made of plain-text paragraphs."""
    try:
        data = CreateArticleInput.model_validate({
            "title": title,
            "content": [
                {"type": "paragraph", "children": [{"type": "text", "text": paragraph}]}
                for paragraph in text
            ],
        })
    except PydanticValidationError as exc:
        exit_with_error(ValidationError.from_pydantic(exc.errors(), "Invalid article"))

    with CMSClient.from_settings(settings) as cms:
        try:
            article = ArticleService(cms).create(data)
        except ProxyError as exc:
            exit_with_error(exc)
    typer.echo(f"✅ Created article {article.id}: {article.title!r}")


@articles_app.command("delete")
def articles_delete(
    article_id: int = typer.Argument(..., min=1, help="Article ID."),
) -> None:
    """Delete an article."""
    with CMSClient.from_settings(settings) as cms:
        try:
            ArticleService(cms).delete(article_id)
        except ProxyError as exc:
            exit_with_error(exc)
    typer.echo(f"🗑️  Deleted article {article_id}")
