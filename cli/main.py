"""CMS proxy CLI: entry-point for serving the API and poking the CMS.

Usage:
    python cli/main.py --help

Commands:
    serve     run the HTTP API with uvicorn
    seed      create the starter article when the CMS is empty
    articles  list / get / create / delete articles
    auth      login / register
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from cmsproxy.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Optional

import typer

from cmsproxy.articles.service import ArticleService
from cmsproxy.cms.client import CMSClient
from cmsproxy.config import settings
from cmsproxy.errors import ProxyError
from cmsproxy.observability import setup_logging

from cli.commands.articles import articles_app
from cli.commands.auth import auth_app
from cli.rendering import exit_with_error

app = typer.Typer(
    name="cmsproxy",
    help="CMS article proxy CLI.",
    no_args_is_help=True,
)
app.add_typer(articles_app, name="articles")
app.add_typer(auth_app, name="auth")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LOG_LEVEL."),
) -> None:
    """Configure logging before any command runs."""
    setup_logging(log_level or settings.log_level, settings.log_format)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: API_HOST)."),
    port: Optional[int] = typer.Option(None, help="Bind port (default: API_PORT)."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    bind_host = host or settings.api_host
    bind_port = port or settings.api_port
    typer.echo(f"[serve] Proxying {settings.cms_url} on http://{bind_host}:{bind_port}")
    uvicorn.run(
        "cmsproxy.api.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("seed")
def seed() -> None:
    """Create the starter article if the CMS has no articles yet."""
    with CMSClient.from_settings(settings) as cms:
        try:
            article = ArticleService(cms).ensure_default_article()
        except ProxyError as exc:
            exit_with_error(exc)
    if article is None:
        typer.echo("[seed] Articles already exist, nothing to do.")
    else:
        typer.echo(f"[seed] ✅ Default article created: {article.id}  title={article.title!r}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
