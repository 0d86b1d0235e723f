"""CLI commands for posts and drafts.

Thin layer over ContentManager: resolve the site root, run the operation,
report the written path.
"""

from __future__ import annotations

import json as json_module
from collections.abc import Callable
from functools import wraps
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jotter.content.frontmatter import MalformedContentError
from jotter.content.manager import ContentItem, ContentManager
from jotter.core.slug import InvalidSlugError

console = Console()

# Failures that are the user's to fix; anything else is a bug and propagates
USER_ERRORS = (
    MalformedContentError,
    InvalidSlugError,
    FileNotFoundError,
    FileExistsError,
    UnicodeDecodeError,
)


# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------


def _get_manager() -> ContentManager:
    from jotter.core.config import get_site_root

    return ContentManager(get_site_root())


def _report_errors(func: Callable) -> Callable:
    """Print known content errors in red and exit with status 1."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except USER_ERRORS as e:
            console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
            raise SystemExit(1)

    return wrapper


def _item_to_dict(item: ContentItem) -> dict:
    return {
        "slug": item.slug,
        "title": item.title,
        "date": item.date.isoformat() if item.date else None,
        "draft": item.is_draft,
        "path": str(item.path),
    }


# ---------------------------------------------------------------------------
# jotter post / jotter draft
# ---------------------------------------------------------------------------


@click.command(name="post")
@click.argument("title")
@click.option("--slug", default=None, help="Filename slug (derived from title if omitted)")
@_report_errors
def create_post(title: str, slug: str | None) -> None:
    """Create a new timestamped post in _posts."""
    path = _get_manager().create_post(title, slug)
    console.print(f"[green]Created:[/green] {escape(str(path))}", soft_wrap=True)


@click.command(name="draft")
@click.argument("title")
@click.option("--slug", default=None, help="Filename slug (derived from title if omitted)")
@_report_errors
def create_draft(title: str, slug: str | None) -> None:
    """Create a new undated draft in _drafts."""
    path = _get_manager().create_draft(title, slug)
    console.print(f"[green]Created:[/green] {escape(str(path))}", soft_wrap=True)


# ---------------------------------------------------------------------------
# jotter publish / jotter unpublish
# ---------------------------------------------------------------------------


@click.command(name="publish")
@click.argument("draft_path", type=click.Path(path_type=Path))
@click.option("--keep-draft", is_flag=True, help="Leave the draft file in place")
@_report_errors
def publish(draft_path: Path, keep_draft: bool) -> None:
    """Publish a draft as a post dated now."""
    path = _get_manager().publish(draft_path, keep_draft=keep_draft)
    console.print(f"[green]Published:[/green] {escape(str(path))}", soft_wrap=True)


@click.command(name="unpublish")
@click.argument("post_path", type=click.Path(path_type=Path))
@click.option("--keep-timestamp", is_flag=True, help="Keep the post's date in the draft")
@_report_errors
def unpublish(post_path: Path, keep_timestamp: bool) -> None:
    """Move a post back to _drafts."""
    path = _get_manager().unpublish(post_path, keep_timestamp=keep_timestamp)
    console.print(f"[green]Unpublished:[/green] {escape(str(path))}", soft_wrap=True)


# ---------------------------------------------------------------------------
# jotter list
# ---------------------------------------------------------------------------


@click.command(name="list")
@click.option("--posts", "only_posts", is_flag=True, help="Only list posts")
@click.option("--drafts", "only_drafts", is_flag=True, help="Only list drafts")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON array")
def list_content(only_posts: bool, only_drafts: bool, as_json: bool) -> None:
    """List posts and drafts."""
    manager = _get_manager()

    items: list[ContentItem] = []
    if not only_drafts:
        items.extend(sorted(manager.list_posts(), key=lambda it: it.path.name, reverse=True))
    if not only_posts:
        items.extend(manager.list_drafts())

    if as_json:
        click.echo(json_module.dumps([_item_to_dict(it) for it in items], indent=2))
        return

    if not items:
        console.print("[yellow]No content found.[/yellow]")
        return

    table = Table(title=f"Content ({len(items)})")
    table.add_column("Date", style="cyan", width=12)
    table.add_column("Title", no_wrap=False)
    table.add_column("Slug", style="dim")
    table.add_column("State", justify="center")

    for it in items:
        table.add_row(
            it.date.isoformat() if it.date else "",
            escape(it.title),
            it.slug,
            it.state.value,
        )

    console.print(table)
