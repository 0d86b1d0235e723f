"""
Main CLI dispatcher for jotter.

Usage:
    jotter init                      # Create _posts/ and _drafts/
    jotter post TITLE [--slug S]
    jotter draft TITLE [--slug S]
    jotter publish DRAFT_PATH
    jotter unpublish POST_PATH
    jotter list
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from jotter import __version__

console = Console()


class Context:
    """Shared context for all commands."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.console = console


@click.group()
@click.version_option(version=__version__, prog_name="jotter")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Post and draft management for Jekyll sites."""
    ctx.obj = Context(verbose=verbose)

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@main.command()
def init() -> None:
    """Create the _posts/ and _drafts/ directories.

    Existing directories are left alone.
    """
    from jotter.core.config import get_paths

    paths = get_paths()
    for dir_path in (paths.posts, paths.drafts):
        if dir_path.is_dir():
            console.print(f"  [dim]Exists[/dim]  {dir_path.relative_to(paths.root)}")
            continue
        dir_path.mkdir(parents=True, exist_ok=True)
        console.print(f"  [green]Created[/green] {dir_path.relative_to(paths.root)}")


# Import and register commands (imports after main definition intentional)
from jotter.config.commands import config  # noqa: E402
from jotter.content.commands import (  # noqa: E402
    create_draft,
    create_post,
    list_content,
    publish,
    unpublish,
)

main.add_command(create_post)
main.add_command(create_draft)
main.add_command(publish)
main.add_command(unpublish)
main.add_command(list_content)
main.add_command(config)


if __name__ == "__main__":
    main()
