"""
Configuration CLI commands.

Shows where jotter thinks the site lives and which config file it reads.
"""

from __future__ import annotations

import click
import yaml
from rich.console import Console
from rich.table import Table

from jotter.core.config import get_paths, load_global_config

console = Console()


@click.group()
def config():
    """Inspect jotter configuration.

    Global settings are read from ~/.config/jotter/config.yaml.
    """
    pass


@config.command(name="show")
def show_cmd():
    """Show the resolved site root, content directories and global config."""
    paths = get_paths()

    table = Table(title="Configuration", show_header=True, header_style="bold cyan")
    table.add_column("Setting")
    table.add_column("Value", style="green")

    table.add_row("site root", str(paths.root))
    table.add_row("posts", str(paths.posts))
    table.add_row("drafts", str(paths.drafts))
    table.add_row("config file", str(paths.config_file))
    console.print(table)

    global_config = load_global_config()
    if global_config:
        console.print()
        console.print("[dim]Global config:[/dim]")
        console.print(yaml.dump(global_config, default_flow_style=False, sort_keys=False))
    else:
        console.print(f"[dim]No global config at {paths.config_file}[/dim]")
