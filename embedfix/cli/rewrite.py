"""Offline link commands."""

import rich_click as click
from rich.markup import escape

from ..link_utils import find_status_links, rewrite_status_links
from ._console import console, status_icon


@click.command()
@click.argument("text")
def rewrite(text: str):
    """Print TEXT with its status links pointed at mirror domains."""
    click.echo(rewrite_status_links(text))


@click.command()
@click.argument("text")
def check(text: str):
    """List the status links found in TEXT and what each would become."""
    links = find_status_links(text)
    if not links:
        console.print("No status links found")
        return

    console.print(f"Found {len(links)} status link(s):")
    for link in links:
        target = "[dim]escaped, left as is[/dim]" if link.escaped else escape(link.mirror_url)
        console.print(f"  {status_icon(not link.escaped)} {escape(link.url)} -> {target}", soft_wrap=True)
