# ABOUTME: The `shelfscan cover` command for downloading a cover image into storage.
# ABOUTME: Runs the cover fetcher directly against a URL.

from pathlib import Path

import click
from rich.console import Console

from shelfscan.cli.options import cover_dir_option
from shelfscan.config import DEFAULT_COVER_DIR
from shelfscan.core.assets import CoverFetcher
from shelfscan.metadata.http import CatalogHttpClient
from shelfscan.storage.local import LocalCoverStorage


def _create_fetcher(cover_dir: Path) -> CoverFetcher:
    return CoverFetcher(CatalogHttpClient(), LocalCoverStorage(cover_dir))


@click.command("cover")
@click.argument("url")
@cover_dir_option
def cover(url: str, cover_dir: Path | None) -> None:
    """Download a cover image URL and store it locally."""
    console = Console()
    cover_dir = cover_dir or DEFAULT_COVER_DIR

    reference = _create_fetcher(cover_dir).fetch_and_persist(url)
    if reference is None:
        console.print(f"[red]Could not fetch an image from {url}.[/red]", highlight=False)
        raise SystemExit(1)

    console.print(f"Saved cover as [bold]{reference}[/bold] in {cover_dir}", highlight=False)
