# ABOUTME: The `shelfscan isbn`, `barcode`, and `title` commands for metadata lookup.
# ABOUTME: Runs the resolver's fallback chain and optionally saves the resolved cover.

import json
import logging
from pathlib import Path

import click
from rich.console import Console

from shelfscan.cli.options import api_key_option, json_option, save_cover_option
from shelfscan.cli.render import render_metadata
from shelfscan.config import ResolverConfig
from shelfscan.core.assets import CoverFetcher
from shelfscan.core.resolver import BookResolver, create_resolver
from shelfscan.metadata.http import CatalogHttpClient
from shelfscan.metadata.types import CanonicalMetadata
from shelfscan.storage.local import LocalCoverStorage

logger = logging.getLogger(__name__)


def _create_resolver(api_key: str | None) -> BookResolver:
    """Create the default resolver (Google Books, then Open Library)."""
    return create_resolver(ResolverConfig(google_api_key=api_key))


def _create_fetcher(cover_dir: Path) -> CoverFetcher:
    """Create a cover fetcher that stores images under cover_dir."""
    return CoverFetcher(CatalogHttpClient(), LocalCoverStorage(cover_dir))


def _report(
    console: Console,
    result: CanonicalMetadata | None,
    as_json: bool,
    cover_dir: Path | None,
) -> None:
    """Print a lookup result, saving its cover first when asked to."""
    if result is None:
        console.print("[yellow]No results found.[/yellow]")
        raise SystemExit(1)

    cover_ref = None
    if cover_dir is not None:
        if result.cover_image_url:
            cover_ref = _create_fetcher(cover_dir).fetch_and_persist(result.cover_image_url)
            if cover_ref is None:
                console.print("[yellow]Cover could not be saved.[/yellow]", highlight=False)
        else:
            logger.info("No cover URL to save for %s", result.isbn or result.title)

    if as_json:
        payload = result.as_dict()
        if cover_ref is not None:
            payload["coverImageId"] = cover_ref
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    render_metadata(console, result, cover_ref=cover_ref)


@click.command("isbn")
@click.argument("code")
@api_key_option
@json_option
@save_cover_option
def isbn(code: str, api_key: str | None, as_json: bool, cover_dir: Path | None) -> None:
    """Look up a book by ISBN in each catalog, then probe for a cover."""
    console = Console()
    resolver = _create_resolver(api_key)
    _report(console, resolver.resolve_by_code(code), as_json, cover_dir)


@click.command("barcode")
@click.argument("code")
@api_key_option
@json_option
@save_cover_option
def barcode(code: str, api_key: str | None, as_json: bool, cover_dir: Path | None) -> None:
    """Resolve a scanned barcode, trying EAN-13, ISBN-10, and UPC-A readings."""
    console = Console()
    resolver = _create_resolver(api_key)
    _report(console, resolver.resolve_by_barcode(code), as_json, cover_dir)


@click.command("title")
@click.argument("title_text", metavar="TITLE")
@click.option("-a", "--author", default=None, help="Narrow the search to this author.")
@api_key_option
@json_option
@save_cover_option
def title(
    title_text: str,
    author: str | None,
    api_key: str | None,
    as_json: bool,
    cover_dir: Path | None,
) -> None:
    """Search the primary catalog by title and optional author."""
    console = Console()
    resolver = _create_resolver(api_key)
    _report(console, resolver.resolve_by_text(title_text, author), as_json, cover_dir)
