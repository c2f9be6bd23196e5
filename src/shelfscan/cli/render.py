# ABOUTME: Rich rendering of resolved book metadata for the shelfscan CLI.
# ABOUTME: Shows populated fields as a two-column table, skipping empty ones.

from rich.console import Console
from rich.table import Table

from shelfscan.metadata.types import CanonicalMetadata


def render_metadata(
    console: Console, metadata: CanonicalMetadata, cover_ref: str | None = None
) -> None:
    """Print a resolved record as a field/value table."""
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=12)
    table.add_column("Value")

    table.add_row("Title", metadata.title or "[dim]unknown[/dim]")
    table.add_row("Author", metadata.author or "[dim]unknown[/dim]")
    if metadata.published_year is not None:
        table.add_row("Year", str(metadata.published_year))
    if metadata.publisher:
        table.add_row("Publisher", metadata.publisher)
    if metadata.page_count is not None:
        table.add_row("Pages", str(metadata.page_count))
    if metadata.language:
        table.add_row("Language", metadata.language)
    if metadata.genre:
        table.add_row("Genre", metadata.genre)
    table.add_row("ISBN", metadata.isbn or "?")
    if metadata.cover_image_url:
        table.add_row("Cover", metadata.cover_image_url)
    if cover_ref:
        table.add_row("Saved cover", cover_ref)
    if metadata.summary:
        table.add_row("Summary", metadata.summary)

    console.print(table)
    if not metadata.has_text:
        console.print("[dim]Only a cover image was found for this identifier.[/dim]")
