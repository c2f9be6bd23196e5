# ABOUTME: CLI package for shelfscan, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from shelfscan.cli.commands import cover_cmd, lookup_cmd


@click.group()
@click.version_option(package_name="shelfscan")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log each lookup step.")
def cli(verbose: bool) -> None:
    """shelfscan - resolve book metadata and covers from ISBNs, barcodes, or titles."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


cli.add_command(lookup_cmd.isbn)
cli.add_command(lookup_cmd.barcode)
cli.add_command(lookup_cmd.title)
cli.add_command(cover_cmd.cover)
