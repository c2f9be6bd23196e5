# ABOUTME: Shared Click options for shelfscan CLI commands.
# ABOUTME: Provides reusable decorators for common flags like --api-key and --save-cover.

from pathlib import Path

import click

from shelfscan.config import DEFAULT_COVER_DIR, GOOGLE_API_KEY_ENVVAR

api_key_option = click.option(
    "--api-key",
    envvar=GOOGLE_API_KEY_ENVVAR,
    default=None,
    help=f"Google Books API key (env: {GOOGLE_API_KEY_ENVVAR}).",
)

json_option = click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the resolved record as JSON.",
)

save_cover_option = click.option(
    "--save-cover",
    "cover_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Download the cover into this directory.",
)

cover_dir_option = click.option(
    "-d",
    "--dir",
    "cover_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help=f"Directory to store covers in (default: {DEFAULT_COVER_DIR})",
)
