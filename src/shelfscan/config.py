# ABOUTME: Configuration defaults for shelfscan's HTTP clients, catalogs, and cover storage.
# ABOUTME: ResolverConfig carries the tunables the CLI exposes as options.

from dataclasses import dataclass
from pathlib import Path

from shelfscan import __version__

USER_AGENT = f"shelfscan/{__version__}"

DEFAULT_COVER_DIR = Path.home() / ".shelfscan" / "covers"

# Environment variable the CLI reads the Google Books API key from.
GOOGLE_API_KEY_ENVVAR = "SHELFSCAN_GOOGLE_API_KEY"


@dataclass(frozen=True)
class ResolverConfig:
    """Settings for building a BookResolver and its HTTP client."""

    google_api_key: str | None = None
    timeout: float = 30.0
    max_retries: int = 3
    retry_delay: float = 1.0
    min_request_interval: float = 0.1
