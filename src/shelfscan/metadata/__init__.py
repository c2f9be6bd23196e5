# ABOUTME: Metadata package: identifier handling, catalog providers, and cover normalization.
# ABOUTME: Exports the CanonicalMetadata dataclass and provider protocols used throughout shelfscan.

from shelfscan.metadata.provider import CoverProbe, MetadataProvider, TextSearchProvider
from shelfscan.metadata.types import CanonicalMetadata, IdentifierKind

__all__ = [
    "CanonicalMetadata",
    "CoverProbe",
    "IdentifierKind",
    "MetadataProvider",
    "TextSearchProvider",
]
