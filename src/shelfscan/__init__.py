# ABOUTME: shelfscan resolves canonical book metadata and cover art from partial identifiers.
# ABOUTME: Top-level package; see shelfscan.core.resolver for the fallback chain.

__version__ = "0.1.0"
