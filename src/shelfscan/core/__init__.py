# ABOUTME: Core package: the resolution orchestrator and the cover asset fetcher.
# ABOUTME: Exports BookResolver, create_resolver, and CoverFetcher.

from shelfscan.core.assets import CoverFetcher
from shelfscan.core.resolver import BookResolver, ResolutionStep, create_resolver, run_chain

__all__ = [
    "BookResolver",
    "CoverFetcher",
    "ResolutionStep",
    "create_resolver",
    "run_chain",
]
