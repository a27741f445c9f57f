"""
Upstream page harvesting.

This package contains the components that talk to the outside world:
- Google dictionary page fetcher
"""

from .google_dictionary_fetcher import (
    FetchResult,
    GoogleDictionaryFetcher,
    LookupOutcome,
    build_search_url,
)

__all__ = [
    'FetchResult',
    'GoogleDictionaryFetcher',
    'LookupOutcome',
    'build_search_url'
]
