#!/usr/bin/env python3
"""
Google Dictionary Page Fetcher
Downloads the results page of a ``define <word>`` search and hands the parsed
tree to the dictionary panel parser.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote_plus

import aiohttp
from bs4 import BeautifulSoup

from core.config import config
from core.dictionary_entry import WordEntry
from core.google_dictionary_parser import extract_word_entry
from core.user_agents import UserAgentPool

logger = logging.getLogger(__name__)

# Status reported when the request never produced an HTTP response
NO_RESPONSE_STATUS = 0


@dataclass
class FetchResult:
    """Raw page and the HTTP status it came back with"""
    html: str
    status: int

    @property
    def ok(self) -> bool:
        return self.status == 200


@dataclass
class LookupOutcome:
    """Extracted entry plus the upstream status for the API layer"""
    entry: WordEntry
    status: int

    @property
    def rate_limited(self) -> bool:
        return self.status == 429


def build_search_url(word: str, search_url: Optional[str] = None) -> str:
    template = search_url or config.get_search_url()
    return template.format(word=quote_plus(word))


class GoogleDictionaryFetcher:
    """Fetches Google dictionary pages with rotating user agents"""

    def __init__(self, user_agents: UserAgentPool, search_url: Optional[str] = None,
                 timeout: Optional[float] = None):
        self.user_agents = user_agents
        self.search_url = search_url or config.get_search_url()
        self.timeout = timeout or config.get_request_timeout()
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        """Async context manager entry"""
        self.session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.timeout)
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        if self.session:
            await self.session.close()
            self.session = None

    def _headers(self) -> dict:
        return {
            'User-Agent': self.user_agents.choose(),
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.5',
        }

    async def fetch_page(self, word: str) -> FetchResult:
        """Download the results page; failures come back as a non-200 status."""
        if self.session is None:
            raise RuntimeError("GoogleDictionaryFetcher must be used as an async context manager")

        url = build_search_url(word, self.search_url)
        headers = self._headers()
        logger.info(f"Visiting {url}")
        logger.debug(f"User-Agent: {headers['User-Agent']}")

        try:
            async with self.session.get(url, headers=headers) as response:
                if response.status != 200:
                    logger.warning(f"Request URL: {url} failed with status {response.status}")
                    return FetchResult(html="", status=response.status)
                html = await response.text(errors="replace")
                return FetchResult(html=html, status=response.status)
        except asyncio.TimeoutError:
            logger.warning(f"Timeout fetching {url}")
        except aiohttp.ClientError as e:
            logger.error(f"Request error for {url}: {e}")

        return FetchResult(html="", status=NO_RESPONSE_STATUS)

    async def lookup(self, word: str) -> LookupOutcome:
        """Fetch and extract the dictionary entry for ``word``."""
        result = await self.fetch_page(word)
        if not result.ok:
            return LookupOutcome(entry=WordEntry(), status=result.status)

        soup = BeautifulSoup(result.html, 'html.parser')
        entry = extract_word_entry(soup)
        if entry.found:
            logger.info(f"Found '{entry.headword}' with {len(entry.parts_of_speech)} parts of speech")
        else:
            logger.info(f"No dictionary panel for '{word}'")
        return LookupOutcome(entry=entry, status=result.status)
