"""selenops.executor: in-memory word-search policy for the crawl engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Dict, List, Optional, Set, Tuple
from urllib.parse import urlsplit

from aiohttp import ClientSession

from selenops.config import CrawlConfig
from selenops.crawler.crawler import Crawler
from selenops.crawler.fetcher import Fetcher
from selenops.crawler.link_extractor import normalize_url
from selenops.crawler.models import (
    VISIT,
    BusinessLogic,
    Decision,
    FetchResult,
    InvalidURL,
    Link,
    Skip,
    SkipReason,
    UnsupportedFileType,
)
from selenops.logger import logger

__all__ = ["CrawlSummary", "Executor", "SKIP_EXTENSIONS"]

DIFFERENT_DOMAIN = "Different domain: {host}"
LIMIT_REACHED = "Maximum pages limit reached"
ALREADY_VISITED = "Already visited"

# Extensions that never hold a searchable HTML page
SKIP_EXTENSIONS: frozenset[str] = frozenset((
    ".jpg", ".jpeg", ".png", ".gif", ".webp", ".svg", ".ico",
    ".pdf", ".zip", ".rar", ".7z", ".gz", ".tar",
    ".mp4", ".mp3", ".wav", ".webm",
    ".css", ".js", ".map",
    ".woff", ".woff2", ".ttf", ".eot",
))


@dataclass(slots=True)
class CrawlSummary:
    """Outcome of a word-search crawl."""

    start_url: str
    word: str
    visited: List[str] = field(default_factory=list)
    matches: List[str] = field(default_factory=list)
    skipped: List[Tuple[str, str]] = field(default_factory=list)

    def as_dict(self) -> Dict[str, object]:
        return {
            "start_url": self.start_url,
            "word": self.word,
            "visited": list(self.visited),
            "matches": list(self.matches),
            "skipped": [{"url": url, "reason": reason} for url, reason in self.skipped],
        }


class Executor:
    """
    Crawl policy that searches pages for a word.

    Stays on the start URL's host, stops accepting pages once ``max_pages``
    were visited, and skips pages already seen. Owns the visited set and the
    frontier; the engine serializes every call, so a single Executor must
    not be shared between concurrently running crawlers.

    Used as an async context manager it opens its own aiohttp session unless
    a *fetcher* (anything with ``async fetch(url) -> FetchResult``) is given.
    """

    def __init__(self, config: CrawlConfig, fetcher: Optional[Fetcher] = None) -> None:
        self.config = config
        self.start_url = str(config.start_url)
        self._start_host = urlsplit(normalize_url(self.start_url)).hostname
        self.word = config.word
        self.fetcher = fetcher
        self.session: Optional[ClientSession] = None
        self.visited: List[str] = []
        self._visited_set: Set[str] = set()
        # dict preserves insertion order, giving a FIFO frontier
        self.frontier: Dict[str, None] = {}
        self.matches: List[str] = []
        self.skipped: List[Tuple[str, SkipReason]] = []
        self.finished = False

    async def __aenter__(self) -> Executor:
        if self.fetcher is None:
            self.session = ClientSession(headers={"User-Agent": self.config.user_agent})
            self.fetcher = Fetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def run(self) -> CrawlSummary:
        if self.fetcher is None:
            raise RuntimeError("Fetcher not initialized; use 'async with Executor(...)'")
        logger.info("Searching for '%s' from %s (max %d pages)", self.word, self.start_url, self.config.max_pages)
        crawler = Crawler(delegate=self)
        await crawler.start(self.start_url)
        return self.summary()

    def summary(self) -> CrawlSummary:
        return CrawlSummary(
            start_url=self.start_url,
            word=self.word,
            visited=list(self.visited),
            matches=list(self.matches),
            skipped=[(url, str(reason)) for url, reason in self.skipped],
        )

    # -- CrawlerDelegate ----------------------------------------------------

    async def should_visit(self, crawler: Crawler, url: str) -> Decision:
        try:
            host = urlsplit(normalize_url(url)).hostname
        except ValueError:
            return Skip(InvalidURL())
        if not host or not self._start_host:
            return Skip(InvalidURL())
        if self.config.same_domain and host != self._start_host:
            return Skip(BusinessLogic(DIFFERENT_DOMAIN.format(host=host)))
        if PurePosixPath(urlsplit(url).path).suffix.lower() in SKIP_EXTENSIONS:
            return Skip(UnsupportedFileType())
        if len(self._visited_set) >= self.config.max_pages:
            return Skip(BusinessLogic(LIMIT_REACHED))
        if url in self._visited_set:
            return Skip(BusinessLogic(ALREADY_VISITED))
        return VISIT

    async def will_visit(self, crawler: Crawler, url: str) -> None:
        logger.info("Fetching %s (%d/%d)", url, len(self._visited_set) + 1, self.config.max_pages)

    async def visit(self, crawler: Crawler, url: str) -> FetchResult:
        return await self.fetcher.fetch(url)

    async def did_fetch_content(self, crawler: Crawler, result: FetchResult, url: str) -> None:
        if self.word.casefold() in result.content.casefold():
            self.matches.append(url)
            logger.info("Found '%s' at: %s", self.word, url)

    async def did_visit(self, crawler: Crawler, url: str) -> None:
        self._visited_set.add(url)
        self.visited.append(url)

    async def did_find_links(self, crawler: Crawler, links: Set[Link], url: str) -> None:
        for link in sorted(links, key=lambda link: link.url):
            self.frontier.setdefault(link.url, None)

    async def did_skip(self, crawler: Crawler, url: str, reason: SkipReason) -> None:
        self.skipped.append((url, reason))
        logger.info("Skipped %s: %s", url, reason)

    async def next_url(self, crawler: Crawler) -> Optional[str]:
        if not self.frontier:
            return None
        url = next(iter(self.frontier))
        del self.frontier[url]
        return url

    async def did_finish(self, crawler: Crawler) -> None:
        self.finished = True
        logger.info("Finished! Visited pages: %d", len(self._visited_set))
        logger.info("Found %d pages containing '%s'", len(self.matches), self.word)
