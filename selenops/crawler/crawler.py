# === FILE: selenops/crawler/crawler.py ===
"""
The Selenops crawl engine.

:class:`Crawler` owns no crawl state. It runs the decide/visit/extract cycle
and hands every decision and every piece of state to its delegate, see
:class:`~selenops.crawler.delegate.CrawlerDelegate`.
"""
from __future__ import annotations

from typing import Optional, Set
from urllib.parse import urlsplit

from selenops.crawler.delegate import CrawlerDelegate
from selenops.crawler.encoding import Encoding, detect_encoding
from selenops.crawler.errors import InvalidURLError, ParseError
from selenops.crawler.link_extractor import extract_links, normalize_url
from selenops.crawler.models import Error, FetchResult, Link, Skip, Visit
from selenops.logger import logger

__all__ = ("Crawler",)


class Crawler:
    """Single-threaded crawl loop driven by a delegate.

    Example::

        crawler = Crawler(delegate=my_policy)
        await crawler.start("https://example.com")
    """

    def __init__(self, delegate: CrawlerDelegate) -> None:
        self.delegate = delegate
        self._stop_requested = False

    @property
    def stopped(self) -> bool:
        return self._stop_requested

    def stop(self) -> None:
        """Ask the loop to end before its next cycle. In-flight visits finish."""
        self._stop_requested = True

    async def start(self, url: str) -> None:
        """
        Crawl from *url* until the delegate has no next URL or :meth:`stop`
        is called.

        Raises InvalidURLError before contacting the delegate if *url* is not
        an absolute http(s) URL. Exceptions raised by delegate methods other
        than ``visit`` and ``did_fetch_content`` propagate to the caller.
        """
        seed = self._validate_seed(url)
        self._stop_requested = False
        logger.debug("Crawl started at %s", seed)

        await self._cycle(seed)
        while not self._stop_requested:
            next_url = await self.delegate.next_url(self)
            if next_url is None:
                break
            await self._cycle(next_url)

        if self._stop_requested:
            logger.debug("Crawl stopped on request")
        await self.delegate.did_finish(self)
        logger.debug("Crawl finished")

    async def _cycle(self, url: str) -> None:
        decision = await self.delegate.should_visit(self, url)
        if isinstance(decision, Visit):
            await self._visit(url)
        elif isinstance(decision, Skip):
            logger.debug("Skip %s: %s", url, decision.reason)
            await self.delegate.did_skip(self, url, decision.reason)
        else:
            raise TypeError(f"should_visit returned {decision!r}, expected Visit or Skip")

    async def _visit(self, url: str) -> None:
        await self.delegate.will_visit(self, url)
        try:
            result = await self.delegate.visit(self, url)
            if result is not None:
                await self.delegate.did_fetch_content(self, result, url)
        except Exception as exc:
            logger.debug("Visit of %s failed: %s", url, exc)
            await self.delegate.did_skip(self, url, Error(exc))
            return

        await self.delegate.did_visit(self, url)
        if result is not None:
            await self._report_links(result, url)

    async def _report_links(self, result: FetchResult, url: str) -> None:
        try:
            links = self.parse_links(result.markup, url)
        except ParseError as exc:
            logger.error("%s", exc)
            return
        logger.debug("Found %d links at %s", len(links), url)
        await self.delegate.did_find_links(self, links, url)

    @staticmethod
    def parse_links(html: str, url: str) -> Set[Link]:
        """Extract the normalized outbound links of *html* fetched from *url*."""
        return extract_links(html, url)

    @staticmethod
    def detect_encoding(content_type: Optional[str], data: bytes) -> Encoding:
        """Encoding to decode a response body with; see :func:`detect_encoding`."""
        return detect_encoding(content_type, data)

    @staticmethod
    def _validate_seed(url: str) -> str:
        try:
            parts = urlsplit(url)
            seed = normalize_url(url)
        except ValueError as exc:
            raise InvalidURLError(url) from exc
        if parts.scheme.lower() not in ("http", "https") or not parts.hostname:
            raise InvalidURLError(url)
        return seed
