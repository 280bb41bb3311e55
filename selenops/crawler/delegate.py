"""
The policy interface the crawl engine drives.

Any object with these coroutine methods can steer a :class:`Crawler`; there
is no base class to inherit from. The engine calls the methods one at a time
and awaits each before the next, so an implementation that owns its visited
set and frontier needs no locking as long as it serves a single crawler.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Set, runtime_checkable

from selenops.crawler.models import Decision, FetchResult, Link, SkipReason

if TYPE_CHECKING:
    from selenops.crawler.crawler import Crawler

__all__ = ("CrawlerDelegate",)


@runtime_checkable
class CrawlerDelegate(Protocol):
    """Receives crawler events and owns all crawl state."""

    async def should_visit(self, crawler: Crawler, url: str) -> Decision:
        """Return ``VISIT`` or ``Skip(reason)`` for *url*."""
        ...

    async def will_visit(self, crawler: Crawler, url: str) -> None:
        """Called right before *url* is fetched."""
        ...

    async def visit(self, crawler: Crawler, url: str) -> Optional[FetchResult]:
        """
        Fetch and process *url*.

        Return a :class:`FetchResult` to let the engine extract links from it,
        or ``None`` when the delegate extracted links itself (for example via
        :meth:`Crawler.parse_links`). Any exception becomes a
        ``Skip(Error(exc))`` report.
        """
        ...

    async def did_fetch_content(self, crawler: Crawler, result: FetchResult, url: str) -> None:
        """Called with the fetch result before the visit is recorded."""
        ...

    async def did_visit(self, crawler: Crawler, url: str) -> None:
        """Record that *url* was visited successfully."""
        ...

    async def did_find_links(self, crawler: Crawler, links: Set[Link], url: str) -> None:
        """Receive every link extracted from the page at *url*."""
        ...

    async def did_skip(self, crawler: Crawler, url: str, reason: SkipReason) -> None:
        """Called when *url* is skipped or its visit failed."""
        ...

    async def next_url(self, crawler: Crawler) -> Optional[str]:
        """Return the next URL to consider, or ``None`` to end the crawl."""
        ...

    async def did_finish(self, crawler: Crawler) -> None:
        """Called once when the crawl loop ends."""
        ...
