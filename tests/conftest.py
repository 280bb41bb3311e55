# File: tests/conftest.py
from typing import Dict, List

import pytest

from selenops.crawler.errors import HTTPStatusError
from selenops.crawler.models import FetchResult


class FakeFetcher:
    """Serves canned markup instead of touching the network."""

    def __init__(self, pages: Dict[str, str]) -> None:
        self.pages = pages
        self.requested: List[str] = []

    async def fetch(self, url: str) -> FetchResult:
        self.requested.append(url)
        if url not in self.pages:
            raise HTTPStatusError(url, 404)
        html = self.pages[url]
        return FetchResult(content=html, html=html)


@pytest.fixture()
def fake_fetcher_factory():
    """Return a callable building a FakeFetcher from a url -> html mapping."""
    return FakeFetcher


@pytest.fixture()
def seed_html() -> str:
    """
    Seed page with a self-link, an internal link and two non-HTTP links.
    """
    return (
        "<html><body><p>This page contains the word 'searchWord'.</p>"
        '<a href="/">self</a>'
        '<a href="/page2">Page 2</a>'
        '<a href="mailto:a@b.com">mail</a>'
        '<a href="javascript:void(0)">js</a>'
        "</body></html>"
    )
