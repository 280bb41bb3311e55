"""
Exception classes raised by the Selenops crawler and its bundled fetcher.
"""
from __future__ import annotations

from typing import Optional

__all__ = (
    "CrawlerError",
    "InvalidURLError",
    "InvalidResponseError",
    "HTTPStatusError",
    "InvalidEncodingError",
    "ParseError",
)


class CrawlerError(Exception):
    """Base class for all crawler errors."""


class InvalidURLError(CrawlerError, ValueError):
    """URL is malformed, not http(s), or has no host."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Invalid URL: {url!r}")
        self.url = url


class InvalidResponseError(CrawlerError):
    """Transport returned a response that cannot be used."""


class HTTPStatusError(CrawlerError):
    """Server answered with a non-2xx status."""

    def __init__(self, url: str, status: int) -> None:
        super().__init__(f"HTTP {status} for {url}")
        self.url = url
        self.status = status


class InvalidEncodingError(CrawlerError):
    """Body could not be decoded with the detected encoding."""

    def __init__(self, url: str, encoding: str) -> None:
        super().__init__(f"Cannot decode {url} as {encoding}")
        self.url = url
        self.encoding = encoding


class ParseError(CrawlerError):
    """Markup could not be parsed into a document."""

    def __init__(self, url: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"Error parsing {url}: {cause}")
        self.url = url
        self.cause = cause
