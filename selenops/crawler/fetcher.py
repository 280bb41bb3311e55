# selenops/crawler/fetcher.py
"""
Fetcher module: downloads a page over HTTP and decodes it to text.
"""
from __future__ import annotations

from aiohttp import ClientSession, ClientTimeout

from selenops.config import CrawlConfig
from selenops.crawler.encoding import detect_encoding
from selenops.crawler.errors import HTTPStatusError, InvalidEncodingError, InvalidResponseError
from selenops.crawler.models import FetchResult
from selenops.logger import logger


class Fetcher:
    """Fetches a URL with the configured timeout and decodes the body."""

    def __init__(self, session: ClientSession, config: CrawlConfig) -> None:
        self.session = session
        self.config = config
        self._timeout = ClientTimeout(total=config.timeout)

    async def fetch(self, url: str) -> FetchResult:
        """
        GET *url* and return its decoded text as both content and markup.

        Raises HTTPStatusError for a non-2xx status, InvalidResponseError for a
        non-text content type, InvalidEncodingError when the body does not
        decode; transport errors (aiohttp.ClientError, asyncio.TimeoutError)
        propagate unchanged.
        """
        async with self.session.get(url, timeout=self._timeout, raise_for_status=False) as resp:
            if not 200 <= resp.status < 300:
                raise HTTPStatusError(url, resp.status)
            content_type = resp.headers.get("Content-Type")
            mime = (content_type or "").split(";", 1)[0].strip().lower()
            if mime and not (mime.startswith("text/") or mime.endswith(("+xml", "/xml"))):
                raise InvalidResponseError(f"Unsupported content type {mime!r} at {url}")
            data = await resp.read()

        encoding = detect_encoding(content_type, data)
        logger.debug("Decoding %s as %s (%d bytes)", url, encoding.value, len(data))
        try:
            text = data.decode(encoding.value)
        except UnicodeDecodeError as exc:
            raise InvalidEncodingError(url, encoding.value) from exc
        return FetchResult(content=text, html=text)
