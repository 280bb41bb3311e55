"""
Link extraction and URL normalization for Selenops.

Normalization drops the query string along with the fragment, so pages that
differ only by query collapse into one frontier entry. This is a deliberate
crawl policy: it bounds the frontier on sites with session or tracking
parameters at the cost of never visiting query-distinguished pages.
"""
from __future__ import annotations

from typing import Optional, Set
from urllib.parse import urljoin, urlsplit, urlunsplit

from bs4 import BeautifulSoup
from bs4.element import Tag

from selenops.crawler.errors import ParseError
from selenops.crawler.models import Link

__all__ = ("normalize_url", "extract_links", "link_title")

_SCHEMES = ("http", "https")
_DEFAULT_PORTS = {"http": 80, "https": 443}


def normalize_url(url: str) -> str:
    """
    Canonicalize *url*: lowercase scheme and host, IDNA-encode the host,
    drop the default port, use ``/`` for an empty path, strip query and
    fragment.

    Raises ValueError for an invalid port or a host IDNA cannot encode.
    """
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    host = parts.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    elif host:
        # invalid labels raise UnicodeError, a ValueError subclass
        host = host.encode("idna").decode("ascii")
    port = parts.port
    netloc = host
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        netloc = f"{host}:{port}"
    if parts.username is not None:
        userinfo = parts.username
        if parts.password is not None:
            userinfo += f":{parts.password}"
        netloc = f"{userinfo}@{netloc}"
    path = parts.path or "/"
    return urlunsplit((scheme, netloc, path, "", ""))


def _resolve(href: str, base_url: str) -> Optional[str]:
    try:
        absolute = urljoin(base_url, href.strip())
        parts = urlsplit(absolute)
        if parts.scheme.lower() not in _SCHEMES or not parts.hostname:
            return None
        return normalize_url(absolute)
    except ValueError:
        return None


def _attr(tag: Tag, name: str) -> str:
    value = tag.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return (value or "").strip()


def link_title(anchor: Tag, url: str) -> str:
    """aria-label, then image alt text, then title, then text, then *url*."""
    title = _attr(anchor, "aria-label")
    if not title:
        img = anchor.find("img", alt=True)
        if isinstance(img, Tag):
            title = _attr(img, "alt")
    if not title:
        title = _attr(anchor, "title")
    if not title:
        title = " ".join(anchor.get_text().split())
    return title or url


def extract_links(html: str, base_url: str) -> Set[Link]:
    """
    Extract http(s) links from *html*, resolved against *base_url*.

    Anchors without a usable href are dropped silently. When several anchors
    point to the same normalized URL the first one in document order is kept.
    """
    if not html:
        return set()
    try:
        soup = BeautifulSoup(html, "html.parser")
    except Exception as exc:
        raise ParseError(base_url, exc) from exc

    links: Set[Link] = set()
    for anchor in soup.find_all("a", href=True):
        if not isinstance(anchor, Tag):
            continue
        href = anchor.get("href")
        if not isinstance(href, str):
            continue
        url = _resolve(href, base_url)
        if url is None:
            continue
        # set.add keeps the existing element when an equal one is present
        links.add(Link(url=url, title=link_title(anchor, url)))
    return links
