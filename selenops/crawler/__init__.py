"""
Crawl engine: the decide/visit/extract loop, link extraction and encoding
detection. Owns no I/O; fetching is the delegate's job.
"""
from selenops.crawler.crawler import Crawler
from selenops.crawler.delegate import CrawlerDelegate
from selenops.crawler.encoding import Encoding, detect_encoding
from selenops.crawler.errors import (
    CrawlerError,
    HTTPStatusError,
    InvalidEncodingError,
    InvalidResponseError,
    InvalidURLError,
    ParseError,
)
from selenops.crawler.link_extractor import extract_links, normalize_url
from selenops.crawler.models import (
    VISIT,
    BusinessLogic,
    Decision,
    Error,
    FetchResult,
    InvalidURL,
    Link,
    Skip,
    SkipReason,
    UnsupportedFileType,
    Visit,
)

__all__ = [
    "Crawler",
    "CrawlerDelegate",
    "Encoding",
    "detect_encoding",
    "extract_links",
    "normalize_url",
    "CrawlerError",
    "HTTPStatusError",
    "InvalidEncodingError",
    "InvalidResponseError",
    "InvalidURLError",
    "ParseError",
    "VISIT",
    "BusinessLogic",
    "Decision",
    "Error",
    "FetchResult",
    "InvalidURL",
    "Link",
    "Skip",
    "SkipReason",
    "UnsupportedFileType",
    "Visit",
]
