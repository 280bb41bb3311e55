# selenops/__init__.py
"""
Selenops package initializer.
Defines the package version and exposes the crawl engine.
"""
__version__ = "1.0.0"

from selenops.crawler import (  # noqa: E402
    VISIT,
    BusinessLogic,
    Crawler,
    CrawlerDelegate,
    Encoding,
    Error,
    FetchResult,
    InvalidURL,
    Link,
    Skip,
    UnsupportedFileType,
    Visit,
    detect_encoding,
    extract_links,
    normalize_url,
)

__all__ = [
    "__version__",
    "VISIT",
    "BusinessLogic",
    "Crawler",
    "CrawlerDelegate",
    "Encoding",
    "Error",
    "FetchResult",
    "InvalidURL",
    "Link",
    "Skip",
    "UnsupportedFileType",
    "Visit",
    "detect_encoding",
    "extract_links",
    "normalize_url",
]
