# === FILE: selenops/scanner.py ===
"""
Wrapper that runs a word-search crawl for a configuration.
"""
from selenops.config import CrawlConfig
from selenops.executor import CrawlSummary, Executor


async def start_search(cfg: CrawlConfig) -> CrawlSummary:
    """
    Run an Executor inside its context and return the crawl summary.

    Parameters
    ----------
    cfg : CrawlConfig
        Crawl configuration.

    Returns
    -------
    CrawlSummary
        Visited pages, pages containing the word, and skipped URLs.
    """
    async with Executor(cfg) as executor:
        return await executor.run()

__all__ = ["start_search"]
