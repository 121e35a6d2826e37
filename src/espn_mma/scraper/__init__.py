"""ESPN MMA crawler module."""

from .aggregator import FighterAggregator
from .client import ESPNClient, FetchedPage
from .crawler import CrawlConfig, FighterCrawler
from .routing import PageKind, classify_page, should_visit_url
from .storage import FighterStorage

__all__ = [
    "CrawlConfig",
    "ESPNClient",
    "FetchedPage",
    "FighterAggregator",
    "FighterCrawler",
    "FighterStorage",
    "PageKind",
    "classify_page",
    "should_visit_url",
]
