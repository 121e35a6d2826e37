"""Concurrent crawl of ESPN fighter pages."""

import logging
import time
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Iterable, Optional
from urllib.parse import urldefrag, urljoin

import requests
from bs4 import BeautifulSoup

from ..extraction.models import FighterStats
from ..extraction.names import name_from_url, standardize_name
from ..extraction.parsers import make_soup, parse_history_page, parse_stats_page
from .aggregator import FighterAggregator
from .client import BASE_URL, ESPNClient, FetchedPage
from .routing import PageKind, classify_page, is_allowed_domain, should_visit_url

DEFAULT_SEED = f"{BASE_URL}/mma/fighter/history/_/id/5134399/nick-klein"

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


@dataclass
class CrawlConfig:
    """Crawl tuning knobs."""

    max_workers: int = 8
    max_pages: Optional[int] = None  # None crawls until no new links remain
    delay_seconds: float = 1.0
    jitter_seconds: float = 3.0
    timeout: float = 30


def extract_links(soup: BeautifulSoup, base_url: str) -> list[str]:
    """Return every a[href] as an absolute URL without fragment."""
    links = []
    for anchor in soup.find_all("a", href=True):
        link, _ = urldefrag(urljoin(base_url, anchor["href"]))
        links.append(link)
    return links


class FighterCrawler:
    """Crawls fighter pages and aggregates what they contain."""

    def __init__(
        self,
        client: Optional[ESPNClient] = None,
        aggregator: Optional[FighterAggregator] = None,
        config: Optional[CrawlConfig] = None,
    ):
        """Initialize crawler with HTTP client, record store and settings."""
        self.config = config or CrawlConfig()
        self.client = client or ESPNClient(
            delay_seconds=self.config.delay_seconds,
            jitter_seconds=self.config.jitter_seconds,
            timeout=self.config.timeout,
        )
        self.aggregator = aggregator or FighterAggregator()

    def process_soup(self, url: str, soup: BeautifulSoup) -> Optional[str]:
        """
        Extract a partial record from a parsed page and store it.

        Args:
            url: Final URL of the page, used for classification
            soup: Parsed page

        Returns:
            Identity key the page contributed to, or None
        """
        kind = classify_page(url)
        if kind is PageKind.OTHER:
            logger.debug(f"No extractor for {url}")
            return None

        try:
            if kind is PageKind.STATS:
                partial = parse_stats_page(soup)
                key = standardize_name(partial.full_name)
            else:
                partial = parse_history_page(soup)
                key = name_from_url(url)
        except Exception as e:
            logger.error(f"Failed to extract {url}: {e}")
            return None

        if not key:
            logger.debug(f"No fighter identity found on {url}")
            return None

        if self.aggregator.upsert(key, partial):
            logger.info(f"Added fighter: {key}")
        else:
            logger.info(f"Updated fighter: {key}")
        return key

    def _parse(self, page: FetchedPage) -> Optional[BeautifulSoup]:
        """Parse a raw page body; None if the markup cannot be parsed."""
        try:
            return make_soup(page.body)
        except Exception as e:
            logger.error(f"Failed to parse {page.url}: {e}")
            return None

    def process_page(self, page: FetchedPage) -> Optional[str]:
        """Parse a raw page body and store whatever it yields."""
        soup = self._parse(page)
        if soup is None:
            return None
        return self.process_soup(page.url, soup)

    def _visit(self, url: str) -> list[str]:
        """Fetch and process one page; return the links found on it."""
        try:
            page = self.client.fetch(url)
        except requests.RequestException as e:
            logger.error(f"Failed to fetch {url}: {e}")
            return []

        soup = self._parse(page)
        if soup is None:
            return []

        self.process_soup(page.url, soup)
        return extract_links(soup, page.url)

    def crawl(self, seeds: Iterable[str] = (DEFAULT_SEED,)) -> list[FighterStats]:
        """
        Crawl from seed URLs until every discovered page has been visited.

        Seeds are always fetched; discovered links are followed only if
        they pass the domain and URL filters.

        Returns:
            All aggregated fighter records
        """
        start = time.time()
        seen: set[str] = set()
        pending = {}

        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:

            def submit(url: str) -> None:
                if url in seen:
                    return
                if self.config.max_pages is not None and len(seen) >= self.config.max_pages:
                    return
                seen.add(url)
                pending[executor.submit(self._visit, url)] = url

            for seed in seeds:
                submit(seed)

            while pending:
                done, _ = wait(pending, return_when=FIRST_COMPLETED)
                for future in done:
                    url = pending.pop(future)
                    try:
                        links = future.result()
                    except Exception as e:
                        logger.error(f"Failed to visit {url}: {e}")
                        continue
                    for link in links:
                        if is_allowed_domain(link) and should_visit_url(link):
                            submit(link)

        fighters = self.aggregator.finalize()
        elapsed = time.time() - start
        logger.info(f"Visited {len(seen)} pages, {len(fighters)} fighters in {elapsed:.1f}s")
        return fighters
