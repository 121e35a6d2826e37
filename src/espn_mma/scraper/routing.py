"""URL filtering and page classification for the ESPN crawl."""

from enum import Enum
from urllib.parse import urlparse

ALLOWED_DOMAINS = ("espn.com", "www.espn.com")

# A URL must contain one of these to be crawled
ALLOWED_PATTERNS = ("espn.com/mma/fight", "espn.com/mma/fighter/")

# ...and none of these
BLOCKED_FRAGMENTS = ("news", "bio", "watch", "schedule")


class PageKind(Enum):
    """Which extraction routine a page is handed to."""

    STATS = "stats"
    HISTORY = "history"
    OTHER = "other"  # Crawled for links only


def is_allowed_domain(url: str) -> bool:
    """Check the URL host against ALLOWED_DOMAINS."""
    return urlparse(url).hostname in ALLOWED_DOMAINS


def should_visit_url(url: str) -> bool:
    """Check whether a URL is an MMA fighter/fight page worth crawling."""
    if not any(pattern in url for pattern in ALLOWED_PATTERNS):
        return False
    return not any(fragment in url for fragment in BLOCKED_FRAGMENTS)


def classify_page(url: str) -> PageKind:
    """Pick the extraction routine for a fetched page."""
    if not should_visit_url(url):
        return PageKind.OTHER
    if "stats" in url:
        return PageKind.STATS
    if "history" in url:
        return PageKind.HISTORY
    return PageKind.OTHER
