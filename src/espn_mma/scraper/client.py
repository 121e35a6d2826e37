"""HTTP client for ESPN MMA scraping."""

import random
import threading
import time
from dataclasses import dataclass
from typing import Optional

import requests

BASE_URL = "https://www.espn.com"

# Default headers to mimic browser
HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}

# Rotated per request
USER_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/14.0 Safari/605.1.15",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:89.0) Gecko/20100101 Firefox/89.0",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.101 Safari/537.36",
    "Mozilla/5.0 (iPhone; CPU iPhone OS 14_6 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/14.0 Mobile/15E148 Safari/604.1",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 11_5_2) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/92.0.4515.159 Safari/537.36",
    "Mozilla/5.0 (X11; Ubuntu; Linux x86_64; rv:91.0) Gecko/20100101 Firefox/91.0",
    "Mozilla/5.0 (iPad; CPU OS 14_7_1 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/14.0 Mobile/15E148 Safari/604.1",
    "Mozilla/5.0 (Android 11; Mobile; rv:91.0) Gecko/91.0 Firefox/91.0",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/92.0.4515.159 Safari/537.36 Edg/92.0.902.78",
]


@dataclass
class FetchedPage:
    """A fetched page: final URL after redirects and the raw body."""

    url: str
    body: bytes


class ESPNClient:
    """HTTP client with shared rate limiting for espn.com."""

    def __init__(
        self,
        delay_seconds: float = 1.0,
        jitter_seconds: float = 3.0,
        timeout: float = 30,
    ):
        """Initialize client with rate limiting delay and random jitter."""
        self.session = requests.Session()
        self.session.headers.update(HEADERS)
        self.delay = delay_seconds
        self.jitter = jitter_seconds
        self.timeout = timeout
        self._lock = threading.Lock()
        self._last_request_time: Optional[float] = None

    def _rate_limit(self) -> None:
        """Enforce a randomized delay between requests across all threads."""
        with self._lock:
            wait = self.delay + random.uniform(0, self.jitter)
            if self._last_request_time is not None:
                elapsed = time.time() - self._last_request_time
                if elapsed < wait:
                    time.sleep(wait - elapsed)
            self._last_request_time = time.time()

    def fetch(self, url: str) -> FetchedPage:
        """Fetch URL and return its final URL and raw body."""
        self._rate_limit()
        response = self.session.get(
            url,
            headers={"User-Agent": random.choice(USER_AGENTS)},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return FetchedPage(url=response.url, body=response.content)
