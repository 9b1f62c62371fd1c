"""News feed fetching and parsing."""

import logging
from typing import List

import feedparser
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .models import RawFeedItem
from ..config import FeedConfig
from ..exceptions import FeedFetchError


logger = logging.getLogger(__name__)


class FeedFetcher:
    """Fetches the news feed and turns its entries into raw feed items."""

    def __init__(self, config: FeedConfig):
        """
        Initialize feed fetcher.

        Args:
            config: Feed configuration
        """
        self.config = config
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create HTTP session with optional retry strategy."""
        session = requests.Session()

        if self.config.retry_attempts:
            retry_strategy = Retry(
                total=self.config.retry_attempts,
                backoff_factor=1,
                status_forcelist=[429, 500, 502, 503, 504],
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            session.mount("http://", adapter)
            session.mount("https://", adapter)

        session.headers.update({
            'User-Agent': self.config.user_agent
        })

        return session

    def fetch(self) -> List[RawFeedItem]:
        """
        Fetch and parse the configured feed.

        Returns:
            Raw feed items in feed order

        Raises:
            FeedFetchError: On network errors, non-2xx responses or an unparseable feed
        """
        url = self.config.url
        logger.info(f"Fetching feed: {url}")

        try:
            response = self.session.get(url, timeout=self.config.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FeedFetchError(f"HTTP error fetching feed {url}: {e}") from e

        feed = feedparser.parse(response.content)

        if feed.bozo:
            if not feed.entries:
                raise FeedFetchError(f"Invalid RSS/Atom feed: {url} ({feed.get('bozo_exception')})")
            logger.warning(f"Feed parsing warning for {url}: {feed.get('bozo_exception')}")

        items = [RawFeedItem.from_entry(entry) for entry in feed.entries]
        logger.info(f"Fetched {len(items)} items from {url}")
        return items

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()
