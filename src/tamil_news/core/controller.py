"""View-model owning the article list and its loading state."""

import logging
from enum import Enum
from typing import Tuple

from .enrich import ArticleEnricher
from .feeds import FeedFetcher
from .models import EnrichedArticle
from ..exceptions import FeedFetchError


logger = logging.getLogger(__name__)


class LoadState(str, Enum):
    """Lifecycle of the article list."""

    INIT = "init"
    LOADING = "loading"
    POPULATED = "populated"
    FAILED = "failed"


class NewsFeedController:
    """Loads the feed and holds the resulting articles for display."""

    def __init__(self, fetcher: FeedFetcher, enricher: ArticleEnricher):
        self.fetcher = fetcher
        self.enricher = enricher
        self._articles: Tuple[EnrichedArticle, ...] = ()
        self._state = LoadState.INIT

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def loading(self) -> bool:
        return self._state is LoadState.LOADING

    @property
    def articles(self) -> Tuple[EnrichedArticle, ...]:
        return self._articles

    def __len__(self) -> int:
        return len(self._articles)

    def get(self, index: int) -> EnrichedArticle:
        """Get the article at a zero-based position."""
        if index < 0 or index >= len(self._articles):
            raise IndexError(f"No article at position {index} ({len(self._articles)} loaded)")
        return self._articles[index]

    def refresh(self) -> LoadState:
        """
        Fetch, enrich and replace the article list.

        Failures are logged and leave an empty list in the FAILED state; they
        never propagate to the caller.

        Returns:
            The resulting state
        """
        self._state = LoadState.LOADING
        self._articles = ()

        try:
            raw_items = self.fetcher.fetch()
            articles = tuple(self.enricher.enrich_all(raw_items))
        except FeedFetchError as e:
            logger.error(f"Error fetching news: {e}")
            self._state = LoadState.FAILED
            return self._state
        except Exception as e:
            logger.exception(f"Unexpected error loading news: {e}")
            self._state = LoadState.FAILED
            return self._state

        self._articles = articles
        self._state = LoadState.POPULATED
        logger.info(f"Loaded {len(articles)} articles")
        return self._state
