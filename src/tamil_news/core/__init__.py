"""Core feed fetching and enrichment."""

from .models import EnrichedArticle, FeedLink, RawFeedItem
from .enrich import ArticleEnricher
from .feeds import FeedFetcher
from .controller import LoadState, NewsFeedController

__all__ = [
    "ArticleEnricher",
    "EnrichedArticle",
    "FeedFetcher",
    "FeedLink",
    "LoadState",
    "NewsFeedController",
    "RawFeedItem",
]
