"""Tamil news headlines from Google News, enriched with publisher names and logos."""

__version__ = "0.1.0"

from .core.models import EnrichedArticle, RawFeedItem
from .core.enrich import ArticleEnricher
from .core.controller import LoadState, NewsFeedController

__all__ = [
    "__version__",
    "ArticleEnricher",
    "EnrichedArticle",
    "LoadState",
    "NewsFeedController",
    "RawFeedItem",
]
