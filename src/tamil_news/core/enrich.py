"""Enrichment of feed items into display-ready articles."""

import logging
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup

from .models import EnrichedArticle, RawFeedItem
from ..config import EnrichmentConfig


logger = logging.getLogger(__name__)

INVALID_DATE = "Invalid Date"


def parse_published(value: Optional[str]) -> Optional[datetime]:
    """Parse an RSS (RFC 822) or ISO 8601 date-time, or return None."""
    if not value or not value.strip():
        return None
    value = value.strip()

    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        pass

    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def format_pub_date(value: Optional[str]) -> str:
    """Format a published date as e.g. 'Mon Jan 01 2024', or 'Invalid Date'."""
    parsed = parse_published(value)
    if parsed is None:
        return INVALID_DATE
    return parsed.strftime("%a %b %d %Y")


class ArticleEnricher:
    """Turns raw feed items into articles with image, publisher and logo."""

    def __init__(self, config: Optional[EnrichmentConfig] = None):
        """
        Initialize the enricher.

        Args:
            config: Publisher table and fallback URLs; defaults to the built-in table
        """
        self.config = config or EnrichmentConfig()
        self._publisher_names = self.config.publisher_names
        self._publisher_logos = self.config.publisher_logos
        self.parser = "html.parser"

    def extract_image(self, content: Optional[str]) -> str:
        """
        Find the first image referenced in an HTML fragment.

        Images with an empty or missing src are skipped.

        Args:
            content: HTML content of a feed item, possibly empty

        Returns:
            The first non-empty <img> src, or the placeholder image URL
        """
        if not content or not content.strip():
            return self.config.placeholder_image_url

        soup = BeautifulSoup(content, self.parser)
        for img_tag in soup.find_all("img"):
            src = (img_tag.get("src") or "").strip()
            if src:
                return src

        return self.config.placeholder_image_url

    def extract_publisher(self, title: Optional[str]) -> str:
        """
        Guess the publisher from the article title.

        Known fragments are tried in priority order, so a title mentioning two
        publishers resolves to the one listed first, wherever it appears.
        """
        title = title or ""
        for name in self._publisher_names:
            if name in title:
                return name
        return self.config.unknown_publisher

    def resolve_publisher_image(self, publisher: Optional[str]) -> str:
        """Get the logo for a publisher, falling back to the unknown logo."""
        return self._publisher_logos.get(publisher or "", self.config.unknown_logo_url)

    def enrich_item(self, raw: RawFeedItem) -> EnrichedArticle:
        """Enrich a single feed item."""
        publisher = raw.publisher or self.extract_publisher(raw.title)

        if raw.links:
            link = raw.links[0].url
        else:
            logger.warning(f"Feed item has no link: {raw.title!r}")
            link = ""

        article = EnrichedArticle(
            title=raw.title,
            link=link,
            pub_date=format_pub_date(raw.published),
            description=raw.description,
            image_url=self.extract_image(raw.content),
            publisher=publisher,
            publisher_image=self.resolve_publisher_image(publisher),
        )
        logger.debug(f"Enriched '{raw.title}' -> publisher={publisher}")
        return article

    def enrich_all(self, items: Iterable[RawFeedItem]) -> List[EnrichedArticle]:
        """Enrich items one by one, keeping their order."""
        return [self.enrich_item(item) for item in items]
