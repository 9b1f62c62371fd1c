"""Feed item and article models."""

from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class FeedLink(BaseModel):
    """A URL-bearing link record of a feed item."""

    model_config = ConfigDict(frozen=True)

    url: str


class RawFeedItem(BaseModel):
    """One item of the parsed feed, before enrichment."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    links: Tuple[FeedLink, ...] = ()
    published: str = ""
    description: str = ""
    content: Optional[str] = None
    publisher: Optional[str] = None

    @classmethod
    def from_entry(cls, entry: Mapping[str, Any]) -> "RawFeedItem":
        """
        Build a raw item from a feedparser entry.

        Args:
            entry: Entry from feedparser (FeedParserDict or plain dict)

        Returns:
            RawFeedItem with the fields the enrichment pipeline reads
        """
        links = [
            FeedLink(url=link["href"])
            for link in entry.get('links') or []
            if link.get('href')
        ]
        if not links and entry.get('link'):
            links = [FeedLink(url=entry['link'])]

        content = None
        content_list = entry.get('content') or []
        if content_list:
            content = content_list[0].get('value')

        return cls(
            title=entry.get('title') or "",
            links=tuple(links),
            published=entry.get('published') or entry.get('updated') or "",
            description=entry.get('description') or entry.get('summary') or "",
            content=content,
            publisher=entry.get('publisher') or None,
        )


class EnrichedArticle(BaseModel):
    """A display-ready article. Immutable; a refresh builds new ones."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    link: str
    pub_date: str = Field(alias="pubDate")
    description: str
    image_url: str = Field(alias="imageUrl")
    publisher: str
    publisher_image: str = Field(alias="publisherImage")

    def to_dict(self) -> Dict[str, str]:
        """Serialize using the camelCase field names."""
        return self.model_dump(by_alias=True)
