"""Tests for feed fetching and raw item conversion."""

from unittest.mock import Mock, patch

import pytest
import requests

from tamil_news.config import FeedConfig
from tamil_news.core.feeds import FeedFetcher
from tamil_news.core.models import FeedLink, RawFeedItem
from tamil_news.exceptions import FeedFetchError


def _fetcher_with_response(content, status_error=None, config=None):
    fetcher = FeedFetcher(config or FeedConfig(url="https://feeds.test/rss"))
    response = Mock()
    response.content = content
    if status_error:
        response.raise_for_status.side_effect = status_error
    fetcher.session = Mock()
    fetcher.session.get.return_value = response
    return fetcher


class TestRawFeedItemFromEntry:
    def test_maps_feedparser_fields(self):
        entry = {
            "title": "Title",
            "links": [{"rel": "alternate", "href": "http://x/1"}, {"rel": "enclosure", "href": "http://x/1.mp3"}],
            "published": "Mon, 01 Jan 2024 08:00:00 GMT",
            "summary": "Summary",
            "content": [{"type": "text/html", "value": "<img src='a.jpg'>"}],
        }

        item = RawFeedItem.from_entry(entry)

        assert item.title == "Title"
        assert item.links == (FeedLink(url="http://x/1"), FeedLink(url="http://x/1.mp3"))
        assert item.published == "Mon, 01 Jan 2024 08:00:00 GMT"
        assert item.description == "Summary"
        assert item.content == "<img src='a.jpg'>"
        assert item.publisher is None

    def test_falls_back_to_scalar_link(self):
        item = RawFeedItem.from_entry({"title": "t", "link": "http://x/2"})
        assert item.links == (FeedLink(url="http://x/2"),)

    def test_missing_fields_use_defaults(self):
        item = RawFeedItem.from_entry({})
        assert item.title == ""
        assert item.links == ()
        assert item.published == ""
        assert item.content is None

    def test_explicit_publisher(self):
        item = RawFeedItem.from_entry({"title": "t", "publisher": "BBC"})
        assert item.publisher == "BBC"


class TestFeedFetcher:
    def test_parses_real_feed(self, sample_rss):
        fetcher = _fetcher_with_response(sample_rss)

        items = fetcher.fetch()

        assert [i.title for i in items] == [
            "நக்கீரன் விசேட தகவல் - நக்கீரன்",
            "மழை எச்சரிக்கை - Dinamalar",
        ]
        assert items[0].links[0].url == "https://news.google.com/rss/articles/one"
        assert items[0].published == "Mon, 01 Jan 2024 08:00:00 GMT"
        assert "https://img.example.com/1.jpg" in items[0].content
        assert items[1].content is None
        assert items[1].publisher is None
        fetcher.session.get.assert_called_once_with("https://feeds.test/rss", timeout=30)

    def test_http_error_becomes_fetch_error(self, sample_rss):
        fetcher = _fetcher_with_response(sample_rss, status_error=requests.HTTPError("503 Server Error"))

        with pytest.raises(FeedFetchError, match="503"):
            fetcher.fetch()

    def test_network_error_becomes_fetch_error(self, sample_rss):
        fetcher = _fetcher_with_response(sample_rss)
        fetcher.session.get.side_effect = requests.ConnectionError("no route to host")

        with pytest.raises(FeedFetchError):
            fetcher.fetch()

    @patch("tamil_news.core.feeds.feedparser")
    def test_malformed_feed_without_entries_fails(self, mock_feedparser):
        fetcher = _fetcher_with_response(b"<html>not a feed")
        parsed = Mock(bozo=1, entries=[])
        parsed.get.return_value = "syntax error"
        mock_feedparser.parse.return_value = parsed

        with pytest.raises(FeedFetchError, match="Invalid RSS/Atom feed"):
            fetcher.fetch()

    @patch("tamil_news.core.feeds.feedparser")
    def test_bozo_feed_with_entries_is_used(self, mock_feedparser, sample_rss):
        fetcher = _fetcher_with_response(sample_rss)
        parsed = Mock(bozo=1, entries=[{"title": "ok", "link": "http://x/1"}])
        parsed.get.return_value = "undefined entity"
        mock_feedparser.parse.return_value = parsed

        items = fetcher.fetch()

        assert [i.title for i in items] == ["ok"]

    def test_no_retries_by_default(self):
        fetcher = FeedFetcher(FeedConfig())
        adapter = fetcher.session.get_adapter("https://news.google.com/rss")
        assert adapter.max_retries.total == 0

    def test_configured_retries_and_user_agent(self):
        fetcher = FeedFetcher(FeedConfig(retry_attempts=2, user_agent="test-agent"))
        adapter = fetcher.session.get_adapter("https://news.google.com/rss")
        assert adapter.max_retries.total == 2
        assert fetcher.session.headers["User-Agent"] == "test-agent"
