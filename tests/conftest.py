"""Shared fixtures for Tamil News tests."""

import pytest

from tamil_news.config import EnrichmentConfig, PublisherConfig
from tamil_news.core.enrich import ArticleEnricher
from tamil_news.core.models import FeedLink, RawFeedItem


SAMPLE_RSS = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:content="http://purl.org/rss/1.0/modules/content/">
  <channel>
    <title>முக்கியச் செய்திகள் - Google செய்திகள்</title>
    <link>https://news.google.com/?hl=ta&amp;gl=IN&amp;ceid=IN:ta</link>
    <language>ta</language>
    <description>Google செய்திகள்</description>
    <item>
      <title>நக்கீரன் விசேட தகவல் - நக்கீரன்</title>
      <link>https://news.google.com/rss/articles/one</link>
      <guid isPermaLink="false">one</guid>
      <pubDate>Mon, 01 Jan 2024 08:00:00 GMT</pubDate>
      <description>&lt;a href="https://news.google.com/rss/articles/one"&gt;நக்கீரன் விசேட தகவல்&lt;/a&gt;</description>
      <content:encoded><![CDATA[<p>Lead</p><img src="https://img.example.com/1.jpg" alt="">]]></content:encoded>
      <source url="https://nakkheeran.in">நக்கீரன்</source>
    </item>
    <item>
      <title>மழை எச்சரிக்கை - Dinamalar</title>
      <link>https://news.google.com/rss/articles/two</link>
      <guid isPermaLink="false">two</guid>
      <pubDate>Tue, 02 Jan 2024 09:30:00 GMT</pubDate>
      <description>மழை எச்சரிக்கை</description>
      <source url="https://www.dinamalar.com">Dinamalar</source>
    </item>
  </channel>
</rss>
""".encode("utf-8")


@pytest.fixture
def enricher():
    """Enricher with the built-in publisher table."""
    return ArticleEnricher()


@pytest.fixture
def small_enrichment_config():
    """A two-publisher table for substitution tests."""
    return EnrichmentConfig(
        publishers=(
            PublisherConfig(name="Alpha", logo_url="https://logos.test/alpha.png"),
            PublisherConfig(name="Beta", logo_url="https://logos.test/beta.png"),
        ),
        unknown_logo_url="https://logos.test/unknown.png",
        placeholder_image_url="https://img.test/placeholder.png",
    )


@pytest.fixture
def raw_item():
    return RawFeedItem(
        title="நக்கீரன் விசேட தகவல்",
        links=(FeedLink(url="http://x/1"),),
        published="2024-01-01T00:00:00Z",
        description="<b>desc</b>",
        content='<img src="http://img/1.jpg">',
    )


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point the data directory and working directory at a temp dir."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sample_rss():
    """A Google News style RSS document."""
    return SAMPLE_RSS
