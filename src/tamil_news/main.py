"""Main Tamil News application."""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from .config import Config, load_config
from .core.controller import LoadState, NewsFeedController
from .core.enrich import ArticleEnricher
from .core.feeds import FeedFetcher
from .core.models import EnrichedArticle
from .plugins.actions import OpenInBrowserAction
from .utils.paths import get_config_file_path, get_log_dir


class TamilNewsApp:
    """Main Tamil News application."""

    def __init__(self, config_file: Optional[Path] = None):
        """
        Initialize the Tamil News application.

        Args:
            config_file: Optional path to configuration file
        """
        self.config_file = config_file or get_config_file_path()
        self.config: Config = load_config(self.config_file)

        self._setup_logging()

        self.fetcher = FeedFetcher(self.config.feed)
        self.enricher = ArticleEnricher(self.config.enrichment)
        self.controller = NewsFeedController(self.fetcher, self.enricher)
        self.open_action = OpenInBrowserAction()

        logging.info("Tamil News initialized")

    def _setup_logging(self) -> None:
        """Setup logging configuration."""
        log_file = get_log_dir() / "tamil-news.log"

        log_level = getattr(logging, self.config.log_level.upper(), logging.INFO)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)
        root_logger.handlers = []
        root_logger.addHandler(file_handler)
        root_logger.addHandler(console_handler)

    def load(self, verbose: bool = False) -> LoadState:
        """
        Fetch and enrich the news feed.

        Args:
            verbose: If True, log at DEBUG level

        Returns:
            Resulting load state
        """
        if verbose:
            root_logger = logging.getLogger()
            root_logger.setLevel(logging.DEBUG)
            for handler in root_logger.handlers:
                handler.setLevel(logging.DEBUG)

        logging.info(f"Loading news from {self.config.feed.url}")
        return self.controller.refresh()

    @property
    def articles(self) -> List[EnrichedArticle]:
        return list(self.controller.articles)

    def open_article(self, position: int, dry_run: bool = False) -> bool:
        """
        Open an article in the browser.

        Args:
            position: 1-based position in the article list
            dry_run: If True, only log what would be opened

        Returns:
            True if the article was opened
        """
        try:
            article = self.controller.get(position - 1)
        except IndexError as e:
            logging.error(str(e))
            return False

        return self.open_action.execute(article, dry_run=dry_run)

    def get_info(self) -> Dict:
        """
        Get application information.

        Returns:
            Dictionary with application info
        """
        from . import __version__

        return {
            "version": __version__,
            "config_file": str(self.config_file),
            "log_level": self.config.log_level,
            "feed_url": self.config.feed.url,
            "known_publishers": len(self.config.enrichment.publishers),
            "state": self.controller.state.value,
            "articles": len(self.controller),
            "open_stats": self.open_action.get_stats(),
        }

    def close(self) -> None:
        self.fetcher.close()
