"""Actions for handling Tamil News articles."""

import logging
import webbrowser
from typing import Dict

from ..core.models import EnrichedArticle


class OpenInBrowserAction:
    """Action to open an article in the platform's default browser."""

    def __init__(self) -> None:
        self.opened = 0
        self.failed = 0

    def execute(self, article: EnrichedArticle, dry_run: bool = False) -> bool:
        """Open the article link in the browser."""
        if not article.link:
            logging.warning(f"No link found for article: {article.title}")
            self.failed += 1
            return False

        if dry_run:
            logging.info(f"[DRY RUN] Would open in browser: {article.link}")
            return True

        try:
            opened = webbrowser.open(article.link)
        except webbrowser.Error as e:
            logging.error(f"Error opening browser for {article.title}: {e}")
            self.failed += 1
            return False

        if not opened:
            logging.error(f"No browser available to open: {article.link}")
            self.failed += 1
            return False

        logging.info(f"Opened in browser: {article.title}")
        self.opened += 1
        return True

    def get_stats(self) -> Dict:
        """Get action statistics."""
        return {
            "opened": self.opened,
            "failed": self.failed,
        }
