"""Exceptions raised by Tamil News."""


class TamilNewsError(Exception):
    """Base class for Tamil News errors."""


class FeedFetchError(TamilNewsError):
    """Raised when the news feed cannot be fetched or parsed."""


class ConfigError(TamilNewsError):
    """Raised when the configuration file cannot be loaded."""
