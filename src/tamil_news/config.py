"""Configuration management for Tamil News."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator, validator

from .exceptions import ConfigError
from .utils.paths import get_config_file_path


DEFAULT_FEED_URL = "https://news.google.com/rss?hl=ta&gl=IN&ceid=IN:ta"
DEFAULT_PLACEHOLDER_IMAGE = "https://via.placeholder.com/150"
UNKNOWN_PUBLISHER = "Unknown"
DEFAULT_UNKNOWN_LOGO = "https://github.com/user-attachments/assets/1beab735-a8f3-47c4-a493-5be2d0551b52"

_ASSETS = "https://github.com/user-attachments/assets/"

# Priority order matters: the first fragment found in a title wins.
DEFAULT_PUBLISHERS: Tuple[Tuple[str, str], ...] = (
    ("நக்கீரன்", _ASSETS + "40a13f23-d2e1-4f83-a042-4472da15aa2e"),
    ("Hindustan", _ASSETS + "eec59781-fec3-4c59-936a-039538d94718"),
    ("தினமணி", _ASSETS + "4f127c46-8c3d-4d51-a517-0882cb37b2da"),
    ("தினத்", _ASSETS + "28d3b77b-c026-488e-a4ad-8831d048d28c"),
    ("IBC", _ASSETS + "123c2455-eed2-4433-8fb1-402b23c360c5"),
    ("Puthiya", _ASSETS + "a75994e4-79b0-4cfe-8e9a-3c58b363bd4d"),
    ("Maalaimalar", _ASSETS + "5f5f86df-c3f5-441e-b17a-2bbe0d67c0cf"),
    ("Vikatan", _ASSETS + "4595e118-2a8d-473f-ad52-c3a570b8faff"),
    ("Hindu", _ASSETS + "74d701b3-8c39-4a81-852a-894b913160e4"),
    ("Vatican", _ASSETS + "ba72faf4-f692-4146-9a83-eefd1faa7d02"),
    ("Lankasri", _ASSETS + "5debee2c-649d-42c5-b788-a1eb6fed207a"),
    ("Indian", _ASSETS + "a86ef7eb-2a3e-403e-8e3d-7423abd06290"),
    ("Oneindia", _ASSETS + "2b8da88a-7f86-449d-a7ae-07af46f8ea0f"),
    ("Goodreturns", _ASSETS + "beaf5902-2854-454a-a8ab-82668a40dc9b"),
    ("Dinakaran", _ASSETS + "245caa6a-cd97-4ebd-9685-e6f4999c75f5"),
    ("enewz", _ASSETS + "9c22e10f-2c0b-4255-8803-ad8b11606d74"),
    ("News18", _ASSETS + "36cd082c-2782-4f79-895c-a00f2b07f7ad"),
    ("News7", _ASSETS + "27c93e53-f869-4763-97b3-6877eb1af46f"),
    ("BBC", _ASSETS + "54c18ff9-527d-4109-a1e0-37bd5e41d4e3"),
    ("Dinamalar", _ASSETS + "3da84a03-828b-40fb-9eae-46d8c274f284"),
    ("Dinasuvadu", "https://example.com/dinasuvadu-logo.jpg"),
)


class PublisherConfig(BaseModel):
    """A known publisher: the title fragment that identifies it and its logo."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1)
    logo_url: str = Field(min_length=1)


def _default_publishers() -> Tuple[PublisherConfig, ...]:
    return tuple(PublisherConfig(name=name, logo_url=logo) for name, logo in DEFAULT_PUBLISHERS)


class EnrichmentConfig(BaseModel):
    """Static knowledge used to enrich feed items."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    publishers: Tuple[PublisherConfig, ...] = Field(default_factory=_default_publishers)
    unknown_publisher: str = UNKNOWN_PUBLISHER
    unknown_logo_url: str = Field(default=DEFAULT_UNKNOWN_LOGO, min_length=1)
    placeholder_image_url: str = Field(default=DEFAULT_PLACEHOLDER_IMAGE, min_length=1)

    @model_validator(mode="after")
    def _check_publishers(self) -> "EnrichmentConfig":
        names = [p.name for p in self.publishers]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate publisher names: {duplicates}")
        if self.unknown_publisher in names:
            raise ValueError(f"'{self.unknown_publisher}' is reserved for unrecognized publishers")
        return self

    @property
    def publisher_names(self) -> List[str]:
        """Publisher fragments in priority order."""
        return [p.name for p in self.publishers]

    @property
    def publisher_logos(self) -> Dict[str, str]:
        """Logo lookup table, including the unknown publisher."""
        logos = {p.name: p.logo_url for p in self.publishers}
        logos[self.unknown_publisher] = self.unknown_logo_url
        return logos


class FeedConfig(BaseModel):
    """Configuration for the news feed."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    url: str = DEFAULT_FEED_URL
    timeout: float = Field(default=30, gt=0, description="HTTP timeout in seconds")
    retry_attempts: int = Field(default=0, ge=0, description="Retries for transient HTTP errors")
    user_agent: str = "Tamil-News/0.1.0 (RSS headline reader)"


class Config(BaseModel):
    """Main configuration for Tamil News."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _apply_legacy_keys(cls, data: Any) -> Any:
        """Accept a top-level feed_url as shorthand for feed.url."""
        if not isinstance(data, dict):
            return data

        data = data.copy()
        feed_url = data.pop("feed_url", None)
        if feed_url:
            feed = dict(data.get("feed") or {})
            feed.setdefault("url", feed_url)
            data["feed"] = feed

        return data

    feed: FeedConfig = Field(default_factory=FeedConfig)
    enrichment: EnrichmentConfig = Field(default_factory=EnrichmentConfig)
    log_level: str = Field(default="INFO", description="Logging level")

    @validator('log_level')
    def validate_log_level(cls, v):
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of {allowed}")
        return v.upper()


def load_config(config_file: Optional[Path] = None) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_file: Optional path to config file. If None, uses default path.

    Returns:
        Config object

    Raises:
        ConfigError: If the file cannot be read or fails validation
    """
    if config_file is None:
        config_file = get_config_file_path()

    if not config_file.exists():
        config = Config()
        save_config(config, config_file)
        logging.info(f"Created default config at {config_file}")
        return config

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        config = Config(**data)
        logging.debug(f"Loaded config from {config_file}")
        return config

    except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
        logging.error(f"Error loading config from {config_file}: {e}")
        raise ConfigError(f"Invalid config {config_file}: {e}") from e


def dump_config(config: Config) -> str:
    """Render a config as YAML text."""
    return yaml.dump(
        config.model_dump(mode="json"),
        default_flow_style=False,
        indent=2,
        allow_unicode=True,
        sort_keys=False,
    )


def save_config(config: Config, config_file: Optional[Path] = None) -> None:
    """
    Save configuration to YAML file.

    Args:
        config: Config object to save
        config_file: Optional path to config file. If None, uses default path.
    """
    if config_file is None:
        config_file = get_config_file_path()

    config_file.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(config_file, 'w', encoding='utf-8') as f:
            f.write(dump_config(config))

        logging.debug(f"Saved config to {config_file}")

    except (OSError, yaml.YAMLError) as e:
        logging.error(f"Error saving config to {config_file}: {e}")
        raise


def create_example_config() -> str:
    """Create an example configuration YAML string."""
    example_config = Config(
        feed=FeedConfig(url=DEFAULT_FEED_URL, timeout=15, retry_attempts=2),
        enrichment=EnrichmentConfig(
            publishers=(
                PublisherConfig(name="Dinamalar", logo_url=_ASSETS + "3da84a03-828b-40fb-9eae-46d8c274f284"),
                PublisherConfig(name="BBC", logo_url=_ASSETS + "54c18ff9-527d-4109-a1e0-37bd5e41d4e3"),
            ),
        ),
        log_level="INFO",
    )

    return dump_config(example_config)
