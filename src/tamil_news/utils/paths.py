"""Path utilities for Tamil News."""

from pathlib import Path


CONFIG_FILE_NAME = "config.yaml"


def get_project_dir() -> Path:
    """
    Get the per-user data directory, creating it if needed.

    Returns:
        Path to ~/.tamil-news
    """
    data_dir = Path.home() / ".tamil-news"
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_config_file_path() -> Path:
    """Get the path to the configuration file."""
    # A config.yaml in the working directory takes precedence
    local_path = Path.cwd() / CONFIG_FILE_NAME
    if local_path.exists():
        return local_path

    return get_project_dir() / CONFIG_FILE_NAME


def get_log_dir() -> Path:
    """Get the log directory path."""
    log_dir = get_project_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir
