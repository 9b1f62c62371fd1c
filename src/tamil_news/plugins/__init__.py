"""Plugin system for Tamil News actions."""

from .actions import OpenInBrowserAction

__all__ = ["OpenInBrowserAction"]
