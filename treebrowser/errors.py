"""Exception types raised by the browser model."""

from __future__ import annotations


class TreeBrowserError(Exception):
    """Base class for all treebrowser errors."""


class ConfigurationError(TreeBrowserError, ValueError):
    """Raised when a filter or persisted option cannot be parsed."""


class BoundsError(TreeBrowserError, IndexError):
    """Raised when an entry index falls outside the materialized listing."""


__all__ = [
    "TreeBrowserError",
    "ConfigurationError",
    "BoundsError",
]
