"""Public package surface for treebrowser.

Exports the tree model and session entry points, plus ``main`` for
programmatic CLI invocation.
"""

from __future__ import annotations

from .errors import BoundsError, ConfigurationError, TreeBrowserError
from .listing import DEFAULT_FILTER, DirectoryFilter, Entry, list_directory
from .policy import DEFAULT_POLICY, BrowserPolicy
from .session import open_browser, reinit_browser
from .tree_model import DirectoryTree


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "BoundsError",
    "BrowserPolicy",
    "ConfigurationError",
    "DEFAULT_FILTER",
    "DEFAULT_POLICY",
    "DirectoryFilter",
    "DirectoryTree",
    "Entry",
    "TreeBrowserError",
    "list_directory",
    "main",
    "open_browser",
    "reinit_browser",
]
