"""Browser session entry points and the title used to restore them.

``open_browser`` is the interactive entry point. ``reinit_browser`` rebuilds
a browser after the host restores a saved session: it lists the root
without touching the process working directory.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path

from .listing.filters import DirectoryFilter, filter_for_directory
from .listing.walk import Walker, walk_directory
from .policy import DEFAULT_POLICY, BrowserPolicy
from .tree_model.tree import DirectoryTree

logger = logging.getLogger(__name__)

SESSION_TITLE_PREFIX = "[File Browser - "
SESSION_TITLE_SUFFIX = "]"
_SESSION_TITLE_RE = re.compile(r"^\[File Browser - (.+)\]$")


def open_browser(
    root: str | Path,
    policy: BrowserPolicy = DEFAULT_POLICY,
    dir_filter: DirectoryFilter | None = None,
    dir_filters: Mapping[str, DirectoryFilter] | None = None,
    change_directory: bool = True,
    walker: Walker = walk_directory,
) -> DirectoryTree:
    """Open a browser on ``root`` and, by default, make it the working directory.

    The working-directory change lets hosts resolve project-relative paths
    from the browsed root. When it happens the root is made absolute first,
    so entry paths stay valid from the new working directory.
    """
    if dir_filter is None:
        dir_filter = filter_for_directory(root, dir_filters)
    if change_directory:
        root = os.path.abspath(root)
    tree = DirectoryTree.open(root, policy=policy, dir_filter=dir_filter, walker=walker)
    if change_directory:
        try:
            os.chdir(tree.root)
        except OSError as exc:
            logger.warning("could not change directory to %s: %s", tree.root, exc)
    logger.info("opened browser on %s (%d entries)", tree.root, len(tree))
    return tree


def reinit_browser(
    root: str | Path,
    policy: BrowserPolicy = DEFAULT_POLICY,
    dir_filters: Mapping[str, DirectoryFilter] | None = None,
    walker: Walker = walk_directory,
) -> DirectoryTree:
    """Rebuild a browser for a restored session without side effects."""
    return DirectoryTree.open(root, policy=policy, dir_filters=dir_filters, walker=walker)


def session_title(tree: DirectoryTree) -> str:
    """Return the buffer title identifying ``tree``'s root.

    The title always carries the full root, independent of
    ``strip_leading_path``, so ``root_from_session_title`` can recover it.
    """
    root = tree.root if tree.root.endswith(("/", "\\")) else tree.root + tree.separator
    return f"{SESSION_TITLE_PREFIX}{root}{SESSION_TITLE_SUFFIX}"


def root_from_session_title(title: str | None) -> str | None:
    """Return the root encoded in a browser title, or ``None`` for other titles."""
    if not title:
        return None
    match = _SESSION_TITLE_RE.match(title)
    if match is None:
        return None
    root = match.group(1)
    stripped = root.rstrip("/\\")
    return stripped if stripped else root


def is_browser_title(title: str | None) -> bool:
    return root_from_session_title(title) is not None


__all__ = [
    "is_browser_title",
    "open_browser",
    "reinit_browser",
    "root_from_session_title",
    "session_title",
]
