"""Directory listing: walk, sort, partition and hide.

Ordering rules:
- every raw path is sorted as one set before any grouping
- folders-first grouping keeps that global order inside each group
- dot-entry hiding runs after sorting/grouping, per entry kind
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from ..policy import DEFAULT_POLICY, BrowserPolicy
from .filters import DEFAULT_FILTER, DirectoryFilter
from .types import Entry
from .walk import Walker, has_trailing_separator, strip_trailing_separator, walk_directory

logger = logging.getLogger(__name__)

_ENTRY_NAME_RE = re.compile(r"[^/\\]*[/\\]?$")
_DOT_SEGMENT_RE = re.compile(r"[/\\]\.")


def entry_name(raw_path: str) -> str:
    """Return the last path component, keeping a directory's trailing separator."""
    match = _ENTRY_NAME_RE.search(raw_path)
    return match.group(0) if match else raw_path


def relative_part(raw_path: str, directory: str) -> str:
    """Return ``raw_path`` below ``directory``, always starting with a separator."""
    if raw_path.startswith(directory):
        tail = raw_path[len(directory):]
    else:
        tail = entry_name(raw_path)
    if tail and tail[0] in "/\\":
        return tail
    return "/" + tail


def is_hidden(raw_path: str, directory: str, policy: BrowserPolicy) -> bool:
    """Return whether ``raw_path`` is hidden by the dot-file/dot-folder flags."""
    if has_trailing_separator(raw_path):
        if not policy.hide_dot_folders:
            return False
    elif not policy.hide_dot_files:
        return False
    return _DOT_SEGMENT_RE.search(relative_part(raw_path, directory)) is not None


def order_paths(raw_paths: list[str], directory: str, policy: BrowserPolicy) -> list[str]:
    """Sort, optionally group folders first, and drop hidden paths."""
    listing = sorted(raw_paths, key=policy.sort_key)

    if policy.force_folders_first:
        folders = [path for path in listing if has_trailing_separator(path)]
        files = [path for path in listing if not has_trailing_separator(path)]
        return [path for path in folders + files if not is_hidden(path, directory, policy)]

    return [path for path in listing if not is_hidden(path, directory, policy)]


def list_directory(
    path: str | Path,
    dir_filter: DirectoryFilter | None = None,
    policy: BrowserPolicy = DEFAULT_POLICY,
    depth: int = 0,
    walker: Walker = walk_directory,
) -> list[Entry]:
    """List the immediate children of ``path`` as entries at ``depth``.

    A missing, unreadable or empty directory yields an empty list; the
    walker decides how such failures surface and this function never raises
    for them.
    """
    if depth < 0:
        raise ValueError("depth must be >= 0")
    directory = strip_trailing_separator(str(path))
    active_filter = dir_filter if dir_filter is not None else DEFAULT_FILTER
    raw_paths = list(walker(directory, active_filter, 0))
    ordered = order_paths(raw_paths, directory, policy)

    entries = [
        Entry(name=entry_name(raw_path), is_dir=has_trailing_separator(raw_path), depth=depth)
        for raw_path in ordered
    ]
    logger.debug(
        "listed %s: %d entries (%d walked, %d hidden)",
        directory,
        len(entries),
        len(raw_paths),
        len(raw_paths) - len(entries),
    )
    return entries


__all__ = [
    "entry_name",
    "is_hidden",
    "list_directory",
    "order_paths",
    "relative_part",
]
