"""Default filesystem walker used to enumerate directory contents."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path

from .filters import DEFAULT_FILTER, DirectoryFilter

logger = logging.getLogger(__name__)

SEPARATOR_CHARS = "/\\"

Walker = Callable[[str, DirectoryFilter, int], Iterator[str]]


def path_separator(path: str | None = None) -> str:
    """Return the separator convention for ``path`` (platform default otherwise)."""
    if path:
        if "\\" in path and "/" not in path:
            return "\\"
        if "/" in path:
            return "/"
    return os.sep


def has_trailing_separator(path: str) -> bool:
    return bool(path) and path[-1] in SEPARATOR_CHARS


def strip_trailing_separator(path: str) -> str:
    """Drop trailing separators, keeping a bare filesystem root intact."""
    stripped = path.rstrip(SEPARATOR_CHARS)
    return stripped if stripped else path[:1]


def walk_directory(
    root: str | Path,
    dir_filter: DirectoryFilter | None = None,
    max_depth: int = 0,
    include_dirs: bool = True,
) -> Iterator[str]:
    """Yield paths below ``root``, directories suffixed with the separator.

    ``max_depth`` bounds how many directory levels below ``root`` are
    descended into: ``0`` yields only the immediate children, a negative
    value walks the whole tree. Excluded directories are neither yielded
    nor descended into. Unreadable directories yield nothing.
    """
    active_filter = dir_filter if dir_filter is not None else DEFAULT_FILTER
    base = strip_trailing_separator(str(root))
    sep = path_separator(base)
    yield from _walk(base, sep, active_filter, max_depth, include_dirs, 0)


def _walk(
    directory: str,
    sep: str,
    dir_filter: DirectoryFilter,
    max_depth: int,
    include_dirs: bool,
    level: int,
) -> Iterator[str]:
    prefix = directory if has_trailing_separator(directory) else directory + sep
    try:
        with os.scandir(directory) as entries:
            children = [(entry.name, _is_dir(entry), entry.is_symlink()) for entry in entries]
    except OSError as exc:
        logger.warning("cannot list %s: %s", directory, exc)
        return

    for name, is_dir, is_link in children:
        path = prefix + name
        if is_dir:
            if dir_filter.excludes_dir(path):
                continue
            if include_dirs:
                yield path + sep
            if not is_link and (max_depth < 0 or level < max_depth):
                yield from _walk(path, sep, dir_filter, max_depth, include_dirs, level + 1)
        elif not dir_filter.excludes_file(path):
            yield path


def _is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


__all__ = [
    "SEPARATOR_CHARS",
    "Walker",
    "has_trailing_separator",
    "path_separator",
    "strip_trailing_separator",
    "walk_directory",
]
