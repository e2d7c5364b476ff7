"""Directory listing primitives.

This package contains the non-tree parts of the browser:
- the ``Entry`` row datatype
- exclusion filters and the per-directory filter lookup
- the default ``os.scandir`` walker
- sorting, folders-first grouping and dot-entry hiding
"""

from __future__ import annotations

from .build import entry_name, is_hidden, list_directory, order_paths
from .filters import (
    DEFAULT_FILTER,
    EMPTY_FILTER,
    DirectoryFilter,
    FilterPattern,
    compile_pattern,
    directory_key,
    filter_for_directory,
    filter_from_config,
)
from .types import Entry
from .walk import Walker, path_separator, walk_directory

__all__ = [
    "DEFAULT_FILTER",
    "EMPTY_FILTER",
    "DirectoryFilter",
    "Entry",
    "FilterPattern",
    "Walker",
    "compile_pattern",
    "directory_key",
    "entry_name",
    "filter_for_directory",
    "filter_from_config",
    "is_hidden",
    "list_directory",
    "order_paths",
    "path_separator",
    "walk_directory",
]
