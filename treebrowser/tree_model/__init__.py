"""Tree-model state, navigation, and row formatting.

Defines ``DirectoryTree`` over a flattened ``Entry`` listing, pure index
navigation helpers, and the indented text projection hosts render.
"""

from __future__ import annotations

from ..listing.types import Entry
from .navigation import (
    ancestor_indices,
    check_index,
    next_entry_index,
    next_peer_index,
    parent_index,
    previous_entry_index,
    previous_peer_index,
    scope_first_index,
    scope_last_index,
    subtree_end_index,
)
from .rendering import format_entry, index_for_line, line_for_index, render_lines
from .tree import DirectoryTree, TreeEdit, is_flattened_forest

__all__ = [
    "DirectoryTree",
    "Entry",
    "TreeEdit",
    "ancestor_indices",
    "check_index",
    "format_entry",
    "index_for_line",
    "is_flattened_forest",
    "line_for_index",
    "next_entry_index",
    "next_peer_index",
    "parent_index",
    "previous_entry_index",
    "previous_peer_index",
    "render_lines",
    "scope_first_index",
    "scope_last_index",
    "subtree_end_index",
]
