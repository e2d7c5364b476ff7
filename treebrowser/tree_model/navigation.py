"""Entry index navigation helpers.

All helpers are pure functions over a flattened listing. Movement that would
leave the listing returns the current index unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..errors import BoundsError
from ..listing.types import Entry


def check_index(entries: Sequence[Entry], idx: int) -> int:
    """Return ``idx`` when it addresses an entry, else raise ``BoundsError``."""
    if isinstance(idx, bool) or not isinstance(idx, int) or not 0 <= idx < len(entries):
        raise BoundsError(f"entry index {idx!r} out of range for {len(entries)} entries")
    return idx


def next_entry_index(entries: Sequence[Entry], selected_idx: int) -> int:
    """Return the index of the entry right below ``selected_idx``."""
    check_index(entries, selected_idx)
    return min(selected_idx + 1, len(entries) - 1)


def previous_entry_index(entries: Sequence[Entry], selected_idx: int) -> int:
    """Return the index of the entry right above ``selected_idx``."""
    check_index(entries, selected_idx)
    return max(selected_idx - 1, 0)


def next_peer_index(entries: Sequence[Entry], selected_idx: int) -> int:
    """Return the next entry at the same or a shallower depth, skipping descendants."""
    depth = entries[check_index(entries, selected_idx)].depth
    for idx in range(selected_idx + 1, len(entries)):
        if entries[idx].depth <= depth:
            return idx
    return selected_idx


def previous_peer_index(entries: Sequence[Entry], selected_idx: int) -> int:
    """Return the previous entry at the same or a shallower depth."""
    depth = entries[check_index(entries, selected_idx)].depth
    for idx in range(selected_idx - 1, -1, -1):
        if entries[idx].depth <= depth:
            return idx
    return selected_idx


def scope_first_index(entries: Sequence[Entry], selected_idx: int) -> int:
    """Return the first index of the contiguous run at depth >= the current depth."""
    depth = entries[check_index(entries, selected_idx)].depth
    idx = selected_idx
    while idx > 0 and entries[idx - 1].depth >= depth:
        idx -= 1
    return idx


def scope_last_index(entries: Sequence[Entry], selected_idx: int) -> int:
    """Return the last index of the contiguous run at depth >= the current depth."""
    depth = entries[check_index(entries, selected_idx)].depth
    idx = selected_idx
    while idx + 1 < len(entries) and entries[idx + 1].depth >= depth:
        idx += 1
    return idx


def subtree_end_index(entries: Sequence[Entry], selected_idx: int) -> int:
    """Return the first index after the materialized subtree of ``selected_idx``.

    This is ``len(entries)`` when the subtree runs to the end of the listing.
    """
    depth = entries[check_index(entries, selected_idx)].depth
    idx = selected_idx + 1
    while idx < len(entries) and entries[idx].depth > depth:
        idx += 1
    return idx


def ancestor_indices(entries: Sequence[Entry], selected_idx: int) -> list[int]:
    """Return indexes of the ancestors of ``selected_idx``, outermost first.

    Scans backwards keeping the nearest entry at each strictly lower depth
    and stops once a depth-0 entry has been taken.
    """
    level = entries[check_index(entries, selected_idx)].depth
    ancestors: list[int] = []
    idx = selected_idx - 1
    while idx >= 0 and level > 0:
        depth = entries[idx].depth
        if depth < level:
            ancestors.append(idx)
            level = depth
        idx -= 1
    ancestors.reverse()
    return ancestors


def parent_index(entries: Sequence[Entry], selected_idx: int) -> int | None:
    """Return the index of the directory containing ``selected_idx``, if any."""
    ancestors = ancestor_indices(entries, selected_idx)
    return ancestors[-1] if ancestors else None


__all__ = [
    "ancestor_indices",
    "check_index",
    "next_entry_index",
    "next_peer_index",
    "parent_index",
    "previous_entry_index",
    "previous_peer_index",
    "scope_first_index",
    "scope_last_index",
    "subtree_end_index",
]
