"""Expandable directory tree stored as a flattened, depth-annotated listing.

No entry stores its own path or parent pointer. Structure is recovered by
scanning depths: an entry at depth ``d`` belongs to the nearest preceding
entry at depth ``d - 1``.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from ..listing.build import list_directory
from ..listing.filters import DEFAULT_FILTER, DirectoryFilter, filter_for_directory
from ..listing.types import Entry
from ..listing.walk import Walker, path_separator, strip_trailing_separator, walk_directory
from ..policy import DEFAULT_POLICY, BrowserPolicy
from .navigation import ancestor_indices, check_index, subtree_end_index

logger = logging.getLogger(__name__)

_LAST_COMPONENT_RE = re.compile(r"[^/\\]+[/\\]?$")


def is_flattened_forest(entries: Sequence[Entry]) -> bool:
    """Return whether every depth is at most one deeper than the previous entry."""
    previous_depth = -1
    for entry in entries:
        if entry.depth < 0 or entry.depth > previous_depth + 1:
            return False
        previous_depth = entry.depth
    return True


@dataclass(frozen=True)
class TreeEdit:
    """Rows inserted or removed right after ``index`` by one tree operation."""

    index: int
    inserted: tuple[Entry, ...] = ()
    removed: int = 0

    @property
    def changed(self) -> bool:
        return bool(self.inserted) or self.removed > 0


class DirectoryTree:
    """Materialized listing of one browsed root directory."""

    def __init__(
        self,
        root: str | Path,
        policy: BrowserPolicy = DEFAULT_POLICY,
        dir_filter: DirectoryFilter | None = None,
        walker: Walker = walk_directory,
        entries: Sequence[Entry] = (),
    ) -> None:
        self.root = strip_trailing_separator(os.fspath(root))
        self.policy = policy
        self.dir_filter = dir_filter if dir_filter is not None else DEFAULT_FILTER
        self.walker = walker
        self.entries: list[Entry] = list(entries)

    @classmethod
    def open(
        cls,
        root: str | Path,
        policy: BrowserPolicy = DEFAULT_POLICY,
        dir_filter: DirectoryFilter | None = None,
        dir_filters: Mapping[str, DirectoryFilter] | None = None,
        walker: Walker = walk_directory,
    ) -> DirectoryTree:
        """List ``root`` at depth 0 and return the new tree.

        Without an explicit ``dir_filter`` the filter registered for ``root``
        in ``dir_filters`` is used, falling back to the default filter.
        """
        if dir_filter is None:
            dir_filter = filter_for_directory(root, dir_filters)
        tree = cls(root, policy=policy, dir_filter=dir_filter, walker=walker)
        tree.reload()
        return tree

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __getitem__(self, idx: int) -> Entry:
        return self.entries[check_index(self.entries, idx)]

    @property
    def separator(self) -> str:
        return path_separator(self.root)

    @property
    def root_label(self) -> str:
        """Return the root as shown above the listing, ending with a separator."""
        label = self.root
        if self.policy.strip_leading_path:
            match = _LAST_COMPONENT_RE.search(self.root)
            if match is not None:
                label = match.group(0)
        if label.endswith(("/", "\\")):
            return label
        return label + self.separator

    def reload(self) -> list[Entry]:
        """Replace every entry with a fresh depth-0 listing of the root."""
        self.entries = list_directory(self.root, self.dir_filter, self.policy, depth=0, walker=self.walker)
        return list(self.entries)

    def resolve_path(self, idx: int) -> Path:
        """Return the filesystem path of the entry at ``idx``.

        Joins the names of the entry's ancestors, found by a backward depth
        scan, below the tree root.
        """
        names = [self.entries[ancestor].bare_name for ancestor in ancestor_indices(self.entries, idx)]
        names.append(self.entries[idx].bare_name)
        return Path(self.root).joinpath(*names)

    def is_expanded(self, idx: int) -> bool:
        entry = self[idx]
        return entry.is_dir and entry.expanded

    def expand(self, idx: int) -> list[Entry]:
        """List the directory at ``idx`` and splice its children right after it.

        Files and already expanded directories are left alone and yield an
        empty list.
        """
        entry = self[idx]
        if not entry.is_dir or entry.expanded:
            return []
        children = list_directory(
            self.resolve_path(idx),
            self.dir_filter,
            self.policy,
            depth=entry.depth + 1,
            walker=self.walker,
        )
        self.entries[idx] = entry.with_expanded(True)
        self.entries[idx + 1:idx + 1] = children
        logger.debug("expanded %s (+%d)", entry.name, len(children))
        return children

    def collapse(self, idx: int) -> int:
        """Remove the whole materialized subtree below ``idx``.

        Nested expanded directories go with it. Returns the number of removed
        entries; collapsing a file or a collapsed directory removes nothing.
        """
        entry = self[idx]
        if not entry.is_dir:
            return 0
        end = subtree_end_index(self.entries, idx)
        removed = end - idx - 1
        del self.entries[idx + 1:end]
        if entry.expanded:
            self.entries[idx] = entry.with_expanded(False)
        if removed:
            logger.debug("collapsed %s (-%d)", entry.name, removed)
        return removed

    def toggle(self, idx: int) -> TreeEdit:
        """Expand a collapsed directory or collapse an expanded one."""
        if self.is_expanded(idx):
            return TreeEdit(index=idx, removed=self.collapse(idx))
        return TreeEdit(index=idx, inserted=tuple(self.expand(idx)))

    def expanded_paths(self) -> list[Path]:
        """Return paths of every expanded directory in listing order."""
        return [path for path, entry in zip(self.paths(), self.entries) if entry.is_dir and entry.expanded]

    def paths(self) -> list[Path]:
        """Return the filesystem path of every entry in one forward pass.

        The most recent path seen at each depth is the parent of the next
        entry one level deeper.
        """
        root = Path(self.root)
        by_depth: list[Path] = []
        result: list[Path] = []
        for entry in self.entries:
            del by_depth[entry.depth:]
            path = (by_depth[-1] if by_depth else root) / entry.bare_name
            by_depth.append(path)
            result.append(path)
        return result

    def find(self, path: str | Path) -> int | None:
        """Return the index of the visible entry at ``path``, if materialized."""
        target = Path(path)
        for idx, candidate in enumerate(self.paths()):
            if candidate == target:
                return idx
        return None

    def reveal(self, path: str | Path) -> int | None:
        """Expand every directory leading to ``path`` and return its index.

        ``path`` may be absolute (under the root) or relative to the root.
        Returns ``None`` when some component is not part of the listing.
        """
        target = Path(path)
        if target.is_absolute():
            try:
                target = target.relative_to(self.root)
            except ValueError:
                return None
        parts = target.parts
        if not parts:
            return None

        start, end = 0, len(self.entries)
        found: int | None = None
        for depth, part in enumerate(parts):
            found = None
            for idx in range(start, end):
                entry = self.entries[idx]
                if entry.depth == depth and entry.bare_name == part:
                    found = idx
                    break
            if found is None:
                return None
            if depth < len(parts) - 1:
                if not self.entries[found].is_dir:
                    return None
                self.expand(found)
                start = found + 1
                end = subtree_end_index(self.entries, found)
        return found

    def refresh(self) -> list[Path]:
        """Re-list the root and re-expand directories that were open before.

        Walks the fresh listing once, expanding each remembered directory as
        it is reached so its children are visited by the same pass. Returns
        the previously expanded paths that no longer appear.
        """
        previously_expanded = self.expanded_paths()
        wanted = set(previously_expanded)
        self.reload()

        root = Path(self.root)
        by_depth: list[Path] = []
        reopened: set[Path] = set()
        idx = 0
        while idx < len(self.entries):
            entry = self.entries[idx]
            del by_depth[entry.depth:]
            path = (by_depth[-1] if by_depth else root) / entry.bare_name
            by_depth.append(path)
            if entry.is_dir and path in wanted:
                self.expand(idx)
                reopened.add(path)
            idx += 1

        missing = [path for path in previously_expanded if path not in reopened]
        if missing:
            logger.debug("refresh dropped %d expanded directories", len(missing))
        return missing


__all__ = [
    "DirectoryTree",
    "TreeEdit",
    "is_flattened_forest",
]
