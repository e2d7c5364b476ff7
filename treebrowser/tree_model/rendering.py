"""Plain-text projection of a tree: one indented line per entry."""

from __future__ import annotations

from ..listing.types import Entry
from .tree import DirectoryTree

EXPANDED_MARKER = "▾ "
COLLAPSED_MARKER = "▸ "
FILE_MARKER = "  "


def format_entry(entry: Entry, indent_width: int, markers: bool = False) -> str:
    """Render one entry indented one step deeper than its depth.

    The root label occupies indentation level zero, so depth-0 entries start
    one ``indent_width`` step in.
    """
    indent = " " * (indent_width * (entry.depth + 1))
    if not markers:
        return f"{indent}{entry.name}"
    if entry.is_dir:
        marker = EXPANDED_MARKER if entry.expanded else COLLAPSED_MARKER
    else:
        marker = FILE_MARKER
    return f"{indent}{marker}{entry.name}"


def render_lines(tree: DirectoryTree, markers: bool = False) -> list[str]:
    """Return the root label followed by every materialized entry."""
    indent_width = tree.policy.indent_width
    lines = [tree.root_label]
    lines.extend(format_entry(entry, indent_width, markers=markers) for entry in tree.entries)
    return lines


def line_for_index(idx: int) -> int:
    """Map an entry index to its zero-based line in ``render_lines`` output."""
    return idx + 1


def index_for_line(line: int) -> int | None:
    """Map a rendered line back to an entry index (``None`` for the root label)."""
    return line - 1 if line >= 1 else None


__all__ = [
    "format_entry",
    "index_for_line",
    "line_for_index",
    "render_lines",
]
