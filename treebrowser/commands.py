"""Browser actions as data, applied to a tree by the host's own dispatcher.

Hosts map their keys (or menu items) to ``BrowserCommand`` values and feed
them to ``apply_command``. The result says where the cursor goes, which rows
changed, and which file, if any, should be opened.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .listing.types import Entry
from .tree_model.navigation import (
    check_index,
    next_entry_index,
    next_peer_index,
    previous_entry_index,
    previous_peer_index,
    scope_first_index,
    scope_last_index,
)
from .tree_model.tree import DirectoryTree, TreeEdit


class BrowserCommand(Enum):
    ACTIVATE = "activate"
    NEXT = "next"
    PREVIOUS = "previous"
    NEXT_PEER = "next_peer"
    PREVIOUS_PEER = "previous_peer"
    SCOPE_FIRST = "scope_first"
    SCOPE_LAST = "scope_last"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one command: new cursor index plus optional edit/open."""

    index: int
    edit: TreeEdit | None = None
    open_path: Path | None = None

    @property
    def changed(self) -> bool:
        return self.edit is not None and self.edit.changed


_MOVES: dict[BrowserCommand, Callable[[Sequence[Entry], int], int]] = {
    BrowserCommand.NEXT: next_entry_index,
    BrowserCommand.PREVIOUS: previous_entry_index,
    BrowserCommand.NEXT_PEER: next_peer_index,
    BrowserCommand.PREVIOUS_PEER: previous_peer_index,
    BrowserCommand.SCOPE_FIRST: scope_first_index,
    BrowserCommand.SCOPE_LAST: scope_last_index,
}


def apply_command(tree: DirectoryTree, index: int, command: BrowserCommand) -> CommandResult:
    """Run ``command`` with the cursor on entry ``index``.

    ``ACTIVATE`` toggles a directory in place or reports a file to open;
    every other command only moves the cursor.
    """
    check_index(tree.entries, index)
    if command is BrowserCommand.ACTIVATE:
        if tree[index].is_dir:
            return CommandResult(index=index, edit=tree.toggle(index))
        return CommandResult(index=index, open_path=tree.resolve_path(index))
    move = _MOVES.get(command)
    if move is None:
        raise ValueError(f"unsupported command: {command!r}")
    return CommandResult(index=move(tree.entries, index))


__all__ = [
    "BrowserCommand",
    "CommandResult",
    "apply_command",
]
