"""Entry datatype produced by listings and held by the tree model."""

from __future__ import annotations

from dataclasses import dataclass, replace

@dataclass(frozen=True)
class Entry:
    """One file or directory row in the flattened listing.

    ``name`` keeps the trailing separator for directories so that joining
    the names along an ancestor chain yields a usable path.
    """

    name: str
    is_dir: bool
    depth: int
    expanded: bool = False

    @property
    def bare_name(self) -> str:
        """Return ``name`` without a directory's trailing separator."""
        if not self.is_dir:
            return self.name
        return self.name.rstrip("/\\") or self.name

    def with_expanded(self, expanded: bool) -> Entry:
        return replace(self, expanded=expanded)


__all__ = ["Entry"]
