"""Sort/display policy shared by every listing operation."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError

DEFAULT_INDENT_WIDTH = 2


@dataclass(frozen=True)
class BrowserPolicy:
    """Options set once and applied uniformly to every listing.

    ``strip_leading_path`` only changes the root label shown to users;
    traversal and path resolution always use the full root.
    """

    case_insensitive_sort: bool = False
    force_folders_first: bool = False
    hide_dot_folders: bool = False
    hide_dot_files: bool = False
    strip_leading_path: bool = False
    indent_width: int = DEFAULT_INDENT_WIDTH

    def __post_init__(self) -> None:
        if isinstance(self.indent_width, bool) or not isinstance(self.indent_width, int) or self.indent_width < 1:
            raise ConfigurationError(f"indent_width must be a positive integer, got {self.indent_width!r}")

    def sort_key(self, path: str) -> str:
        return path.lower() if self.case_insensitive_sort else path


DEFAULT_POLICY = BrowserPolicy()

BOOL_POLICY_KEYS = (
    "case_insensitive_sort",
    "force_folders_first",
    "hide_dot_folders",
    "hide_dot_files",
    "strip_leading_path",
)


__all__ = [
    "BOOL_POLICY_KEYS",
    "DEFAULT_INDENT_WIDTH",
    "DEFAULT_POLICY",
    "BrowserPolicy",
]
