"""Exclusion filters applied while walking a directory.

A filter carries three independent rule sets:
- ``patterns`` tested against every file path
- ``folders`` tested against every directory path
- ``extensions`` (raw, without the dot) rejecting files outright

Patterns are regular expressions searched anywhere in the candidate path,
which always uses ``/`` separators. A leading ``!`` negates a pattern: the
candidate is excluded unless the remainder matches.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

NEGATION_PREFIX = "!"

DEFAULT_EXCLUDED_EXTENSIONS = (
    "a", "bmp", "bz2", "class", "dll", "exe", "gif", "gz", "jar", "jpeg", "jpg",
    "o", "pdf", "png", "so", "tar", "tgz", "tif", "tiff", "xz", "zip",
)
DEFAULT_EXCLUDED_FOLDERS = (
    r"\.bzr$", r"\.git$", r"\.hg$", r"\.svn$", r"_FOSSIL_$", r"node_modules",
)


def _slashed(path: str) -> str:
    return path.replace("\\", "/")


@dataclass(frozen=True)
class FilterPattern:
    """One compiled exclusion rule."""

    source: str
    regex: re.Pattern[str]
    negated: bool = False

    def excludes(self, path: str) -> bool:
        """Return whether ``path`` is rejected by this rule."""
        found = self.regex.search(path) is not None
        return not found if self.negated else found


def compile_pattern(raw: str) -> FilterPattern:
    """Compile ``raw`` into a rule, honoring the ``!`` negation prefix."""
    if not isinstance(raw, str):
        raise ConfigurationError(f"filter pattern must be a string, got {raw!r}")
    negated = raw.startswith(NEGATION_PREFIX)
    body = raw[len(NEGATION_PREFIX):] if negated else raw
    try:
        regex = re.compile(body)
    except re.error as exc:
        raise ConfigurationError(f"invalid filter pattern {raw!r}: {exc}") from exc
    return FilterPattern(source=raw, regex=regex, negated=negated)


def _normalize_extension(raw: str) -> str:
    if not isinstance(raw, str) or not raw.strip(". "):
        raise ConfigurationError(f"invalid filter extension {raw!r}")
    return raw.strip().lstrip(".")


@dataclass(frozen=True)
class DirectoryFilter:
    """File/folder/extension exclusion rules for one browsed root."""

    patterns: tuple[FilterPattern, ...] = ()
    folders: tuple[FilterPattern, ...] = ()
    extensions: frozenset[str] = frozenset()

    @classmethod
    def from_patterns(
        cls,
        patterns: Iterable[str] = (),
        folders: Iterable[str] = (),
        extensions: Iterable[str] = (),
    ) -> DirectoryFilter:
        """Build a filter from raw pattern strings.

        Raises ``ConfigurationError`` on the first pattern that does not
        compile, so a bad filter never reaches a listing.
        """
        if isinstance(patterns, str):
            patterns = (patterns,)
        if isinstance(folders, str):
            folders = (folders,)
        if isinstance(extensions, str):
            extensions = (extensions,)
        return cls(
            patterns=tuple(compile_pattern(raw) for raw in patterns),
            folders=tuple(compile_pattern(raw) for raw in folders),
            extensions=frozenset(_normalize_extension(raw) for raw in extensions),
        )

    def excludes_file(self, path: str) -> bool:
        """Return whether the file at ``path`` should be left out."""
        slashed = _slashed(path)
        basename = slashed.rsplit("/", 1)[-1]
        if "." in basename and basename.rsplit(".", 1)[1] in self.extensions:
            return True
        return any(rule.excludes(slashed) for rule in self.patterns)

    def excludes_dir(self, path: str) -> bool:
        """Return whether the directory at ``path`` should be left out."""
        slashed = _slashed(path).rstrip("/")
        return any(rule.excludes(slashed) for rule in self.folders)

    def to_config(self) -> dict[str, list[str]]:
        """Serialize back to the JSON shape accepted by ``filter_from_config``."""
        return {
            "patterns": [rule.source for rule in self.patterns],
            "folders": [rule.source for rule in self.folders],
            "extensions": sorted(self.extensions),
        }


DEFAULT_FILTER = DirectoryFilter.from_patterns(
    folders=DEFAULT_EXCLUDED_FOLDERS,
    extensions=DEFAULT_EXCLUDED_EXTENSIONS,
)
EMPTY_FILTER = DirectoryFilter()


def filter_from_config(value: object) -> DirectoryFilter:
    """Parse a filter from its config form.

    Accepts a single pattern string, a list of file patterns, or an object
    with optional ``patterns``, ``folders`` and ``extensions`` lists.
    """
    if isinstance(value, str):
        return DirectoryFilter.from_patterns(patterns=(value,))
    if isinstance(value, list):
        return DirectoryFilter.from_patterns(patterns=value)
    if isinstance(value, Mapping):
        unknown = set(value) - {"patterns", "folders", "extensions"}
        if unknown:
            raise ConfigurationError(f"unknown filter keys: {', '.join(sorted(map(str, unknown)))}")
        sections: dict[str, list[str]] = {}
        for key in ("patterns", "folders", "extensions"):
            raw = value.get(key, [])
            if isinstance(raw, str):
                raw = [raw]
            if not isinstance(raw, list):
                raise ConfigurationError(f"filter {key!r} must be a list of strings")
            sections[key] = raw
        return DirectoryFilter.from_patterns(**sections)
    raise ConfigurationError(f"unsupported filter value: {value!r}")


def directory_key(directory: str | Path) -> str:
    """Normalize a directory path for use as a ``dir_filters`` key."""
    return os.path.normpath(os.path.expanduser(str(directory)))


def filter_for_directory(
    directory: str | Path,
    dir_filters: Mapping[str, DirectoryFilter] | None,
) -> DirectoryFilter:
    """Return the filter registered for ``directory`` or ``DEFAULT_FILTER``."""
    if not dir_filters:
        return DEFAULT_FILTER
    key = directory_key(directory)
    candidate = dir_filters.get(str(directory), dir_filters.get(key))
    if candidate is None:
        try:
            candidate = dir_filters.get(directory_key(Path(key).resolve()))
        except OSError:
            candidate = None
    if candidate is None:
        return DEFAULT_FILTER
    logger.debug("using configured filter for %s", key)
    return candidate


__all__ = [
    "DEFAULT_FILTER",
    "EMPTY_FILTER",
    "DirectoryFilter",
    "FilterPattern",
    "compile_pattern",
    "directory_key",
    "filter_for_directory",
    "filter_from_config",
]
