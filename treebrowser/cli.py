"""Command-line front door for treebrowser.

Parses CLI options, merges them over the persisted policy, lists the target
directory and prints the indented projection to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from . import config
from .errors import ConfigurationError
from .listing.filters import DirectoryFilter
from .policy import BOOL_POLICY_KEYS, BrowserPolicy
from .session import open_browser
from .tree_model.rendering import render_lines


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print an indentation-based listing of a directory."
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument(
        "--expand",
        metavar="REL",
        action="append",
        default=[],
        help="Expand directory REL (relative to PATH) and its parents. Repeatable.",
    )
    parser.add_argument("--case-insensitive", dest="case_insensitive_sort", action=argparse.BooleanOptionalAction,
                        default=None, help="Sort names case-insensitively.")
    parser.add_argument("--folders-first", dest="force_folders_first", action=argparse.BooleanOptionalAction,
                        default=None, help="List directories before files.")
    parser.add_argument("--hide-dot-folders", dest="hide_dot_folders", action=argparse.BooleanOptionalAction,
                        default=None, help="Hide directories whose name starts with a dot.")
    parser.add_argument("--hide-dot-files", dest="hide_dot_files", action=argparse.BooleanOptionalAction,
                        default=None, help="Hide files whose name starts with a dot.")
    parser.add_argument("--strip-leading-path", dest="strip_leading_path", action=argparse.BooleanOptionalAction,
                        default=None, help="Show only the last component of the root directory.")
    parser.add_argument("--indent-width", type=_positive_int, default=None, help="Spaces per nesting level.")
    parser.add_argument("--filter", metavar="PATTERN", action="append", default=None,
                        help="File exclusion pattern (prefix with ! to negate). Replaces configured filters.")
    parser.add_argument("--markers", action="store_true", help="Prefix directories with expand/collapse markers.")
    parser.add_argument("--no-config", action="store_true", help="Ignore the persisted config file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    return parser


def resolve_policy(args: argparse.Namespace) -> BrowserPolicy:
    """Return the persisted policy with explicit CLI flags applied on top."""
    policy = BrowserPolicy() if args.no_config else config.load_policy()
    overrides: dict[str, object] = {
        key: getattr(args, key) for key in BOOL_POLICY_KEYS if getattr(args, key) is not None
    }
    if args.indent_width is not None:
        overrides["indent_width"] = args.indent_width
    return replace(policy, **overrides) if overrides else policy


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the listing of a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    try:
        policy = resolve_policy(args)
        dir_filters = {} if args.no_config else config.load_dir_filters()
        dir_filter = DirectoryFilter.from_patterns(patterns=args.filter) if args.filter is not None else None
    except ConfigurationError as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from exc

    tree = open_browser(path, policy=policy, dir_filter=dir_filter, dir_filters=dir_filters, change_directory=False)
    for target in args.expand:
        idx = tree.reveal(target)
        if idx is None:
            raise SystemExit(f"Not found in listing: {target}")
        tree.expand(idx)
    for line in render_lines(tree, markers=args.markers):
        sys.stdout.write(line + "\n")


if __name__ == "__main__":
    main()
