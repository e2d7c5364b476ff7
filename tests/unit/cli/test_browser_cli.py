"""CLI argument and output behavior tests.

Verifies how ``treebrowser.cli.main`` picks the target directory, applies
policy flags over persisted config, and prints the indented listing.
"""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from treebrowser import cli, config
from treebrowser.policy import BrowserPolicy


def _make_tree(root: Path) -> None:
    (root / "src").mkdir()
    (root / "src" / "app.py").write_text("", encoding="utf-8")
    (root / ".env").write_text("", encoding="utf-8")
    (root / "README.md").write_text("", encoding="utf-8")


class CliListingTests(unittest.TestCase):
    def _run(self, argv: list[str], default_path: Path | None = None, config_path: Path | None = None) -> str:
        stdout = io.StringIO()
        patched_config = config_path or Path(tempfile.gettempdir()) / "treebrowser-missing" / "config.json"
        with (
            mock.patch.object(sys, "argv", ["treebrowser", *argv]),
            mock.patch("sys.stdout", stdout),
            mock.patch("treebrowser.config.CONFIG_PATH", patched_config),
        ):
            cli.main(default_path=default_path)
        return stdout.getvalue()

    def test_prints_root_label_and_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_tree(root)

            output = self._run([str(root), "--no-config"])

            self.assertEqual(
                output.splitlines(),
                [f"{tmp}{os.sep}", "  .env", "  README.md", f"  src{os.sep}"],
            )

    def test_policy_flags_and_expand(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_tree(root)

            output = self._run(
                [str(root), "--no-config", "--folders-first", "--hide-dot-files", "--strip-leading-path", "--expand", "src"]
            )

            self.assertEqual(
                output.splitlines(),
                [f"{root.name}{os.sep}", f"  src{os.sep}", "    app.py", "  README.md"],
            )

    def test_defaults_to_given_default_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "only.txt").write_text("", encoding="utf-8")

            output = self._run(["--no-config"], default_path=root)

            self.assertEqual(output.splitlines()[1:], ["  only.txt"])

    def test_persisted_policy_is_used_unless_disabled(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "tree"
            root.mkdir()
            _make_tree(root)
            config_path = Path(tmp) / "config.json"
            with mock.patch("treebrowser.config.CONFIG_PATH", config_path):
                config.save_policy(BrowserPolicy(hide_dot_files=True, indent_width=4))

            output = self._run([str(root)], config_path=config_path)

            self.assertEqual(output.splitlines()[1:], ["    README.md", f"    src{os.sep}"])

    def test_negated_flag_overrides_persisted_policy(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "tree"
            root.mkdir()
            _make_tree(root)
            config_path = Path(tmp) / "config.json"
            with mock.patch("treebrowser.config.CONFIG_PATH", config_path):
                config.save_policy(BrowserPolicy(hide_dot_files=True))

            output = self._run([str(root), "--no-hide-dot-files"], config_path=config_path)

            self.assertEqual(output.splitlines()[1:], ["  .env", "  README.md", f"  src{os.sep}"])

    def test_resolve_policy_keeps_unset_flags_from_config(self) -> None:
        args = cli.build_parser().parse_args(["--no-folders-first", "--case-insensitive"])
        persisted = BrowserPolicy(force_folders_first=True, hide_dot_folders=True)

        with mock.patch("treebrowser.config.load_policy", return_value=persisted):
            policy = cli.resolve_policy(args)

        self.assertFalse(policy.force_folders_first)
        self.assertTrue(policy.case_insensitive_sort)
        self.assertTrue(policy.hide_dot_folders)

    def test_filter_option_replaces_configured_filters(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_tree(root)

            output = self._run([str(root), "--no-config", "--filter", r"\.md$"])

            self.assertNotIn("README.md", output)
            self.assertIn(".env", output)

    def test_missing_path_exits_with_message(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            with self.assertRaises(SystemExit) as ctx:
                self._run([str(missing)])

            self.assertIn("Path not found", str(ctx.exception))

    def test_invalid_filter_pattern_exits_with_message(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(SystemExit) as ctx:
                self._run([tmp, "--no-config", "--filter", "(bad"])

            self.assertIn("Invalid configuration", str(ctx.exception))

    def test_unknown_expand_target_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(SystemExit) as ctx:
                self._run([tmp, "--no-config", "--expand", "nope"])

            self.assertIn("nope", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
