"""CLI argument, defaults, and error-exit tests.

Verifies how ``fstree.cli.main`` maps flags to render options.
"""

from __future__ import annotations

import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from fstree import cli
from fstree.filesystem import OSFileSystem
from fstree.tree_model import RenderOptions


def _make_tree(root: Path) -> None:
    (root / "pkg" / "sub").mkdir(parents=True)
    (root / "pkg" / "mod.py").write_text("x = 1\n", encoding="utf-8")
    (root / "pkg" / "sub" / "deep.txt").write_text("d\n", encoding="utf-8")
    (root / ".hidden").write_text("h\n", encoding="utf-8")
    (root / "top.txt").write_text("t\n", encoding="utf-8")


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        _make_tree(self.root)
        self._previous_cwd = Path.cwd()
        os.chdir(self.root)
        patcher = mock.patch("fstree.config.CONFIG_PATH", self.root / "cfg" / "config.json")
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        os.chdir(self._previous_cwd)
        self._tmp.cleanup()

    def _run(self, argv: list[str]) -> str:
        stdout = io.StringIO()
        with mock.patch("sys.stdout", stdout):
            cli.main(argv)
        return stdout.getvalue()

    def test_defaults_to_current_directory(self) -> None:
        output = self._run([])

        self.assertEqual(
            output,
            ".\n├── pkg\n│   ├── mod.py\n│   └── sub\n│       └── deep.txt\n└── top.txt\n\n2 directories, 3 files\n",
        )

    def test_flags_map_to_options(self) -> None:
        output = self._run(["-a", "-d", "-L", "1", "pkg"])

        self.assertEqual(output, "pkg\n└── sub\n\n1 directory\n")

    def test_full_path_and_multiple_roots(self) -> None:
        output = self._run(["-f", "pkg", "pkg/sub"])

        self.assertEqual(
            output,
            "pkg\n├── pkg/mod.py\n└── pkg/sub\n    └── pkg/sub/deep.txt\n"
            "pkg/sub\n└── pkg/sub/deep.txt\n\n1 directory, 3 files\n",
        )

    def test_parent_relative_root_walks_that_directory(self) -> None:
        os.chdir(self.root / "pkg" / "sub")

        output = self._run(["-f", "../../pkg"])

        self.assertIn("├── ../../pkg/mod.py\n", output)
        self.assertTrue(output.endswith("\n\n1 directory, 2 files\n"))

    def test_missing_directory_exits_with_message(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self._run(["pkg", "missing"])

        self.assertEqual(str(ctx.exception.code), "readdir missing: no such file or directory")

    def test_level_must_not_be_negative(self) -> None:
        with mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["-L", "-1"])

        self.assertEqual(ctx.exception.code, 2)

    def test_level_zero_means_unlimited(self) -> None:
        self._run(["-L", "1", "--save-defaults"])

        output = self._run(["-L", "0", "pkg"])

        self.assertIn("deep.txt", output)
        self.assertTrue(output.endswith("\n\n1 directory, 2 files\n"))

    def test_saved_defaults_apply_to_later_runs(self) -> None:
        self._run(["-a", "--save-defaults", "pkg"])

        output = self._run([])

        self.assertIn("├── .hidden\n", output)

    def test_no_flags_switch_off_saved_defaults(self) -> None:
        self._run(["-a", "-d", "-f", "--save-defaults", "pkg"])

        output = self._run(["--no-a", "--no-d", "--no-f", "pkg"])

        self.assertEqual(output, "pkg\n├── mod.py\n└── sub\n    └── deep.txt\n\n1 directory, 2 files\n")
        self.assertIn("├── .hidden\n", self._run([]))

    def test_saving_a_switched_off_flag_clears_it(self) -> None:
        self._run(["-a", "-L", "3", "--save-defaults"])
        self._run(["--no-a", "-L", "0", "--save-defaults"])

        output = self._run([])

        self.assertNotIn(".hidden", output)
        self.assertIn("deep.txt", output)

    def test_reset_defaults_restores_builtin_behavior(self) -> None:
        self._run(["-a", "-d", "-L", "1", "--save-defaults"])

        output = self._run(["--reset-defaults", "pkg"])

        self.assertEqual(output, "pkg\n├── mod.py\n└── sub\n    └── deep.txt\n\n1 directory, 2 files\n")
        self.assertNotIn(".hidden", self._run([]))

    def test_resolve_options_keeps_defaults_for_absent_flags(self) -> None:
        defaults = RenderOptions(include_hidden=True, max_depth=2)
        args = cli.build_parser().parse_args(["-f", "--no-a"])

        self.assertEqual(
            cli.resolve_options(args, defaults),
            RenderOptions(include_hidden=False, full_path_prefix=True, max_depth=2),
        )

    def test_render_arg_for_roots_filesystem(self) -> None:
        options = RenderOptions()

        plain = cli.render_arg_for("pkg", options, cwd=self.root)
        parent = cli.render_arg_for("../x", options, cwd=self.root)

        self.assertIsInstance(plain.filesystem, OSFileSystem)
        self.assertEqual(plain.filesystem.root, self.root)
        self.assertEqual(parent.filesystem.root, Path("../x"))
        self.assertEqual(parent.name, "../x")


if __name__ == "__main__":
    unittest.main()
