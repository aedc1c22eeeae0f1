"""Command-line front door for fstree.

Parses ``tree``-style flags, merges them over the persisted defaults, and
prints one aggregated report for every directory argument.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import load_render_defaults, reset_render_defaults, save_render_defaults
from .errors import ListError
from .filesystem import OSFileSystem
from .tree_model import RenderArg, RenderOptions, needs_walk_root_substitution, render_all

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    """argparse type for depth limits; ``0`` means unlimited."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _add_switch(parser: argparse.ArgumentParser, flag: str, dest: str, help_text: str) -> None:
    """Add ``-x`` to switch an option on and ``--no-x`` to switch it off.

    Both leave ``dest`` as ``None`` when absent so saved defaults apply.
    """
    parser.add_argument(f"-{flag}", dest=dest, action="store_const", const=True, default=None, help=help_text)
    parser.add_argument(f"--no-{flag}", dest=dest, action="store_const", const=False, help=f"Undo -{flag}.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fstree",
        description="List contents of directories in a tree-like format.",
    )
    parser.add_argument("directories", nargs="*", metavar="directory", help="Directories to list. Defaults to '.'.")
    _add_switch(parser, "a", "include_hidden", "Include entries whose names begin with a dot, except '.', '..' and '...'.")
    _add_switch(parser, "d", "directories_only", "List directories only.")
    _add_switch(parser, "f", "full_path_prefix", "Print the full path prefix for each entry.")
    parser.add_argument(
        "-L",
        dest="max_depth",
        type=_non_negative_int,
        default=None,
        help="Max display depth of the tree (0 for unlimited).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log traversal details to stderr.")
    parser.add_argument("--save-defaults", action="store_true", help="Remember the given flags as defaults.")
    parser.add_argument("--reset-defaults", action="store_true", help="Forget saved defaults before applying flags.")
    return parser


def resolve_options(args: argparse.Namespace, defaults: RenderOptions) -> RenderOptions:
    """Apply flags given on the command line over ``defaults``.

    Flags left unset on the command line keep their saved value.
    """
    overrides = {
        key: value
        for key, value in (
            ("include_hidden", args.include_hidden),
            ("directories_only", args.directories_only),
            ("full_path_prefix", args.full_path_prefix),
            ("max_depth", args.max_depth),
        )
        if value is not None
    }
    return replace(defaults, **overrides)


def render_arg_for(directory: str, options: RenderOptions, cwd: Path | None = None) -> RenderArg:
    """Build the ``RenderArg`` that lists ``directory`` on the host filesystem.

    Names walked from ``"."`` get a filesystem rooted at the directory
    itself; all others are resolved against ``cwd``.
    """
    if needs_walk_root_substitution(directory):
        filesystem = OSFileSystem(directory)
    else:
        filesystem = OSFileSystem(cwd if cwd is not None else Path.cwd())
    return RenderArg(filesystem=filesystem, name=directory, options=options)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the tree report.

    Listing failures exit with status 1 and the error on stderr.
    """
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    if args.reset_defaults:
        reset_render_defaults()
        logger.debug("cleared saved defaults")

    options = resolve_options(args, load_render_defaults())
    if args.save_defaults:
        save_render_defaults(options)
        logger.debug("saved defaults %r", options)

    directories = args.directories or ["."]
    try:
        report = render_all(render_arg_for(directory, options) for directory in directories)
    except ListError as exc:
        raise SystemExit(str(exc)) from exc

    sys.stdout.write(str(report) + "\n")


if __name__ == "__main__":
    main()
