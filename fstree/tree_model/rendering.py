"""Depth-first tree-graph rendering over a read-only filesystem.

Walks depth-first in listing order and formats each visible entry as
``<prefix><connector> <name>``. Continuation prefixes draw a vertical bar
only while later siblings of an ancestor are still pending.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..filesystem.types import DirEntry, ReadOnlyFileSystem
from .options import DEFAULT_OPTIONS, RenderOptions
from .report import TreeReport

logger = logging.getLogger(__name__)

ELBOW_CONNECTOR = "└──"
TEE_CONNECTOR = "├──"
PIPE_PREFIX = "│   "
SPACE_PREFIX = "    "

CURRENT_DIR = "."
PARENT_DIR = ".."
# Dot-names that are never treated as hidden.
DOT_MARKERS = frozenset({".", "..", "..."})


def needs_walk_root_substitution(name: str) -> bool:
    """Return whether ``name`` must be walked from ``"."`` instead.

    True for the current-location marker itself and for any name with a
    parent-reference segment, neither of which a rooted filesystem can list.
    """
    if name == CURRENT_DIR:
        return True
    return PARENT_DIR in name.split("/")


def is_hidden(name: str) -> bool:
    return name.startswith(".") and name not in DOT_MARKERS


def allow_entry(entry: DirEntry, options: RenderOptions) -> bool:
    """Apply hidden-entry and directories-only filtering to ``entry``."""
    if not options.include_hidden and is_hidden(entry.name):
        return False
    if options.directories_only and not entry.is_dir:
        return False
    return True


def _join_display(parent: str, name: str) -> str:
    if parent.endswith("/"):
        return parent + name
    return f"{parent}/{name}"


def _join_walk(parent: str, name: str) -> str:
    if parent == CURRENT_DIR:
        return name
    return _join_display(parent, name)


def _display_root(name: str) -> str:
    stripped = name.rstrip("/")
    return stripped or name


@dataclass
class _Level:
    """One directory being rendered: its surviving entries and a cursor."""

    walk_path: str
    display_path: str
    prefix: str
    depth: int
    entries: list[DirEntry]
    index: int = 0


def _open_level(
    filesystem: ReadOnlyFileSystem,
    walk_path: str,
    display_path: str,
    prefix: str,
    depth: int,
    options: RenderOptions,
) -> _Level:
    entries = [entry for entry in filesystem.list_dir(walk_path) if allow_entry(entry, options)]
    return _Level(walk_path, display_path, prefix, depth, entries)


def _render_tree(
    filesystem: ReadOnlyFileSystem,
    walk_root: str,
    display_root: str,
    options: RenderOptions,
) -> tuple[list[str], int, int]:
    """Render every entry below ``walk_root`` in pre-order.

    Returns ``(lines, directory_count, file_count)``. Open directories are
    kept on an explicit stack rather than the call stack.
    """
    lines: list[str] = []
    n_dirs = 0
    n_files = 0
    stack = [_open_level(filesystem, walk_root, display_root, "", 0, options)]

    while stack:
        level = stack[-1]
        if level.index >= len(level.entries):
            stack.pop()
            continue

        entry = level.entries[level.index]
        level.index += 1
        is_last = level.index == len(level.entries)
        connector = ELBOW_CONNECTOR if is_last else TEE_CONNECTOR
        entry_display = _join_display(level.display_path, entry.name)
        shown_name = entry_display if options.full_path_prefix else entry.name
        lines.append(f"{level.prefix}{connector} {shown_name}")

        if not entry.is_dir:
            n_files += 1
            continue

        n_dirs += 1
        if options.depth_limited and level.depth + 1 >= options.max_depth:
            continue
        stack.append(
            _open_level(
                filesystem,
                _join_walk(level.walk_path, entry.name),
                entry_display,
                level.prefix + (SPACE_PREFIX if is_last else PIPE_PREFIX),
                level.depth + 1,
                options,
            )
        )

    return lines, n_dirs, n_files


def render(
    filesystem: ReadOnlyFileSystem,
    root_name: str,
    options: RenderOptions | None = None,
) -> TreeReport:
    """Render the tree below ``root_name`` in ``filesystem``.

    The first line is ``root_name`` itself. Raises ``ListError`` when the
    root or any visited directory cannot be listed; nothing is returned
    in that case.
    """
    options = options or DEFAULT_OPTIONS
    walk_root = root_name
    path_prefix_hint: str | None = None
    if needs_walk_root_substitution(root_name):
        walk_root = CURRENT_DIR
        path_prefix_hint = root_name

    logger.debug("rendering %r (walk root %r) with %r", root_name, walk_root, options)
    display_root = _display_root(path_prefix_hint if path_prefix_hint is not None else walk_root)
    lines, n_dirs, n_files = _render_tree(filesystem, walk_root, display_root, options)
    logger.debug("rendered %r: %d directories, %d files", root_name, n_dirs, n_files)

    return TreeReport(
        lines=(root_name, *lines),
        directory_count=n_dirs,
        file_count=n_files,
        path_prefix_hint=path_prefix_hint,
        directories_only=options.directories_only,
    )


__all__ = [
    "ELBOW_CONNECTOR",
    "TEE_CONNECTOR",
    "PIPE_PREFIX",
    "SPACE_PREFIX",
    "DOT_MARKERS",
    "needs_walk_root_substitution",
    "is_hidden",
    "allow_entry",
    "render",
]
