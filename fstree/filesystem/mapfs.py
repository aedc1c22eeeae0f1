"""In-memory filesystem collaborator.

Built from a flat mapping of ``/``-separated file paths, so tests and
embedding callers can describe a tree without touching disk. Parent
directories are implied by their descendants; a key ending in ``/``
declares a directory that may be empty.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from ..errors import ListError
from .types import DirEntry


def is_valid_path(path: str) -> bool:
    """Return whether ``path`` is an unrooted, slash-separated clean path.

    ``"."`` is the root. Empty elements, ``.``/``..`` elements, and
    leading or trailing slashes are rejected.
    """
    if path == ".":
        return True
    if not path:
        return False
    return all(part not in ("", ".", "..") for part in path.split("/"))


class MapFileSystem:
    """Read-only tree described by path strings."""

    def __init__(self, paths: Mapping[str, object] | Iterable[str]) -> None:
        self._children: dict[str, dict[str, bool]] = {".": {}}
        for raw in paths:
            is_dir = raw.endswith("/")
            path = raw.rstrip("/")
            if not is_valid_path(path) or path == ".":
                raise ValueError(f"invalid path in map: {raw!r}")
            self._add(path, is_dir)

    def _add(self, path: str, is_dir: bool) -> None:
        parts = path.split("/")
        last = len(parts) - 1
        parent = "."
        for i, name in enumerate(parts):
            current = name if parent == "." else f"{parent}/{name}"
            entry_is_dir = is_dir or i < last
            siblings = self._children.setdefault(parent, {})
            existing = siblings.get(name)
            if existing is not None and existing != entry_is_dir:
                raise ValueError(f"path is both a file and a directory: {current!r}")
            siblings[name] = entry_is_dir
            if entry_is_dir:
                self._children.setdefault(current, {})
            parent = current

    def list_dir(self, path: str) -> list[DirEntry]:
        """Return entries of ``path`` sorted by name."""
        if not is_valid_path(path):
            raise ListError(path, "invalid argument")
        children = self._children.get(path)
        if children is None:
            parent, _, name = path.rpartition("/")
            if self._children.get(parent or ".", {}).get(name) is False:
                raise ListError(path, "not a directory")
            raise ListError(path, "file does not exist")
        return [DirEntry(name=name, is_dir=children[name]) for name in sorted(children)]


__all__ = ["MapFileSystem", "is_valid_path"]
