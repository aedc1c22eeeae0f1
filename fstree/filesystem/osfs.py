"""Filesystem collaborator backed by the host operating system."""

from __future__ import annotations

import os
from pathlib import Path

from ..errors import ListError
from .types import DirEntry


class OSFileSystem:
    """Read-only view of the host filesystem rooted at ``root``.

    Absolute paths passed to ``list_dir`` bypass ``root``. Symlinks are
    reported as files and never followed.
    """

    def __init__(self, root: str | os.PathLike[str] = ".") -> None:
        self.root = Path(root)

    def __repr__(self) -> str:
        return f"OSFileSystem({str(self.root)!r})"

    def list_dir(self, path: str) -> list[DirEntry]:
        """Return entries of ``path`` sorted by name."""
        directory = self.root / path
        entries: list[DirEntry] = []
        try:
            with os.scandir(directory) as it:
                for child in it:
                    try:
                        is_dir = child.is_dir(follow_symlinks=False)
                    except OSError:
                        is_dir = False
                    entries.append(DirEntry(name=child.name, is_dir=is_dir))
        except OSError as exc:
            raise ListError(path, exc) from exc

        entries.sort(key=lambda entry: entry.name)
        return entries


__all__ = ["OSFileSystem"]
