"""Datatypes for the read-only filesystem collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class DirEntry:
    """One direct child of a listed directory."""

    name: str
    is_dir: bool


class ReadOnlyFileSystem(Protocol):
    """Anything that can list a ``/``-separated directory path.

    ``"."`` names the filesystem root. Implementations return children in a
    stable order and raise ``ListError`` for missing, unreadable, or
    non-directory paths.
    """

    def list_dir(self, path: str) -> list[DirEntry]: ...


__all__ = ["DirEntry", "ReadOnlyFileSystem"]
