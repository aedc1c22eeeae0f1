"""Read-only filesystem collaborators consumed by the tree renderer.

- ``DirEntry`` and the ``ReadOnlyFileSystem`` protocol
- ``OSFileSystem`` for the host filesystem
- ``MapFileSystem`` for in-memory trees
"""

from __future__ import annotations

from .mapfs import MapFileSystem, is_valid_path
from .osfs import OSFileSystem
from .types import DirEntry, ReadOnlyFileSystem

__all__ = [
    "DirEntry",
    "ReadOnlyFileSystem",
    "OSFileSystem",
    "MapFileSystem",
    "is_valid_path",
]
