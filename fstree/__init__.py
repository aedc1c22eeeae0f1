"""Public package surface for fstree.

Renders ``tree``-style graphs of read-only filesystems. ``main`` is
exported for programmatic CLI invocation.
"""

from __future__ import annotations

from .errors import ListError
from .filesystem import DirEntry, MapFileSystem, OSFileSystem, ReadOnlyFileSystem
from .tree_model import RenderArg, RenderOptions, TreeReport, render, render_all


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "main",
    "render",
    "render_all",
    "RenderArg",
    "RenderOptions",
    "TreeReport",
    "ListError",
    "DirEntry",
    "ReadOnlyFileSystem",
    "OSFileSystem",
    "MapFileSystem",
]
