"""Multi-root rendering: one report built from several independent trees."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..filesystem.types import ReadOnlyFileSystem
from .options import RenderOptions
from .rendering import render
from .report import TreeReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderArg:
    """One ``(filesystem, name, options)`` root for ``render_all``."""

    filesystem: ReadOnlyFileSystem
    name: str
    options: RenderOptions = field(default_factory=RenderOptions)


def render_all(args: Iterable[RenderArg]) -> TreeReport:
    """Render each root in order and pool the results.

    Each root keeps its own graph; lines are concatenated and counts summed.
    The first ``ListError`` aborts the whole batch.
    """
    lines: list[str] = []
    n_dirs = 0
    n_files = 0
    directories_only: list[bool] = []

    for arg in args:
        report = render(arg.filesystem, arg.name, arg.options)
        lines.extend(report.lines)
        n_dirs += report.directory_count
        n_files += report.file_count
        directories_only.append(report.directories_only)

    logger.debug("aggregated %d roots: %d directories, %d files", len(directories_only), n_dirs, n_files)
    return TreeReport(
        lines=tuple(lines),
        directory_count=n_dirs,
        file_count=n_files,
        directories_only=bool(directories_only) and all(directories_only),
    )


__all__ = ["RenderArg", "render_all"]
