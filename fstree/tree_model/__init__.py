"""Tree-graph rendering and aggregation.

Defines ``RenderOptions`` and ``TreeReport``, the recursive ``render``
walk, and ``render_all`` for multi-root reports.
"""

from __future__ import annotations

from .aggregate import RenderArg, render_all
from .options import DEFAULT_OPTIONS, RenderOptions
from .rendering import (
    DOT_MARKERS,
    ELBOW_CONNECTOR,
    PIPE_PREFIX,
    SPACE_PREFIX,
    TEE_CONNECTOR,
    allow_entry,
    is_hidden,
    needs_walk_root_substitution,
    render,
)
from .report import TreeReport

__all__ = [
    "RenderOptions",
    "DEFAULT_OPTIONS",
    "TreeReport",
    "RenderArg",
    "render",
    "render_all",
    "allow_entry",
    "is_hidden",
    "needs_walk_root_substitution",
    "DOT_MARKERS",
    "ELBOW_CONNECTOR",
    "TEE_CONNECTOR",
    "PIPE_PREFIX",
    "SPACE_PREFIX",
]
