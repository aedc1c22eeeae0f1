"""Render configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderOptions:
    """Options for one render call.

    ``include_hidden`` shows dot-entries, ``directories_only`` drops files,
    ``full_path_prefix`` prints each entry as its path from the root, and
    ``max_depth`` bounds the displayed depth (``<= 0`` means unlimited).
    """

    include_hidden: bool = False
    directories_only: bool = False
    full_path_prefix: bool = False
    max_depth: int = 0

    @property
    def depth_limited(self) -> bool:
        return self.max_depth > 0


DEFAULT_OPTIONS = RenderOptions()

__all__ = ["RenderOptions", "DEFAULT_OPTIONS"]
