"""Rendered tree graph plus directory/file counts."""

from __future__ import annotations

from dataclasses import dataclass


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


@dataclass(frozen=True)
class TreeReport:
    """Immutable result of rendering one or more roots.

    ``lines`` holds the formatted graph rows in display order; the counts
    cover exactly the entries that appear in ``lines`` below each root.
    ``path_prefix_hint`` is the original root name when the walk had to
    start from ``"."`` instead.
    """

    lines: tuple[str, ...] = ()
    directory_count: int = 0
    file_count: int = 0
    path_prefix_hint: str | None = None
    directories_only: bool = False

    def graph(self) -> str:
        """Return the graph rows joined by newlines."""
        return "\n".join(self.lines)

    def summary(self) -> str:
        """Return the ``N directories, M files`` trailer.

        The file clause is omitted for directories-only reports.
        """
        text = _plural(self.directory_count, "directory", "directories")
        if not self.directories_only:
            text += ", " + _plural(self.file_count, "file", "files")
        return text

    def __str__(self) -> str:
        return self.graph() + "\n\n" + self.summary()


__all__ = ["TreeReport"]
