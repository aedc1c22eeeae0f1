"""Error types raised while walking a filesystem."""

from __future__ import annotations


class ListError(Exception):
    """Raised when a directory's entries cannot be enumerated.

    ``path`` is the path as passed to the filesystem collaborator and
    ``cause`` is the underlying exception or a short reason string.
    """

    def __init__(self, path: str, cause: BaseException | str) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"readdir {path}: {_describe(cause)}")


def _describe(cause: BaseException | str) -> str:
    if isinstance(cause, OSError) and cause.strerror:
        return cause.strerror.lower()
    return str(cause)


__all__ = ["ListError"]
