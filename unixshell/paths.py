"""Path resolution against the session's working and home directories."""

from __future__ import annotations

from typing import List, Tuple


def split_path(path: str) -> List[str]:
    return [part for part in path.split("/") if part]


def resolve_path(path: str, current_path: str, home: str) -> str:
    """Return the canonical absolute form of *path*.

    A leading ``~`` is replaced by *home*. Relative paths are folded onto
    *current_path*; ``..`` pops a segment (never past ``/``) and ``.`` is dropped.
    """

    if path.startswith("~"):
        path = home + path[1:]

    parts: List[str] = [] if path.startswith("/") else split_path(current_path)
    for part in split_path(path):
        if part == "..":
            if parts:
                parts.pop()
        elif part != ".":
            parts.append(part)
    return "/" + "/".join(parts)


def parent_and_name(absolute_path: str) -> Tuple[str, str]:
    """Split an absolute path into its parent directory and final segment.

    The root itself yields ``("/", "")``.
    """

    parts = split_path(absolute_path)
    if not parts:
        return "/", ""
    name = parts.pop()
    return "/" + "/".join(parts), name


def join_path(directory: str, name: str) -> str:
    return f"/{name}" if directory == "/" else f"{directory}/{name}"


__all__ = ["join_path", "parent_and_name", "resolve_path", "split_path"]
