"""Path-prefix ownership and write permission for the virtual filesystem."""

from __future__ import annotations

from dataclasses import dataclass

ROOT_USER = "root"
DIRECTORY_MODE = "drwxr-xr-x"
FILE_MODE = "-rw-r--r--"


@dataclass(frozen=True)
class FileOwner:
    user: str
    group: str


def home_for(user: str) -> str:
    return "/root" if user == ROOT_USER else f"/home/{user}"


def _within_home(absolute_path: str, user: str) -> bool:
    home = f"/home/{user}"
    return absolute_path == home or absolute_path.startswith(home + "/")


def get_owner(absolute_path: str, user: str) -> FileOwner:
    """Paths under ``/home/<user>`` belong to *user*; everything else to root."""

    if _within_home(absolute_path, user):
        return FileOwner(user=user, group=user)
    return FileOwner(user=ROOT_USER, group=ROOT_USER)


def can_write(absolute_path: str, user: str) -> bool:
    if user == ROOT_USER:
        return True
    return _within_home(absolute_path, user)


__all__ = [
    "DIRECTORY_MODE",
    "FILE_MODE",
    "FileOwner",
    "ROOT_USER",
    "can_write",
    "get_owner",
    "home_for",
]
