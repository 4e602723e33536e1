"""In-memory filesystem tree shared by the shell and the editor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Mapping, Optional, Union

ROOT_KEY = "/"


class FileSystemError(ValueError):
    """Raised when a serialised tree cannot be turned back into nodes."""


@dataclass
class FileNode:
    content: str = ""

    is_dir: ClassVar[bool] = False


@dataclass
class DirectoryNode:
    entries: Dict[str, "FileSystemNode"] = field(default_factory=dict)

    is_dir: ClassVar[bool] = True


FileSystemNode = Union[FileNode, DirectoryNode]


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------


def node_to_json(node: FileSystemNode) -> Any:
    """Files become strings, directories become objects keyed by entry name."""

    if not node.is_dir:
        return node.content
    return {name: node_to_json(child) for name, child in node.entries.items()}


def node_from_json(value: Any) -> FileSystemNode:
    if isinstance(value, str):
        return FileNode(value)
    if isinstance(value, Mapping):
        return DirectoryNode({str(name): node_from_json(child) for name, child in value.items()})
    raise FileSystemError(f"Unsupported node type: {type(value).__name__}")


def tree_to_json(root: DirectoryNode) -> Dict[str, Any]:
    return {ROOT_KEY: node_to_json(root)}


def tree_from_json(data: Any) -> DirectoryNode:
    """Rebuild the root directory from ``{"/": {...}}``."""

    if not isinstance(data, Mapping) or ROOT_KEY not in data:
        raise FileSystemError("Filesystem is missing its root entry")
    root = node_from_json(data[ROOT_KEY])
    if not root.is_dir:
        raise FileSystemError("Filesystem root must be a directory")
    return root


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


def walk(root: DirectoryNode, absolute_path: str) -> Optional[FileSystemNode]:
    """Follow *absolute_path* segment by segment; ``None`` if it leaves the tree."""

    current: FileSystemNode = root
    for part in absolute_path.split("/"):
        if not part:
            continue
        if not current.is_dir or part not in current.entries:
            return None
        current = current.entries[part]
    return current


def default_file_system(username: str) -> DirectoryNode:
    return tree_from_json(
        {
            ROOT_KEY: {
                "home": {
                    username: {
                        "README.md": "# Welcome\n\nThis is a simple Unix shell emulator.\n",
                        "example.txt": "This is an example file.\n",
                    },
                },
                "etc": {
                    "hostname": "localhost\n",
                },
                "tmp": {},
            }
        }
    )


__all__ = [
    "DirectoryNode",
    "FileNode",
    "FileSystemError",
    "FileSystemNode",
    "ROOT_KEY",
    "default_file_system",
    "node_from_json",
    "node_to_json",
    "tree_from_json",
    "tree_to_json",
    "walk",
]
