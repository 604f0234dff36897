from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from aoc2022.parser.transcript import (
    ChangeDirectory,
    DirectoryEntry,
    FileEntry,
    ListCommand,
    TranscriptRecord,
)

ROOT_INDEX = 0
_ROOT_PATH = "/"
_PARENT_PATH = ".."


class InvalidTraversalError(ValueError):
    code = "E_TREE_TRAVERSAL_INVALID"

    def __init__(self, node_index: int) -> None:
        super().__init__(f"{self.code}: cannot change to the parent of the root directory")
        self.node_index = node_index


@dataclass(slots=True)
class TreeNode:
    size: int = 0
    parent: int | None = None
    children: dict[str, int] = field(default_factory=dict)

    def is_directory(self) -> bool:
        return self.size == 0 and bool(self.children)

    def is_file(self) -> bool:
        return not self.children and self.size != 0


class FileTree:
    """Flat node table; parent and child links are indices into the table."""

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes: list[TreeNode] = [TreeNode()]

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def root(self) -> int:
        return ROOT_INDEX

    def size_of(self, index: int) -> int:
        return self._nodes[index].size

    def parent_of(self, index: int) -> int | None:
        return self._nodes[index].parent

    def children_of(self, index: int) -> Mapping[str, int]:
        return MappingProxyType(self._nodes[index].children)

    def is_directory(self, index: int) -> bool:
        return self._nodes[index].is_directory()

    def is_file(self, index: int) -> bool:
        return self._nodes[index].is_file()

    def ensure_child(self, parent: int, name: str) -> int:
        children = self._nodes[parent].children
        index = children.get(name)
        if index is None:
            index = len(self._nodes)
            self._nodes.append(TreeNode(parent=parent))
            children[name] = index
        else:
            self._nodes[index].parent = parent
        return index

    def set_size(self, index: int, size: int) -> None:
        if size < 0:
            raise ValueError("node size must be >= 0")
        self._nodes[index].size = size


class TreeBuilder:
    def __init__(self) -> None:
        self.tree = FileTree()
        self.cursor = self.tree.root

    def apply(self, record: TranscriptRecord) -> None:
        if isinstance(record, ListCommand):
            return

        if isinstance(record, ChangeDirectory):
            self._change_directory(record.path)
            return

        if isinstance(record, DirectoryEntry):
            self.tree.ensure_child(self.cursor, record.name)
            return

        if isinstance(record, FileEntry):
            self.tree.set_size(self.tree.ensure_child(self.cursor, record.name), record.size)
            return

        raise TypeError(f"unsupported transcript record: {record!r}")

    def _change_directory(self, path: str) -> None:
        # transcripts start at the root, so "cd /" never moves the cursor
        if path == _ROOT_PATH:
            return
        if path == _PARENT_PATH:
            parent = self.tree.parent_of(self.cursor)
            if parent is None:
                raise InvalidTraversalError(self.cursor)
            self.cursor = parent
            return
        self.cursor = self.tree.ensure_child(self.cursor, path)


def build_tree(records: Iterable[TranscriptRecord]) -> FileTree:
    builder = TreeBuilder()
    for record in records:
        builder.apply(record)
    return builder.tree
