from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .tree import FileTree

DEFAULT_TOTAL_CAPACITY = 70_000_000
DEFAULT_REQUIRED_FREE_SPACE = 30_000_000
DEFAULT_SMALL_DIRECTORY_LIMIT = 100_000


class CapacityError(ValueError):
    code = "E_QUERY_CAPACITY_INVALID"

    def __init__(self, message: str, *, used_space: int, total_capacity: int) -> None:
        super().__init__(f"{self.code}: {message}")
        self.message = message
        self.used_space = used_space
        self.total_capacity = total_capacity


class NoCandidateError(LookupError):
    code = "E_QUERY_NO_CANDIDATE"

    def __init__(self, needed_space: int) -> None:
        super().__init__(f"{self.code}: no directory frees at least {needed_space} bytes")
        self.needed_space = needed_space


@dataclass(frozen=True, slots=True)
class DiskSpaceConfig:
    total_capacity: int = DEFAULT_TOTAL_CAPACITY
    required_free_space: int = DEFAULT_REQUIRED_FREE_SPACE
    small_directory_limit: int = DEFAULT_SMALL_DIRECTORY_LIMIT

    def __post_init__(self) -> None:
        if self.total_capacity < 0:
            raise ValueError("total_capacity must be >= 0")
        if self.required_free_space < 0:
            raise ValueError("required_free_space must be >= 0")
        if self.small_directory_limit < 0:
            raise ValueError("small_directory_limit must be >= 0")


def total_size(tree: FileTree, index: int) -> int:
    """Own size plus every descendant's, walked with an explicit stack."""
    total = 0
    pending = [index]
    while pending:
        current = pending.pop()
        total += tree.size_of(current)
        pending.extend(tree.children_of(current).values())
    return total


def _subtree_totals(tree: FileTree) -> dict[int, int]:
    order: list[int] = []
    pending = [tree.root]
    while pending:
        index = pending.pop()
        order.append(index)
        pending.extend(tree.children_of(index).values())

    # reversed pre-order settles every child before its parent
    totals: dict[int, int] = {}
    for index in reversed(order):
        totals[index] = tree.size_of(index) + sum(
            totals[child] for child in tree.children_of(index).values()
        )
    return totals


def all_directories(tree: FileTree) -> Iterator[int]:
    """Yield the root and every descendant directory in pre-order, by sorted name."""
    pending = [tree.root]
    while pending:
        index = pending.pop()
        yield index
        children = tree.children_of(index)
        for name in sorted(children, reverse=True):
            child = children[name]
            if tree.is_directory(child):
                pending.append(child)


def sum_small_directories(tree: FileTree, config: DiskSpaceConfig | None = None) -> int:
    resolved = DiskSpaceConfig() if config is None else config
    totals = _subtree_totals(tree)
    sizes = (totals[index] for index in all_directories(tree))
    return sum(size for size in sizes if size <= resolved.small_directory_limit)


def space_to_free(used_space: int, config: DiskSpaceConfig | None = None) -> int:
    resolved = DiskSpaceConfig() if config is None else config
    if used_space > resolved.total_capacity:
        raise CapacityError(
            "used space exceeds the disk capacity",
            used_space=used_space,
            total_capacity=resolved.total_capacity,
        )
    free_space = resolved.total_capacity - used_space
    if free_space > resolved.required_free_space:
        raise CapacityError(
            "disk already has the required free space",
            used_space=used_space,
            total_capacity=resolved.total_capacity,
        )
    return resolved.required_free_space - free_space


def smallest_directory_to_free(tree: FileTree, config: DiskSpaceConfig | None = None) -> int:
    totals = _subtree_totals(tree)
    needed = space_to_free(totals[tree.root], config)
    candidates = [
        size for size in (totals[index] for index in all_directories(tree)) if size >= needed
    ]
    if not candidates:
        raise NoCandidateError(needed)
    return min(candidates)
