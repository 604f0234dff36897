from __future__ import annotations

import pytest

from aoc2022.filesystem import (
    CapacityError,
    DiskSpaceConfig,
    FileTree,
    NoCandidateError,
    all_directories,
    build_tree,
    smallest_directory_to_free,
    space_to_free,
    sum_small_directories,
    total_size,
)
from aoc2022.parser import parse_transcript

pytestmark = pytest.mark.unit


def _tree(*lines: str) -> FileTree:
    return build_tree(parse_transcript(lines))


def _small_example() -> FileTree:
    return _tree("$ cd /", "$ ls", "dir a", "100 b.txt", "$ cd a", "$ ls", "50 c.txt")


def test_total_size_sums_descendants() -> None:
    tree = _small_example()
    directory = tree.children_of(tree.root)["a"]

    assert total_size(tree, tree.root) == 150
    assert total_size(tree, directory) == 50


def test_all_directories_is_preorder_by_name() -> None:
    tree = _tree(
        "$ ls",
        "dir b",
        "dir a",
        "$ cd b",
        "$ ls",
        "1 x",
        "$ cd ..",
        "$ cd a",
        "$ ls",
        "dir c",
        "$ cd c",
        "$ ls",
        "2 y",
    )
    names = {index: name for name, index in tree.children_of(tree.root).items()}
    a_index = tree.children_of(tree.root)["a"]
    names.update({index: name for name, index in tree.children_of(a_index).items()})

    order = [names.get(index, "/") for index in all_directories(tree)]

    assert order == ["/", "a", "c", "b"]


def test_all_directories_always_yields_root_and_skips_empty_directories() -> None:
    assert list(all_directories(FileTree())) == [0]

    tree = _tree("$ ls", "dir empty", "3 f")
    assert list(all_directories(tree)) == [tree.root]


def test_all_directories_is_lazy() -> None:
    iterator = all_directories(_small_example())

    assert next(iterator) == 0
    assert len(list(iterator)) == 1


def test_sum_small_directories_counts_every_qualifying_directory() -> None:
    assert sum_small_directories(_small_example()) == 200


def test_sum_small_directories_uses_configured_limit() -> None:
    config = DiskSpaceConfig(small_directory_limit=100)

    assert sum_small_directories(_small_example(), config) == 50


@pytest.mark.parametrize(
    ("used", "expected"),
    [
        (40_000_000, 0),
        (40_000_001, 1),
        (70_000_000, 30_000_000),
    ],
)
def test_space_to_free(used: int, expected: int) -> None:
    assert space_to_free(used) == expected


@pytest.mark.parametrize("used", [0, 39_999_999, 70_000_001])
def test_space_to_free_rejects_out_of_range_usage(used: int) -> None:
    with pytest.raises(CapacityError) as exc_info:
        space_to_free(used)

    assert exc_info.value.code == "E_QUERY_CAPACITY_INVALID"
    assert exc_info.value.used_space == used
    assert exc_info.value.total_capacity == 70_000_000


def test_smallest_directory_to_free_default_config_rejects_small_disk_usage() -> None:
    with pytest.raises(CapacityError):
        smallest_directory_to_free(_small_example())


def test_smallest_directory_to_free_with_custom_capacity() -> None:
    config = DiskSpaceConfig(total_capacity=200, required_free_space=100)

    assert smallest_directory_to_free(_small_example(), config) == 50


def test_smallest_directory_to_free_without_candidate() -> None:
    tree = _tree("$ ls", "50 f")
    config = DiskSpaceConfig(total_capacity=100, required_free_space=1_000)

    with pytest.raises(NoCandidateError) as exc_info:
        smallest_directory_to_free(tree, config)

    assert exc_info.value.code == "E_QUERY_NO_CANDIDATE"
    assert exc_info.value.needed_space == 950


@pytest.mark.parametrize(
    "kwargs",
    [
        {"total_capacity": -1},
        {"required_free_space": -1},
        {"small_directory_limit": -1},
    ],
)
def test_disk_space_config_rejects_negative_values(kwargs: dict[str, int]) -> None:
    with pytest.raises(ValueError, match=">= 0"):
        DiskSpaceConfig(**kwargs)
