from .puzzle import TITLE, solve
from .queries import (
    CapacityError,
    DiskSpaceConfig,
    NoCandidateError,
    all_directories,
    smallest_directory_to_free,
    space_to_free,
    sum_small_directories,
    total_size,
)
from .tree import ROOT_INDEX, FileTree, InvalidTraversalError, TreeBuilder, TreeNode, build_tree

__all__ = [
    "ROOT_INDEX",
    "TITLE",
    "CapacityError",
    "DiskSpaceConfig",
    "FileTree",
    "InvalidTraversalError",
    "NoCandidateError",
    "TreeBuilder",
    "TreeNode",
    "all_directories",
    "build_tree",
    "smallest_directory_to_free",
    "solve",
    "space_to_free",
    "sum_small_directories",
    "total_size",
]
