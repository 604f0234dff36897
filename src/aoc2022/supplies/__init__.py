from .puzzle import TITLE, solve
from .replay import InsufficientCratesError, MoveSemantics, UnknownStackError, replay
from .stacks import EmptyStackError, Stack, build_stacks, top_labels

__all__ = [
    "TITLE",
    "EmptyStackError",
    "InsufficientCratesError",
    "MoveSemantics",
    "Stack",
    "UnknownStackError",
    "build_stacks",
    "replay",
    "solve",
    "top_labels",
]
