from .overlap import count_fully_contained, count_overlapping, fully_contained, overlapping
from .puzzle import TITLE, solve

__all__ = [
    "TITLE",
    "count_fully_contained",
    "count_overlapping",
    "fully_contained",
    "overlapping",
    "solve",
]
