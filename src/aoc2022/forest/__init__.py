from .puzzle import TITLE, solve
from .visibility import (
    HeightGrid,
    best_scenic_location,
    best_scenic_score,
    count_visible,
    scenic_scores,
    visibility_mask,
)

__all__ = [
    "TITLE",
    "HeightGrid",
    "best_scenic_location",
    "best_scenic_score",
    "count_visible",
    "scenic_scores",
    "solve",
    "visibility_mask",
]
