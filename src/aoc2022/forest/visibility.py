from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

type HeightGrid = NDArray[np.int8]


def _validate_grid(heights: HeightGrid) -> None:
    if heights.ndim != 2:
        raise ValueError("height grid must be 2D")
    if heights.size == 0:
        raise ValueError("height grid must be non-empty")


def _visible_from_left(heights: NDArray[np.int16]) -> NDArray[np.bool_]:
    blocking = np.full(heights.shape, -1, dtype=np.int16)
    blocking[:, 1:] = np.maximum.accumulate(heights[:, :-1], axis=1)
    return heights > blocking


def visibility_mask(heights: HeightGrid) -> NDArray[np.bool_]:
    """Mark trees strictly taller than everything between them and some edge."""
    _validate_grid(heights)
    grid = heights.astype(np.int16)
    from_left = _visible_from_left(grid)
    from_right = np.fliplr(_visible_from_left(np.fliplr(grid)))
    from_top = _visible_from_left(grid.T).T
    from_bottom = np.flipud(_visible_from_left(np.flipud(grid).T).T)
    return from_left | from_right | from_top | from_bottom


def count_visible(heights: HeightGrid) -> int:
    return int(np.count_nonzero(visibility_mask(heights)))


def _viewing_distance(line: NDArray[np.int8], height: int) -> int:
    blockers = np.flatnonzero(line >= height)
    if blockers.size:
        return int(blockers[0]) + 1
    return int(line.size)


def scenic_scores(heights: HeightGrid) -> NDArray[np.int64]:
    _validate_grid(heights)
    rows, columns = heights.shape
    scores = np.zeros((rows, columns), dtype=np.int64)
    for row in range(rows):
        for column in range(columns):
            height = int(heights[row, column])
            # looking up, down, left, right; each line ordered outward from the tree
            lines = (
                heights[:row, column][::-1],
                heights[row + 1 :, column],
                heights[row, :column][::-1],
                heights[row, column + 1 :],
            )
            score = 1
            for line in lines:
                score *= _viewing_distance(line, height)
            scores[row, column] = score
    return scores


def best_scenic_score(heights: HeightGrid) -> int:
    return int(scenic_scores(heights).max())


def best_scenic_location(heights: HeightGrid) -> tuple[int, int]:
    """Return ``(row, column)`` of the best tree; ties go to the first in row-major order."""
    scores = scenic_scores(heights)
    row, column = np.unravel_index(int(scores.argmax()), scores.shape)
    return int(row), int(column)
