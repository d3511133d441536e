"""Board geometry for the snake duel."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from snake_duel.snake import Direction, Snake

Position = tuple[int, int]


def neighbor(pos: Position, direction: Direction) -> Position:
    """Return the cell one step from *pos* along *direction*."""
    dr, dc = direction.value
    return pos[0] + dr, pos[1] + dc


def manhattan(a: Position, b: Position) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class Grid:
    """Fixed rectangular playable area.

    Coordinates use (row, col) ordering; the playable cells are
    ``0 <= row < rows`` and ``0 <= col < cols``. Anything else is out of
    bounds (the render layer draws those cells as the border).
    """

    def __init__(self, rows: int = 24, cols: int = 32) -> None:
        if rows < 4 or cols < 4:
            raise ValueError("Grid dimensions must be at least 4×4.")
        self.rows = rows
        self.cols = cols

    @property
    def center(self) -> Position:
        return self.rows // 2, self.cols // 2

    def in_bounds(self, pos: Position) -> bool:
        """Check whether a coordinate lies within the playable area."""
        row, col = pos
        return 0 <= row < self.rows and 0 <= col < self.cols

    def clamp(self, pos: Position) -> Position:
        """Clamp each coordinate independently to the nearest playable cell."""
        row, col = pos
        return (
            min(max(row, 0), self.rows - 1),
            min(max(col, 0), self.cols - 1),
        )

    def random_cell(self, rng: np.random.Generator) -> Position:
        """Pick a uniformly random playable cell."""
        col = int(rng.integers(self.cols))
        row = int(rng.integers(self.rows))
        return row, col

    def to_dict(self) -> dict:
        return {"rows": self.rows, "cols": self.cols}


def is_safe(snake: Snake, direction: Direction, grid: Grid) -> bool:
    """One-step lookahead: can *snake* move along *direction* next tick?

    The trial head is checked against the walls and against the snake's
    current non-head segments. The tail is treated as staying put, so the
    check is conservative.
    """
    trial = neighbor(snake.head, direction)
    if not grid.in_bounds(trial):
        return False
    return not snake.body_occupies(trial)
