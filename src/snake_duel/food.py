"""Food pellet spawning logic."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from snake_duel.grid import Position, manhattan

if TYPE_CHECKING:
    from snake_duel.grid import Grid
    from snake_duel.snake import Color, Snake

logger = logging.getLogger(__name__)

FOOD_COLOR: Color = (255, 0, 0)


@dataclass(frozen=True)
class Food:
    """A single pellet on the board."""

    position: Position
    color: Color = FOOD_COLOR


class FoodSet:
    """Ordered collection of pellets with a random spawn policy.

    Spawning draws one uniformly random cell per call and gives up if a
    snake sits there; callers retry on a later tick. Uses a seeded NumPy
    RNG for reproducible placement.
    """

    def __init__(
        self,
        grid: Grid,
        max_foods: int = 20,
        rng: np.random.Generator | None = None,
    ) -> None:
        if max_foods < 1:
            raise ValueError("max_foods must be at least 1.")
        self.grid = grid
        self.max_foods = max_foods
        self.rng = rng if rng is not None else np.random.default_rng()
        self.foods: list[Food] = []

    def __len__(self) -> int:
        return len(self.foods)

    def __iter__(self) -> Iterator[Food]:
        return iter(self.foods)

    def __getitem__(self, index: int) -> Food:
        return self.foods[index]

    @property
    def positions(self) -> list[Position]:
        return [f.position for f in self.foods]

    def spawn_one(self, snakes: Iterable[Snake | None]) -> Food | None:
        """Try to place one pellet on a random cell.

        Returns the new pellet, or ``None`` if the drawn cell is occupied by
        one of *snakes* (``None`` entries are skipped).
        """
        live = [s for s in snakes if s is not None]
        occupied = set().union(*(s.body for s in live))
        if len(occupied) >= self.grid.rows * self.grid.cols:
            logger.warning("No free cells available for food spawning.")

        pos = self.grid.random_cell(self.rng)
        if any(s.occupies(pos) for s in live):
            logger.debug("Food spawn at %s dropped: cell occupied.", pos)
            return None
        food = Food(pos)
        self.foods.append(food)
        return food

    def remove_at(self, index: int) -> Food:
        """Remove and return the pellet at *index*."""
        return self.foods.pop(index)

    def nearest(self, pos: Position) -> Food | None:
        """Return the pellet closest to *pos* by Manhattan distance.

        The earliest pellet wins ties.
        """
        best: Food | None = None
        best_dist = 0
        for food in self.foods:
            dist = manhattan(pos, food.position)
            if best is None or dist < best_dist:
                best, best_dist = food, dist
        return best

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {
            "positions": [list(p) for p in self.positions],
            "max_foods": self.max_foods,
        }
