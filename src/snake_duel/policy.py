"""Greedy steering heuristic for the computer-controlled snake."""

from __future__ import annotations

from typing import TYPE_CHECKING

from snake_duel.grid import Position, is_safe, manhattan, neighbor
from snake_duel.snake import Direction

if TYPE_CHECKING:
    from snake_duel.food import FoodSet
    from snake_duel.grid import Grid
    from snake_duel.snake import Snake

# Candidate order also decides ties in the escape search.
CANDIDATES: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


def choose_target(
    enemy: Snake,
    player: Snake,
    foods: FoodSet,
    threshold: int = 5,
) -> Position:
    """Pick the cell the enemy steers toward.

    With more than *threshold* pellets on the board the enemy chases the
    nearest one; otherwise it hunts the player's centre of mass.
    """
    if len(foods) > threshold:
        nearest = foods.nearest(enemy.head)
        if nearest is not None:
            return nearest.position
    return player.center()


def _escape_direction(enemy: Snake, target: Position, grid: Grid) -> Direction:
    best = enemy.direction
    best_score: int | None = None
    for direction in CANDIDATES:
        if direction is enemy.direction.opposite:
            continue
        if not is_safe(enemy, direction, grid):
            continue
        score = manhattan(neighbor(enemy.head, direction), target)
        if best_score is None or score < best_score:
            best, best_score = direction, score
    return best


def _greedy_direction(head: Position, target: Position) -> Direction:
    d_row = target[0] - head[0]
    d_col = target[1] - head[1]
    if abs(d_col) > abs(d_row):
        return Direction.LEFT if head[1] > target[1] else Direction.RIGHT
    return Direction.UP if head[0] > target[0] else Direction.DOWN


def choose_direction(
    enemy: Snake,
    player: Snake,
    foods: FoodSet,
    grid: Grid,
    threshold: int = 5,
) -> Direction:
    """Return the enemy's direction for the coming tick.

    If the current heading is unsafe, the safe non-reversing direction
    closest to the target wins; with nothing safe the heading is kept.
    Otherwise the enemy closes the larger axis gap to the target without
    re-checking safety.
    """
    target = choose_target(enemy, player, foods, threshold)
    if not is_safe(enemy, enemy.direction, grid):
        return _escape_direction(enemy, target, grid)
    return _greedy_direction(enemy.head, target)
