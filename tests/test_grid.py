"""Tests for the Grid module."""

import numpy as np
import pytest

from snake_duel.grid import Grid, is_safe, manhattan, neighbor
from snake_duel.snake import Direction, Snake


class TestGridInit:
    def test_default_dimensions(self):
        grid = Grid()
        assert grid.rows == 24
        assert grid.cols == 32

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 4"):
            Grid(rows=3, cols=4)
        with pytest.raises(ValueError, match="at least 4"):
            Grid(rows=4, cols=3)

    def test_center(self):
        assert Grid(rows=24, cols=32).center == (12, 16)
        assert Grid(rows=5, cols=7).center == (2, 3)


class TestGridGeometry:
    def test_in_bounds(self):
        grid = Grid(rows=5, cols=6)
        assert grid.in_bounds((0, 0))
        assert grid.in_bounds((4, 5))
        assert not grid.in_bounds((-1, 0))
        assert not grid.in_bounds((0, -1))
        assert not grid.in_bounds((5, 0))
        assert not grid.in_bounds((0, 6))

    def test_clamp_each_axis_independently(self):
        grid = Grid(rows=5, cols=6)
        assert grid.clamp((-1, 3)) == (0, 3)
        assert grid.clamp((2, 6)) == (2, 5)
        assert grid.clamp((7, -4)) == (4, 0)
        assert grid.clamp((2, 2)) == (2, 2)

    def test_neighbor(self):
        assert neighbor((3, 3), Direction.UP) == (2, 3)
        assert neighbor((3, 3), Direction.DOWN) == (4, 3)
        assert neighbor((3, 3), Direction.LEFT) == (3, 2)
        assert neighbor((3, 3), Direction.RIGHT) == (3, 4)

    def test_manhattan(self):
        assert manhattan((0, 0), (3, 4)) == 7
        assert manhattan((5, 1), (2, 3)) == 5
        assert manhattan((2, 2), (2, 2)) == 0

    def test_random_cell_in_bounds(self):
        grid = Grid(rows=4, cols=5)
        rng = np.random.default_rng(0)
        for _ in range(200):
            assert grid.in_bounds(grid.random_cell(rng))

    def test_random_cell_deterministic(self):
        grid = Grid()
        a = [grid.random_cell(np.random.default_rng(7)) for _ in range(3)]
        b = [grid.random_cell(np.random.default_rng(7)) for _ in range(3)]
        assert a == b

    def test_to_dict(self):
        assert Grid(rows=6, cols=8).to_dict() == {"rows": 6, "cols": 8}


class TestIsSafe:
    def test_open_cell_is_safe(self):
        grid = Grid(rows=10, cols=10)
        snake = Snake(5, 5, Direction.RIGHT)
        assert is_safe(snake, Direction.RIGHT, grid)
        assert is_safe(snake, Direction.UP, grid)
        assert is_safe(snake, Direction.DOWN, grid)

    def test_wall_is_unsafe(self):
        grid = Grid(rows=10, cols=10)
        snake = Snake(5, 9, Direction.RIGHT)
        assert not is_safe(snake, Direction.RIGHT, grid)
        top = Snake(0, 5, Direction.RIGHT)
        assert not is_safe(top, Direction.UP, grid)

    def test_neck_is_unsafe(self):
        grid = Grid(rows=10, cols=10)
        snake = Snake(5, 5, Direction.RIGHT)
        assert not is_safe(snake, Direction.LEFT, grid)

    def test_tail_counts_as_occupied(self):
        grid = Grid(rows=10, cols=10)
        snake = Snake(5, 5, Direction.RIGHT, length=4)
        # Curl the body so the tail sits just above the head.
        snake.body = [(5, 5), (5, 4), (4, 4), (4, 5)]
        assert not is_safe(snake, Direction.UP, grid)
