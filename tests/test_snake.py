"""Tests for the Snake module."""

import pytest

from snake_duel.snake import Direction, Snake


class TestDirection:
    def test_opposites(self):
        assert Direction.UP.opposite is Direction.DOWN
        assert Direction.DOWN.opposite is Direction.UP
        assert Direction.LEFT.opposite is Direction.RIGHT
        assert Direction.RIGHT.opposite is Direction.LEFT

    @pytest.mark.parametrize("direction", list(Direction))
    def test_opposite_is_involutive(self, direction):
        assert direction.opposite.opposite is direction
        assert direction.opposite is not direction


class TestSnakeInit:
    def test_default_creation(self):
        snake = Snake(5, 5)
        assert snake.head == (5, 5)
        assert len(snake) == 3
        assert snake.direction == Direction.RIGHT
        assert snake.pending_direction is None

    def test_body_extends_opposite_to_direction(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        assert snake.body == [(5, 5), (5, 4), (5, 3)]

    def test_body_extends_up(self):
        snake = Snake(5, 5, Direction.UP, length=3)
        assert snake.body == [(5, 5), (6, 5), (7, 5)]

    def test_last_fed_at_starts_at_creation(self):
        assert Snake(5, 5, now_ms=1234).last_fed_at == 1234

    def test_minimum_length(self):
        with pytest.raises(ValueError, match="at least 2"):
            Snake(0, 0, length=1)


class TestPendingDirection:
    def test_turn_applied_on_advance(self):
        snake = Snake(5, 5, Direction.RIGHT)
        snake.set_pending_direction(Direction.UP)
        assert snake.direction == Direction.RIGHT
        snake.advance()
        assert snake.direction == Direction.UP
        assert snake.head == (4, 5)
        assert snake.pending_direction is None

    @pytest.mark.parametrize("direction", list(Direction))
    def test_reversal_never_applied(self, direction):
        snake = Snake(5, 5, direction)
        snake.set_pending_direction(direction.opposite)
        snake.advance()
        assert snake.direction == direction

    def test_reversal_does_not_clear_earlier_turn(self):
        snake = Snake(5, 5, Direction.RIGHT)
        snake.set_pending_direction(Direction.DOWN)
        snake.set_pending_direction(Direction.LEFT)
        assert snake.pending_direction == Direction.DOWN

    def test_last_write_wins(self):
        snake = Snake(5, 5, Direction.RIGHT)
        snake.set_pending_direction(Direction.UP)
        snake.set_pending_direction(Direction.DOWN)
        snake.advance()
        assert snake.direction == Direction.DOWN

    def test_pending_consumed_once(self):
        snake = Snake(5, 5, Direction.RIGHT)
        snake.set_pending_direction(Direction.DOWN)
        snake.advance()
        snake.advance()
        assert snake.head == (7, 5)


class TestSnakeMovement:
    def test_next_head(self):
        snake = Snake(5, 5, Direction.RIGHT)
        assert snake.next_head() == (5, 6)

    def test_advance_shifts_every_segment(self):
        snake = Snake(5, 5, Direction.RIGHT, length=4)
        before = list(snake.body)
        snake.advance()
        assert snake.head == (5, 6)
        assert len(snake) == 4
        for i in range(1, len(snake.body)):
            assert snake.body[i] == before[i - 1]

    def test_advance_after_turn_keeps_neck_adjacent(self):
        snake = Snake(5, 5, Direction.RIGHT)
        snake.set_pending_direction(Direction.DOWN)
        old_head = snake.head
        snake.advance()
        assert snake.body[1] == old_head
        assert snake.head == (6, 5)


class TestGrowShrink:
    def test_grow_duplicates_tail(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        tail = snake.tail
        snake.grow(now_ms=500)
        assert len(snake) == 4
        assert snake.body[-1] == tail
        assert snake.body[-2] == tail
        assert snake.last_fed_at == 500

    def test_grown_segment_spreads_on_advance(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        snake.grow(now_ms=0)
        snake.advance()
        assert snake.body == [(5, 6), (5, 5), (5, 4), (5, 3)]

    def test_shrink_removes_tail(self):
        snake = Snake(5, 5, Direction.RIGHT, length=4)
        assert snake.shrink()
        assert snake.body == [(5, 5), (5, 4), (5, 3)]

    def test_shrink_floor(self):
        snake = Snake(5, 5, Direction.RIGHT, length=5)
        for _ in range(10):
            snake.shrink()
            assert len(snake) >= 2
        assert len(snake) == 2
        assert not snake.shrink()


class TestSnakeOccupancy:
    def test_occupies(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        assert snake.occupies((5, 5))
        assert snake.occupies((5, 3))
        assert not snake.occupies((0, 0))

    def test_body_occupies_excludes_head(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        assert not snake.body_occupies((5, 5))
        assert snake.body_occupies((5, 4))

    def test_self_collision(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        assert not snake.self_collision()
        snake.body[0] = (5, 3)
        assert snake.self_collision()


class TestSnakeCenter:
    def test_center_of_straight_snake(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        assert snake.center() == (5, 4)

    def test_center_truncates(self):
        snake = Snake(5, 5, Direction.RIGHT, length=2)
        # Mean column is 4.5.
        assert snake.center() == (5, 4)


class TestSnakeSerialization:
    def test_to_dict(self):
        snake = Snake(5, 5, Direction.RIGHT, length=2, now_ms=10)
        d = snake.to_dict()
        assert d["body"] == [[5, 5], [5, 4]]
        assert d["direction"] == "RIGHT"
        assert d["last_fed_at"] == 10
