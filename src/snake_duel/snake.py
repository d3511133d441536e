"""Snake representation and movement logic."""

from __future__ import annotations

import enum

from snake_duel.grid import Position, neighbor

# Segments kept by shrink(): the head plus one body segment.
MIN_LENGTH = 2

Color = tuple[int, int, int]

PLAYER_COLOR: Color = (0, 255, 0)
ENEMY_COLOR: Color = (0, 0, 255)


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered list of (row, col) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. Segments added by
    :meth:`grow` start on top of the old tail, so neighbouring segments are
    not necessarily adjacent cells.
    """

    def __init__(
        self,
        start_row: int,
        start_col: int,
        direction: Direction = Direction.RIGHT,
        length: int = 3,
        now_ms: int = 0,
        color: Color = PLAYER_COLOR,
    ) -> None:
        if length < MIN_LENGTH:
            raise ValueError(f"Snake length must be at least {MIN_LENGTH}.")
        dr, dc = direction.value
        self.body: list[Position] = [
            (start_row - dr * i, start_col - dc * i) for i in range(length)
        ]
        self.direction = direction
        self.pending_direction: Direction | None = None
        self.last_fed_at = now_ms
        self.color = color

    @property
    def head(self) -> Position:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Position:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def set_pending_direction(self, new_direction: Direction) -> None:
        """Buffer a turn for the next advance, ignoring 180° reversals.

        Only one turn is buffered; a later call overwrites an earlier one.
        """
        if new_direction is self.direction.opposite:
            return
        self.pending_direction = new_direction

    def next_head(self) -> Position:
        """Compute the next head position without moving."""
        return neighbor(self.head, self.direction)

    def advance(self) -> None:
        """Move the snake one step forward.

        A buffered turn is applied first. Every segment then takes its
        predecessor's position and the head steps along ``direction``.
        """
        pending = self.pending_direction
        self.pending_direction = None
        if pending is not None and pending is not self.direction.opposite:
            self.direction = pending

        new_head = self.next_head()
        self.body[1:] = self.body[:-1]
        self.body[0] = new_head

    def grow(self, now_ms: int) -> None:
        """Append a segment on top of the tail and mark the snake as fed."""
        self.body.append(self.tail)
        self.last_fed_at = now_ms

    def shrink(self) -> bool:
        """Drop the tail segment unless at minimum length. Returns True if shrunk."""
        if len(self.body) > MIN_LENGTH:
            self.body.pop()
            return True
        return False

    def occupies(self, pos: Position) -> bool:
        """Check whether any segment sits on *pos*."""
        return pos in self.body

    def body_occupies(self, pos: Position) -> bool:
        """Check whether any non-head segment sits on *pos*."""
        return pos in self.body[1:]

    def self_collision(self) -> bool:
        """Check whether the head overlaps any other body segment."""
        return self.body_occupies(self.head)

    def center(self) -> Position:
        """Integer-truncated mean position of all segments."""
        n = len(self.body)
        row_sum = sum(r for r, _ in self.body)
        col_sum = sum(c for _, c in self.body)
        return int(row_sum / n), int(col_sum / n)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name,
            "last_fed_at": self.last_fed_at,
        }
