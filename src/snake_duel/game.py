"""Tick-based duel engine: player snake versus computer snake."""

from __future__ import annotations

import logging

import numpy as np

from snake_duel.clock import Clock, MonotonicClock
from snake_duel.config import GameConfig
from snake_duel.food import FoodSet
from snake_duel.grid import Grid, Position
from snake_duel.policy import choose_direction
from snake_duel.render import FoodView, RenderSnapshot, SnakeView
from snake_duel.snake import ENEMY_COLOR, PLAYER_COLOR, Direction, Snake

logger = logging.getLogger(__name__)


class Game:
    """One duel between the player and a single computer-controlled snake.

    The game owns the grid, both snakes and the food set. Each call to
    :meth:`step` advances the game by one tick and returns the updated
    state dictionary. Losing is a state (``game_over``), never an
    exception; the enemy is ``None`` while waiting to respawn.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        clock: Clock | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        cfg = config or GameConfig()
        self.config = cfg
        self.clock = clock or MonotonicClock()
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)
        self.grid = Grid(rows=cfg.rows, cols=cfg.cols)

        now = self.clock.now_ms()
        self.player = Snake(
            *cfg.player_start,
            Direction.RIGHT,
            length=cfg.initial_snake_length,
            now_ms=now,
            color=PLAYER_COLOR,
        )
        self.enemy: Snake | None = Snake(
            *cfg.enemy_start,
            Direction.RIGHT,
            length=cfg.initial_snake_length,
            now_ms=now,
            color=ENEMY_COLOR,
        )
        self.enemy_respawn_at: int | None = None

        self.foods = FoodSet(self.grid, max_foods=cfg.max_foods, rng=self.rng)
        for _ in range(cfg.initial_food_count):
            self.foods.spawn_one((self.player, self.enemy))

        self.food_spawn_interval_ms = cfg.food_spawn_interval_ms
        self.last_food_spawn_at = now

        self.tick = 0
        self.game_over = False
        self.player_impact: Position | None = None
        self.enemy_impact: Position | None = None

    @property
    def highlight_player_impact(self) -> bool:
        return self.player_impact is not None

    @property
    def highlight_enemy_impact(self) -> bool:
        return self.enemy_impact is not None

    def set_direction(self, direction: Direction) -> None:
        """Buffer a player turn for the next step."""
        self.player.set_pending_direction(direction)

    def step(self) -> dict:
        """Advance the game by one tick.

        Returns the full game state as a serializable dict.
        """
        if self.game_over:
            return self.get_state()

        now = self.clock.now_ms()
        self.tick += 1

        self.player.advance()
        if self.enemy is not None:
            self.enemy.direction = choose_direction(
                self.enemy,
                self.player,
                self.foods,
                self.grid,
                self.config.enemy_food_threshold,
            )
            self.enemy.advance()

        # --- walls ---
        if not self.grid.in_bounds(self.player.head):
            self._end_game(self.player.head, "wall")
            return self.get_state()
        if self.enemy is not None:
            self.enemy.body[0] = self.grid.clamp(self.enemy.head)

        self._consume_food(now)
        self._resolve_collisions(now)
        self._apply_starvation(now)
        self._pace_food_spawn(now)
        self._maybe_respawn_enemy(now)

        return self.get_state()

    def _consume_food(self, now: int) -> None:
        """Let each head eat the pellet it landed on, scanning foods once."""
        i = 0
        while i < len(self.foods):
            pos = self.foods[i].position
            if pos == self.player.head:
                self.player.grow(now)
                self.foods.remove_at(i)
            elif self.enemy is not None and pos == self.enemy.head:
                self.enemy.grow(now)
                self.foods.remove_at(i)
            else:
                i += 1

    def _resolve_collisions(self, now: int) -> None:
        """Apply the first matching collision rule; later rules are skipped."""
        player = self.player
        if player.self_collision():
            self._end_game(player.head, "self collision")
            return

        enemy = self.enemy
        if enemy is None:
            return
        if enemy.self_collision():
            self._kill_enemy(now, "self collision")
        elif enemy.body_occupies(player.head):
            self._end_game(player.head, "hit enemy body")
        elif player.head == enemy.head:
            # Head-on: only the player loses.
            self._end_game(player.head, "head-on collision")
        elif player.body_occupies(enemy.head):
            self._kill_enemy(now, "hit player body")

    def _apply_starvation(self, now: int) -> None:
        for snake in (self.player, self.enemy):
            if snake is None:
                continue
            if now - snake.last_fed_at > self.config.starvation_ms:
                snake.shrink()
                snake.last_fed_at = now
                logger.debug(
                    "Snake starved at tick %d; length now %d.",
                    self.tick, len(snake),
                )

    def _pace_food_spawn(self, now: int) -> None:
        cfg = self.config
        if now - self.last_food_spawn_at <= self.food_spawn_interval_ms:
            return
        if len(self.foods) >= self.foods.max_foods:
            return
        self.foods.spawn_one((self.player, self.enemy))
        self.last_food_spawn_at = now
        self.food_spawn_interval_ms = min(
            self.food_spawn_interval_ms + cfg.food_spawn_interval_step_ms,
            cfg.food_spawn_interval_cap_ms,
        )

    def _maybe_respawn_enemy(self, now: int) -> None:
        if self.enemy is not None or self.enemy_respawn_at is None:
            return
        if now < self.enemy_respawn_at:
            return

        row, col = self.respawn_position()
        direction = self._direction_to_center((row, col))
        self.enemy = Snake(
            row,
            col,
            direction,
            length=self.config.initial_snake_length,
            now_ms=now,
            color=ENEMY_COLOR,
        )
        self.enemy_respawn_at = None
        logger.info(
            "Enemy respawned at %s heading %s (tick %d).",
            (row, col), direction.name, self.tick,
        )

    def respawn_position(self) -> Position:
        """Corner cell diagonally across from the player's quadrant."""
        head_row, head_col = self.player.head
        rows, cols = self.grid.rows, self.grid.cols
        col = cols - 3 if head_col < cols // 2 else 1
        row = rows - 3 if head_row < rows // 2 else 1
        return row, col

    def _direction_to_center(self, pos: Position) -> Direction:
        center_row, center_col = self.grid.center
        d_row = center_row - pos[0]
        d_col = center_col - pos[1]
        if abs(d_col) >= abs(d_row):
            return Direction.RIGHT if d_col > 0 else Direction.LEFT
        return Direction.DOWN if d_row > 0 else Direction.UP

    def _end_game(self, impact: Position, cause: str) -> None:
        """Mark the player as beaten and end the game."""
        self.game_over = True
        self.player_impact = impact
        self.enemy_impact = None
        logger.info(
            "Game over at tick %d (%s) with player length %d.",
            self.tick, cause, len(self.player),
        )

    def _kill_enemy(self, now: int, cause: str) -> None:
        """Remove the enemy and schedule its return."""
        assert self.enemy is not None  # noqa: S101
        self.enemy_impact = self.enemy.head
        self.player_impact = None
        self.enemy = None
        self.enemy_respawn_at = now + self.config.enemy_respawn_delay_ms
        logger.info(
            "Enemy died at tick %d (%s); respawn at %d ms.",
            self.tick, cause, self.enemy_respawn_at,
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "game_over": self.game_over,
            "grid": self.grid.to_dict(),
            "player": self.player.to_dict(),
            "enemy": self.enemy.to_dict() if self.enemy is not None else None,
            "enemy_respawn_at": self.enemy_respawn_at,
            "foods": self.foods.to_dict(),
            "food_spawn_interval_ms": self.food_spawn_interval_ms,
            "player_impact": _as_list(self.player_impact),
            "enemy_impact": _as_list(self.enemy_impact),
        }

    def snapshot(self) -> RenderSnapshot:
        """Build the read-only view handed to a renderer."""
        enemy = None
        if self.enemy is not None:
            enemy = _snake_view(self.enemy)
        return RenderSnapshot(
            rows=self.grid.rows,
            cols=self.grid.cols,
            foods=[
                FoodView(position=f.position, color=f.color) for f in self.foods
            ],
            player=_snake_view(self.player),
            enemy=enemy,
            game_over=self.game_over,
            player_impact=self.player_impact,
            enemy_impact=self.enemy_impact,
        )


def _as_list(pos: Position | None) -> list[int] | None:
    return list(pos) if pos is not None else None


def _snake_view(snake: Snake) -> SnakeView:
    return SnakeView(
        body=list(snake.body),
        direction=snake.direction,
        color=snake.color,
    )
