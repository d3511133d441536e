"""Rule constants for a snake duel."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board size, timers and pacing values for one game.

    The defaults are the game's rules. Smaller boards and fixed seeds are
    mainly useful for tests and headless runs. Supports JSON serialization
    for reproducibility.
    """

    rows: int = 24
    cols: int = 32
    initial_snake_length: int = 3

    # Food
    initial_food_count: int = 20
    max_foods: int = 20
    food_spawn_interval_ms: int = 2000
    food_spawn_interval_step_ms: int = 100
    food_spawn_interval_cap_ms: int = 5000

    # Timers
    starvation_ms: int = 5000
    enemy_respawn_delay_ms: int = 5000

    # Enemy chases food while more than this many pellets remain.
    enemy_food_threshold: int = 5

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.rows < 4 or self.cols < 4:
            raise ValueError("rows and cols must each be at least 4.")
        if self.initial_snake_length < 2:
            raise ValueError("initial_snake_length must be at least 2.")
        if self.max_foods < 1:
            raise ValueError("max_foods must be at least 1.")
        if not 0 <= self.initial_food_count <= self.max_foods:
            raise ValueError("initial_food_count must be between 0 and max_foods.")
        if self.food_spawn_interval_ms < 0 or self.food_spawn_interval_step_ms < 0:
            raise ValueError("food spawn intervals must be non-negative.")
        if self.food_spawn_interval_cap_ms < self.food_spawn_interval_ms:
            raise ValueError(
                "food_spawn_interval_cap_ms must not be below food_spawn_interval_ms."
            )
        if self.starvation_ms <= 0 or self.enemy_respawn_delay_ms < 0:
            raise ValueError("starvation_ms must be positive and respawn delay non-negative.")
        if self.enemy_food_threshold < 0:
            raise ValueError("enemy_food_threshold must be non-negative.")

        occupied: set[tuple[int, int]] = set()
        for row, col in (self.player_start, self.enemy_start):
            # Both snakes start heading right, body trailing to the left.
            for seg in range(self.initial_snake_length):
                c = col - seg
                if not (0 <= row < self.rows and 0 <= c < self.cols):
                    raise ValueError(
                        "initial_snake_length does not fit the configured grid; "
                        "increase grid size or reduce initial_snake_length."
                    )
                if (row, c) in occupied:
                    raise ValueError(
                        "starting snakes overlap for this configuration; "
                        "increase grid size."
                    )
                occupied.add((row, c))

    @property
    def player_start(self) -> tuple[int, int]:
        return 2, 2

    @property
    def enemy_start(self) -> tuple[int, int]:
        return self.rows - 3, self.cols - 3

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
