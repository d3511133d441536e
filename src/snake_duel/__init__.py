"""Snake Duel: player versus computer snake on a shared grid."""

from snake_duel.clock import ManualClock, MonotonicClock
from snake_duel.config import GameConfig
from snake_duel.food import Food, FoodSet
from snake_duel.game import Game
from snake_duel.grid import Grid
from snake_duel.render import RenderConfig, RenderSnapshot, build_frame
from snake_duel.session import GameSession
from snake_duel.snake import Direction, Snake

__all__ = [
    "Direction",
    "Food",
    "FoodSet",
    "Game",
    "GameConfig",
    "GameSession",
    "Grid",
    "ManualClock",
    "MonotonicClock",
    "RenderConfig",
    "RenderSnapshot",
    "Snake",
    "build_frame",
]
