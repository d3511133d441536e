"""Fixed-cadence tick loop, input handling and restarts for one player."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from snake_duel.clock import Clock, MonotonicClock
from snake_duel.config import GameConfig
from snake_duel.game import Game
from snake_duel.render import RenderSnapshot
from snake_duel.snake import Direction

logger = logging.getLogger(__name__)

DEFAULT_TICK_MS = 100


class GameSession:
    """Owns the current :class:`Game` and drives it from a timer.

    Ticks and input run on one event loop; each step holds ``lock`` so a
    renderer never observes a half-applied tick. After every timer tick
    ``on_frame`` receives a fresh snapshot.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        clock: Clock | None = None,
        tick_ms: int = DEFAULT_TICK_MS,
        on_frame: Callable[[RenderSnapshot], None] | None = None,
    ) -> None:
        if tick_ms < 1:
            raise ValueError("tick_ms must be at least 1.")
        self.config = config or GameConfig()
        self.clock = clock or MonotonicClock()
        self.tick_ms = tick_ms
        self.on_frame = on_frame
        self.game = Game(self.config, clock=self.clock)
        self.lock = asyncio.Lock()
        self.restarts = 0
        self.ticks = 0
        self._running = False

    def handle_input(self, direction: Direction | None) -> None:
        """Route one key press.

        After game over any key (``None`` for a non-arrow key) starts a
        fresh game; otherwise arrows are buffered on the player.
        """
        if self.game.game_over:
            self.restart()
            return
        if direction is not None:
            self.game.set_direction(direction)

    def restart(self) -> None:
        """Replace the current game with a new one."""
        self.game = Game(self.config, clock=self.clock)
        self.restarts += 1
        logger.info("Game restarted (restart #%d).", self.restarts)

    def snapshot(self) -> RenderSnapshot:
        return self.game.snapshot()

    async def tick(self) -> dict:
        """Run one simulation step and publish a frame."""
        async with self.lock:
            state = self.game.step()
            self.ticks += 1
            if self.on_frame is not None:
                self.on_frame(self.game.snapshot())
        return state

    async def run(self, max_ticks: int | None = None) -> None:
        """Tick every ``tick_ms`` until :meth:`stop` or *max_ticks* is reached."""
        interval = self.tick_ms / 1000.0
        self._running = True
        try:
            while self._running:
                if max_ticks is not None and self.ticks >= max_ticks:
                    break
                await asyncio.sleep(interval)
                await self.tick()
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled after %d ticks.", self.ticks)
            raise
        except Exception:
            logger.exception("Tick loop error after %d ticks.", self.ticks)
            raise
        finally:
            self._running = False

    def stop(self) -> None:
        self._running = False
