"""Headless runner for Snake Duel simulations."""

from __future__ import annotations

import argparse
import logging
import sys

from snake_duel.clock import ManualClock
from snake_duel.config import GameConfig
from snake_duel.game import Game
from snake_duel.session import DEFAULT_TICK_MS

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-duel",
        description="Snake Duel headless simulation tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    sim_p = sub.add_parser(
        "simulate", help="Run a game on simulated time with an idle player.",
    )
    sim_p.add_argument("--ticks", type=int, default=600)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--tick-ms", type=int, default=DEFAULT_TICK_MS)

    return parser


def simulate(config: GameConfig, ticks: int, tick_ms: int) -> Game:
    """Step a game *ticks* times, advancing a manual clock by *tick_ms*."""
    clock = ManualClock()
    game = Game(config, clock=clock)
    for _ in range(ticks):
        if game.game_over:
            break
        clock.advance(tick_ms)
        game.step()
    return game


def _run_simulate(args: argparse.Namespace) -> int:
    config = GameConfig.load(args.config) if args.config else GameConfig()
    if args.seed is not None:
        d = config.to_dict()
        d["seed"] = args.seed
        config = GameConfig(**d)

    game = simulate(config, args.ticks, args.tick_ms)
    enemy = (
        f"length {len(game.enemy)}" if game.enemy is not None
        else f"respawning at {game.enemy_respawn_at} ms"
    )
    print(  # noqa: T201
        f"ticks={game.tick} game_over={game.game_over} "
        f"player_length={len(game.player)} enemy={enemy} "
        f"foods={len(game.foods)}"
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-duel`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
