"""Read-only render snapshot and draw-call list for a game frame.

The game hands a :class:`RenderSnapshot` to whatever surface draws it.
:func:`build_frame` turns a snapshot into pixel rectangles and text in
paint order; a backend only has to fill rectangles and print one string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, Field

from snake_duel.snake import Direction

Color = tuple[int, int, int]


@dataclass(frozen=True)
class RenderConfig:
    """Pixel geometry and palette used when building frames."""

    cell_size: int = 20
    border: int = 20
    head_inset: int = 4
    flash_period_ms: int = 250
    background_color: Color = (0, 0, 0)
    border_color: Color = (50, 50, 50)
    flash_color: Color = (255, 255, 0)
    text_color: Color = (255, 255, 255)
    game_over_text: str = "GAME OVER"

    def __post_init__(self) -> None:
        if self.cell_size < 1:
            raise ValueError("cell_size must be at least 1.")
        if self.border < 0 or self.border % self.cell_size:
            raise ValueError("border must be a non-negative multiple of cell_size.")
        if not 0 <= 2 * self.head_inset < self.cell_size:
            raise ValueError("head_inset must leave part of the cell visible.")
        if self.flash_period_ms < 1:
            raise ValueError("flash_period_ms must be at least 1.")


class FoodView(BaseModel):
    position: tuple[int, int]
    color: Color


class SnakeView(BaseModel):
    """Body (head first), heading and colour of one snake."""

    body: list[tuple[int, int]] = Field(min_length=1)
    direction: Direction
    color: Color


class RenderSnapshot(BaseModel):
    """Everything a renderer needs from one game state, in cell units."""

    rows: int = Field(ge=1)
    cols: int = Field(ge=1)
    foods: list[FoodView] = Field(default_factory=list)
    player: SnakeView
    enemy: SnakeView | None = None
    game_over: bool = False
    player_impact: tuple[int, int] | None = None
    enemy_impact: tuple[int, int] | None = None


class DrawRect(BaseModel):
    kind: Literal["rect"] = "rect"
    left: int
    top: int
    right: int
    bottom: int
    color: Color


class DrawText(BaseModel):
    """Single-line text centred in the given box."""

    kind: Literal["text"] = "text"
    text: str
    left: int
    top: int
    right: int
    bottom: int
    color: Color


class Frame(BaseModel):
    width: int
    height: int
    calls: list[DrawRect | DrawText] = Field(default_factory=list)

    @property
    def rects(self) -> list[DrawRect]:
        return [c for c in self.calls if isinstance(c, DrawRect)]

    @property
    def texts(self) -> list[DrawText]:
        return [c for c in self.calls if isinstance(c, DrawText)]


def window_size(rows: int, cols: int, config: RenderConfig) -> tuple[int, int]:
    """Return the (width, height) of the window around the playable area."""
    return (
        cols * config.cell_size + 3 * config.border,
        rows * config.cell_size + 4 * config.border,
    )


def cell_rect(pos: tuple[int, int], color: Color, config: RenderConfig) -> DrawRect:
    row, col = pos
    left = config.border + col * config.cell_size
    top = config.border + row * config.cell_size
    return DrawRect(
        left=left,
        top=top,
        right=left + config.cell_size,
        bottom=top + config.cell_size,
        color=color,
    )


def head_rect(
    head: tuple[int, int],
    direction: Direction,
    color: Color,
    config: RenderConfig,
) -> DrawRect:
    """Head cell inset on every side except the one facing the neck.

    The flush side sits opposite the direction of travel so the head
    visually joins the body.
    """
    inset = config.head_inset
    left_in = top_in = right_in = bottom_in = inset
    if direction is Direction.UP:
        bottom_in = 0
    elif direction is Direction.DOWN:
        top_in = 0
    elif direction is Direction.LEFT:
        right_in = 0
    else:
        left_in = 0

    cell = cell_rect(head, color, config)
    return DrawRect(
        left=cell.left + left_in,
        top=cell.top + top_in,
        right=cell.right - right_in,
        bottom=cell.bottom - bottom_in,
        color=color,
    )


def flash_on(now_ms: int, config: RenderConfig) -> bool:
    """Whether the game-over head shows the flash colour at *now_ms*."""
    return (now_ms // config.flash_period_ms) % 2 == 0


def _border_rects(rows: int, cols: int, config: RenderConfig) -> list[DrawRect]:
    width, height = window_size(rows, cols, config)
    size = config.cell_size
    margin = config.border // size
    rects: list[DrawRect] = []
    for r in range(height // size):
        for c in range(width // size):
            inside = margin <= r < margin + rows and margin <= c < margin + cols
            if inside:
                continue
            rects.append(DrawRect(
                left=c * size,
                top=r * size,
                right=c * size + size,
                bottom=r * size + size,
                color=config.border_color,
            ))
    return rects


def _snake_rects(
    snake: SnakeView,
    config: RenderConfig,
    head_color: Color | None = None,
) -> list[DrawRect]:
    rects = [cell_rect(seg, snake.color, config) for seg in snake.body[1:]]
    rects.append(head_rect(
        snake.body[0], snake.direction, head_color or snake.color, config,
    ))
    return rects


def build_frame(
    snapshot: RenderSnapshot,
    now_ms: int,
    config: RenderConfig | None = None,
) -> Frame:
    """Translate a snapshot into draw calls in paint order."""
    cfg = config or RenderConfig()
    width, height = window_size(snapshot.rows, snapshot.cols, cfg)
    frame = Frame(width=width, height=height)

    frame.calls.append(DrawRect(
        left=0, top=0, right=width, bottom=height, color=cfg.background_color,
    ))
    frame.calls.extend(_border_rects(snapshot.rows, snapshot.cols, cfg))
    frame.calls.extend(
        cell_rect(food.position, food.color, cfg) for food in snapshot.foods
    )

    if snapshot.enemy is not None:
        frame.calls.extend(_snake_rects(snapshot.enemy, cfg))

    head_color = None
    if snapshot.game_over and flash_on(now_ms, cfg):
        head_color = cfg.flash_color
    frame.calls.extend(_snake_rects(snapshot.player, cfg, head_color))

    if snapshot.game_over:
        frame.calls.append(DrawText(
            text=cfg.game_over_text,
            left=0,
            top=0,
            right=width,
            bottom=height,
            color=cfg.text_color,
        ))
    return frame
