# src/mazegame/engine/player.py
# Movement controller: one-cell steps on the board with wall/bounds rejection
# and exit detection. Invalid moves are silent no-ops.

from __future__ import annotations

import logging
from typing import Dict, Tuple

from ..grid import Board, Coord
from ..tiles import Tile

logger = logging.getLogger(__name__)

_DIRS: Dict[str, Tuple[int, int]] = {
    "left": (-1, 0),
    "right": (1, 0),
    "up": (0, -1),
    "down": (0, 1),
}

DIRECTIONS = tuple(_DIRS)


def _try_step(board: Board, dx: int, dy: int) -> bool:
    """Apply one step; return True when the player actually moved."""
    nx, ny = board.player.x + dx, board.player.y + dy

    # Stepping below zero has no neighbour; past the far edge is out of bounds.
    if nx < 0 or ny < 0 or not board.in_bounds(nx, ny):
        logger.debug("Move to (%d,%d) rejected: outside board", nx, ny)
        return False

    tile = board.get(nx, ny)
    if tile == Tile.EXIT and not board.done:
        board.done = True
        logger.info("Exit reached at (%d,%d)", nx, ny)
    if tile == Tile.WALL:
        logger.debug("Move to (%d,%d) rejected: wall", nx, ny)
        return False

    board.player = Coord(nx, ny)
    return True


def step(board: Board, direction: str) -> bool:
    if direction not in _DIRS:
        logger.debug("Ignoring unknown direction %r", direction)
        return False
    dx, dy = _DIRS[direction]
    return _try_step(board, dx, dy)


def move(board: Board, direction: str) -> None:
    step(board, direction)


def move_up(board: Board) -> None:
    _try_step(board, 0, -1)


def move_down(board: Board) -> None:
    _try_step(board, 0, 1)


def move_left(board: Board) -> None:
    _try_step(board, -1, 0)


def move_right(board: Board) -> None:
    _try_step(board, 1, 0)
