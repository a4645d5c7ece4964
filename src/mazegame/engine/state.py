# src/mazegame/engine/state.py
# GameSession: owns one generated board for the lifetime of a game and is the
# only writer. Renderers read it through the BoardView surface after each move.

from __future__ import annotations

import logging
from typing import Optional

from ..config import DEFAULT, GameConfig
from ..grid import Board, Coord
from ..mapgen.generator import generate_board
from ..rng import IndexSource
from ..tiles import Tile
from . import player

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        *,
        config: GameConfig = DEFAULT,
        rng: Optional[IndexSource] = None,
    ) -> None:
        w = config.width if width is None else width
        h = config.height if height is None else height
        self.board = Board.new(w, h)
        self.exit = generate_board(self.board, rng)
        self.moves = 0

    # ---- BoardView ----
    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def player(self) -> Coord:
        return self.board.player

    @property
    def done(self) -> bool:
        return self.board.done

    def get(self, x: int, y: int) -> Tile:
        return self.board.get(x, y)

    # ---- Input ----
    def move(self, direction: str) -> None:
        was_done = self.board.done
        if player.step(self.board, direction):
            self.moves += 1
        if self.board.done and not was_done:
            logger.info("Maze solved in %d moves", self.moves)

    def move_up(self) -> None:
        self.move("up")

    def move_down(self) -> None:
        self.move("down")

    def move_left(self) -> None:
        self.move("left")

    def move_right(self) -> None:
        self.move("right")
